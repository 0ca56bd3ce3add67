"""The three tabs of the main window.

Each page owns a different subset of display regions:

    HomePage          XP / level / session count, XP to next level,
                      next-badge teaser
    TimerPage         clock, controls, mode tabs, XP bar, badge grid
    AchievementsPage  XP / level / session count + full badge grid

All three refresh through the same ``ViewBinder``; only their regions,
label wording and badge captions differ.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QProgressBar, QFrame, QButtonGroup,
)

from ..gamification.progress import ProgressState
from ..timer.engine import TimerEngine, TimerMode, TimerSnapshot
from .badge_grid import BadgeGrid
from .binding import PageRegions, ViewBinder
from .view import (
    CaptionStyle, StatFormats,
    HOME_FORMATS, TIMER_FORMATS, ACHIEVEMENT_FORMATS,
)


MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.FOCUS:       "Pomodoro",
    TimerMode.SHORT_BREAK: "Short Break",
    TimerMode.LONG_BREAK:  "Long Break",
}


def _card(parent: QWidget) -> tuple[QFrame, QVBoxLayout]:
    card = QFrame(parent)
    card.setObjectName("card")
    layout = QVBoxLayout(card)
    layout.setContentsMargins(24, 20, 24, 20)
    layout.setSpacing(10)
    return card, layout


def _xp_bar(parent: QWidget) -> QProgressBar:
    bar = QProgressBar(parent)
    bar.setRange(0, 100)
    bar.setTextVisible(False)
    bar.setFixedHeight(8)
    return bar


class _Page(QWidget):
    """Base: a page is a set of regions plus the binder that fills them."""

    formats: StatFormats = TIMER_FORMATS
    caption_style: CaptionStyle = CaptionStyle.REQUIREMENT

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.regions = PageRegions()
        self._build_ui()
        self.binder = ViewBinder(self.regions, self.formats, self.caption_style)

    def _build_ui(self) -> None:
        raise NotImplementedError

    def refresh(
        self, progress: ProgressState, timer: TimerSnapshot | None = None,
    ) -> None:
        self.binder.render(progress, timer)


# ── home ──────────────────────────────────────────────────────────────────


class HomePage(_Page):
    formats = HOME_FORMATS

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        card, layout = _card(self)
        root.addWidget(card)
        root.addStretch()

        heading = QLabel("Welcome back!", card)
        heading.setObjectName("headingLabel")
        layout.addWidget(heading)

        row = QHBoxLayout()
        row.setSpacing(16)
        self.regions.xp_label = QLabel(card)
        self.regions.xp_label.setObjectName("xpLabel")
        self.regions.level_label = QLabel(card)
        self.regions.level_label.setObjectName("levelLabel")
        self.regions.sessions_label = QLabel(card)
        self.regions.sessions_label.setObjectName("xpLabel")
        row.addWidget(self.regions.xp_label)
        row.addWidget(self.regions.level_label)
        row.addWidget(self.regions.sessions_label)
        row.addStretch()
        layout.addLayout(row)

        self.regions.xp_to_next_label = QLabel(card)
        self.regions.xp_to_next_label.setObjectName("xpLabel")
        layout.addWidget(self.regions.xp_to_next_label)

        self.regions.next_badge_label = QLabel(card)
        self.regions.next_badge_label.setObjectName("teaserLabel")
        layout.addWidget(self.regions.next_badge_label)


# ── timer ─────────────────────────────────────────────────────────────────


class TimerPage(_Page):
    """Clock + controls.  Button clicks go straight to the engine."""

    formats = TIMER_FORMATS
    caption_style = CaptionStyle.REQUIREMENT

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._connect_signals()

    def _build_ui(self) -> None:
        r = self.regions
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(12)

        # ── timer card ───────────────────────────────────────────────
        card, layout = _card(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(card)

        tabs_row = QHBoxLayout()
        tabs_row.setSpacing(8)
        tabs_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        for mode, label in MODE_LABELS.items():
            btn = QPushButton(label, card)
            btn.setObjectName("modeButton")
            btn.setCheckable(True)
            btn.setProperty("mode", mode.value)
            self._mode_group.addButton(btn)
            tabs_row.addWidget(btn)
            r.mode_buttons[mode.value] = btn
        layout.addLayout(tabs_row)

        r.time_label = QLabel("25:00", card)
        r.time_label.setObjectName("timeLabel")
        r.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(r.time_label)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        r.reset_button = QPushButton("Reset", card)
        r.reset_button.setObjectName("dangerButton")
        r.start_button = QPushButton("Start", card)
        r.start_button.setObjectName("primaryButton")
        r.pause_button = QPushButton("Pause", card)
        r.pause_button.setObjectName("secondaryButton")
        btn_row.addWidget(r.reset_button)
        btn_row.addWidget(r.start_button)
        btn_row.addWidget(r.pause_button)
        layout.addLayout(btn_row)

        # ── stats card ───────────────────────────────────────────────
        stats, stats_layout = _card(self)
        root.addWidget(stats)

        top = QHBoxLayout()
        r.level_label = QLabel(stats)
        r.level_label.setObjectName("levelLabel")
        r.xp_label = QLabel(stats)
        r.xp_label.setObjectName("xpLabel")
        r.xp_label.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        top.addWidget(r.level_label)
        top.addStretch()
        top.addWidget(r.xp_label)
        stats_layout.addLayout(top)

        r.xp_bar = _xp_bar(stats)
        stats_layout.addWidget(r.xp_bar)

        done_row = QHBoxLayout()
        done_caption = QLabel("Pomodoros completed:", stats)
        done_caption.setObjectName("xpLabel")
        r.sessions_label = QLabel(stats)
        r.sessions_label.setObjectName("levelLabel")
        done_row.addWidget(done_caption)
        done_row.addWidget(r.sessions_label)
        done_row.addStretch()
        stats_layout.addLayout(done_row)

        r.badge_grid = BadgeGrid(stats)
        stats_layout.addWidget(r.badge_grid)
        root.addStretch()

    def _connect_signals(self) -> None:
        r = self.regions
        r.start_button.clicked.connect(self._engine.start)
        r.pause_button.clicked.connect(self._engine.pause)
        r.reset_button.clicked.connect(self._engine.reset)
        for mode_id, btn in r.mode_buttons.items():
            btn.clicked.connect(
                lambda _checked=False, m=mode_id: self._engine.select_mode(m)
            )


# ── achievements ──────────────────────────────────────────────────────────


class AchievementsPage(_Page):
    formats = ACHIEVEMENT_FORMATS
    caption_style = CaptionStyle.PLAIN

    def _build_ui(self) -> None:
        r = self.regions
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        card, layout = _card(self)
        root.addWidget(card)
        root.addStretch()

        heading = QLabel("Achievements", card)
        heading.setObjectName("headingLabel")
        layout.addWidget(heading)

        row = QHBoxLayout()
        row.setSpacing(16)
        r.xp_label = QLabel(card)
        r.xp_label.setObjectName("xpLabel")
        r.level_label = QLabel(card)
        r.level_label.setObjectName("levelLabel")
        sessions_caption = QLabel("Sessions:", card)
        sessions_caption.setObjectName("xpLabel")
        r.sessions_label = QLabel(card)
        r.sessions_label.setObjectName("levelLabel")
        row.addWidget(r.xp_label)
        row.addWidget(r.level_label)
        row.addWidget(sessions_caption)
        row.addWidget(r.sessions_label)
        row.addStretch()
        layout.addLayout(row)

        r.badge_grid = BadgeGrid(card)
        layout.addWidget(r.badge_grid)
