"""Main application window for PomoQuest."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QTabWidget, QStatusBar,
)

from .config import APP_TITLE
from .gamification.badges import Badge
from .gamification.progress import ProgressStore
from .timer.engine import TimerEngine, TimerMode
from .ui.notice_toast import NoticeToast
from .ui.pages import HomePage, TimerPage, AchievementsPage
from .ui.styles import build_stylesheet

logger = logging.getLogger(__name__)

_MODE_KEYS: dict[int, TimerMode] = {
    Qt.Key.Key_1.value: TimerMode.FOCUS,
    Qt.Key.Key_2.value: TimerMode.SHORT_BREAK,
    Qt.Key.Key_3.value: TimerMode.LONG_BREAK,
}


class PomoQuestApp(QMainWindow):
    """Main application window: Home / Focus / Achievements tabs."""

    def __init__(
        self,
        store: ProgressStore,
        engine: TimerEngine | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(480, 680)
        self.resize(520, 760)
        self.setStyleSheet(build_stylesheet())

        self._store = store
        self._engine = engine if engine is not None else TimerEngine(store, self)

        # Level-ups and badges arrive just before the completion notice;
        # they ride along as its detail line.
        self._pending_details: list[str] = []

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(16, 12, 16, 12)

        self._tabs = QTabWidget(central)
        root_layout.addWidget(self._tabs)

        self._home_page = HomePage(self._tabs)
        self._timer_page = TimerPage(self._engine, self._tabs)
        self._achievements_page = AchievementsPage(self._tabs)
        self._tabs.addTab(self._home_page, "Home")
        self._tabs.addTab(self._timer_page, "Focus")
        self._tabs.addTab(self._achievements_page, "Achievements")
        self._tabs.setCurrentWidget(self._timer_page)

        self._toast = NoticeToast(central)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready to focus!")

        # ── wire signals ──────────────────────────────────────────────
        self._engine.changed.connect(self.refresh)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.notice.connect(self._on_notice)
        self._engine.session_completed.connect(self._on_session_completed)
        self._store.progress_changed.connect(self.refresh)
        self._store.level_up.connect(self._on_level_up)
        self._store.badge_unlocked.connect(self._on_badge_unlocked)

        self.refresh()

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def pages(self) -> tuple[HomePage, TimerPage, AchievementsPage]:
        return (self._home_page, self._timer_page, self._achievements_page)

    @property
    def toast(self) -> NoticeToast:
        return self._toast

    # ── rendering ─────────────────────────────────────────────────────

    def refresh(self, *_args) -> None:
        """Push the current progress + timer state into every page."""
        progress = self._store.state
        timer = self._engine.snapshot()
        for page in self.pages:
            page.refresh(progress, timer)

    # ── slots ─────────────────────────────────────────────────────────

    def _on_running_changed(self, running: bool) -> None:
        if not running:
            self._status_bar.showMessage("Timer stopped")
        elif self._engine.mode == TimerMode.FOCUS:
            self._status_bar.showMessage("Focusing…")
        else:
            self._status_bar.showMessage("On a break…")

    def _on_level_up(self, old_level: int, new_level: int) -> None:
        self._pending_details.append(f"Level {new_level} reached!")

    def _on_badge_unlocked(self, badge: Badge) -> None:
        self._pending_details.append(f"Badge unlocked: {badge.icon} {badge.name}")

    def _on_notice(self, text: str) -> None:
        detail = "  ·  ".join(self._pending_details)
        self._pending_details.clear()
        logger.debug("Notice: %s %s", text, detail)
        self._toast.show_notice(text, detail)
        self._status_bar.showMessage(text)

    def _on_session_completed(self, mode: TimerMode) -> None:
        if mode == TimerMode.FOCUS:
            self._status_bar.showMessage(
                "Nice work! Press 2 for a short break or 3 for a long one."
            )
        else:
            self._status_bar.showMessage("Press Space to start focusing.")

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._engine.pause()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if hasattr(self, "_toast"):
            self._toast.reposition()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space: start/pause.  Escape: reset.  1/2/3: pick a mode."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._engine.toggle()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._engine.reset()
            event.accept()
            return
        if key in _MODE_KEYS and not event.modifiers():
            self._engine.select_mode(_MODE_KEYS[key])
            event.accept()
            return
        super().keyPressEvent(event)
