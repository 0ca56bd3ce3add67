"""Copy a ``ViewModel`` onto the widgets a page happens to have.

Every slot in ``PageRegions`` is optional: a stats-only page leaves the
timer slots empty and ``ViewBinder.render`` simply skips them.  Rendering
is one-way (state → widgets) and safe to repeat on every tick.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtWidgets import QAbstractButton, QLabel, QProgressBar

from ..gamification.progress import ProgressState
from ..timer.engine import TimerSnapshot
from .badge_grid import BadgeGrid
from .view import (
    CaptionStyle, StatFormats, TIMER_FORMATS, ViewModel, build_view_model,
)


@dataclass
class PageRegions:
    """Named display regions.  ``None`` means "not on this page"."""

    time_label: QLabel | None = None
    start_button: QAbstractButton | None = None
    pause_button: QAbstractButton | None = None
    reset_button: QAbstractButton | None = None
    mode_buttons: dict[str, QAbstractButton] = field(default_factory=dict)
    xp_label: QLabel | None = None
    level_label: QLabel | None = None
    xp_bar: QProgressBar | None = None
    sessions_label: QLabel | None = None
    xp_to_next_label: QLabel | None = None
    next_badge_label: QLabel | None = None
    badge_grid: BadgeGrid | None = None


class ViewBinder:
    def __init__(
        self,
        regions: PageRegions,
        formats: StatFormats = TIMER_FORMATS,
        caption_style: CaptionStyle = CaptionStyle.REQUIREMENT,
    ) -> None:
        self.regions = regions
        self.formats = formats
        self.caption_style = caption_style

    def render(
        self,
        progress: ProgressState,
        timer: TimerSnapshot | None = None,
    ) -> ViewModel:
        model = build_view_model(
            progress, timer, self.formats, self.caption_style,
        )
        r = self.regions

        # ── timer ────────────────────────────────────────────────────
        if model.time_text is not None:
            if r.time_label is not None:
                r.time_label.setText(model.time_text)
            for mode_id, button in r.mode_buttons.items():
                button.setChecked(mode_id == model.active_mode)
            if r.start_button is not None:
                r.start_button.setEnabled(not model.is_running)
            if r.pause_button is not None:
                r.pause_button.setEnabled(model.is_running)

        # ── stats ────────────────────────────────────────────────────
        if r.xp_label is not None:
            r.xp_label.setText(model.xp_text)
        if r.level_label is not None:
            r.level_label.setText(model.level_text)
        if r.xp_bar is not None:
            r.xp_bar.setValue(int(model.progress_percent))
        if r.sessions_label is not None:
            r.sessions_label.setText(model.sessions_text)
        if r.xp_to_next_label is not None:
            r.xp_to_next_label.setText(model.xp_to_next_text)
        if r.next_badge_label is not None:
            r.next_badge_label.setText(model.next_badge_text)

        # ── badges ───────────────────────────────────────────────────
        if r.badge_grid is not None:
            r.badge_grid.set_badges(model.badges)

        return model
