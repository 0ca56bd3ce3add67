"""State → display model, with no Qt in sight.

``build_view_model`` turns a progress snapshot (and optionally a timer
snapshot) into the exact strings and numbers every display region shows.
``binding.ViewBinder`` then copies a model onto whatever widgets a page
actually has.

Pages word their stats differently, so label templates come in as a
``StatFormats``; badge captions come in two flavours (``CaptionStyle``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..gamification.badges import BADGES, is_unlocked, next_badge
from ..gamification.progress import ProgressState
from ..gamification.progression import (
    level_for_xp, progress_percent, xp_to_next_level,
)
from ..timer.engine import TimerSnapshot


class CaptionStyle(Enum):
    REQUIREMENT = "requirement"   # "Unlocked" / "Requires 3"
    PLAIN = "plain"               # "Unlocked" / "Locked"


@dataclass(frozen=True)
class StatFormats:
    xp: str = "{xp} XP"
    level: str = "Lvl {level}"
    sessions: str = "{completed}"


TIMER_FORMATS = StatFormats()
HOME_FORMATS = StatFormats(xp="XP: {xp}", level="Lvl: {level}", sessions="Pomos: {completed}")
ACHIEVEMENT_FORMATS = StatFormats(xp="XP: {xp}", level="Level {level}", sessions="{completed}")


@dataclass(frozen=True)
class BadgeView:
    key: str
    icon: str
    name: str
    unlocked: bool
    caption: str


@dataclass(frozen=True)
class ViewModel:
    time_text: str | None
    active_mode: str | None
    is_running: bool
    xp_text: str
    level_text: str
    sessions_text: str
    progress_percent: float
    xp_to_next_text: str
    next_badge_text: str
    badges: tuple[BadgeView, ...]


def format_clock(seconds: int) -> str:
    """Seconds → ``MM:SS``."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m:02d}:{s:02d}"


def _badge_caption(threshold: int, unlocked: bool, style: CaptionStyle) -> str:
    if unlocked:
        return "Unlocked"
    if style == CaptionStyle.REQUIREMENT:
        return f"Requires {threshold}"
    return "Locked"


def _next_badge_text(completed: int) -> str:
    badge = next_badge(completed)
    if badge is None:
        return "Every badge unlocked!"
    left = badge.threshold - completed
    noun = "session" if left == 1 else "sessions"
    return f"Next: {badge.icon} {badge.name} in {left} {noun}"


def build_view_model(
    progress: ProgressState,
    timer: TimerSnapshot | None = None,
    formats: StatFormats = TIMER_FORMATS,
    caption_style: CaptionStyle = CaptionStyle.REQUIREMENT,
) -> ViewModel:
    xp = progress.xp
    completed = progress.completed_sessions
    level = level_for_xp(xp)

    badges = tuple(
        BadgeView(
            key=b.key,
            icon=b.icon,
            name=b.name,
            unlocked=is_unlocked(b, completed),
            caption=_badge_caption(
                b.threshold, is_unlocked(b, completed), caption_style,
            ),
        )
        for b in BADGES
    )

    return ViewModel(
        time_text=format_clock(timer.remaining) if timer is not None else None,
        active_mode=timer.mode.value if timer is not None else None,
        is_running=timer.is_running if timer is not None else False,
        xp_text=formats.xp.format(xp=xp),
        level_text=formats.level.format(level=level),
        sessions_text=formats.sessions.format(completed=completed),
        progress_percent=progress_percent(xp),
        xp_to_next_text=f"{xp_to_next_level(xp)} XP to Lvl {level + 1}",
        next_badge_text=_next_badge_text(completed),
        badges=badges,
    )
