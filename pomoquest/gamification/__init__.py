"""Gamification package."""

from .progression import (
    level_for_xp,
    xp_into_level,
    xp_to_next_level,
    progress_percent,
)
from .badges import (
    Badge,
    BADGES,
    is_unlocked,
    unlocked_badges,
    next_badge,
    newly_unlocked,
)
from .progress import ProgressState, ProgressStore

__all__ = [
    "level_for_xp",
    "xp_into_level",
    "xp_to_next_level",
    "progress_percent",
    "Badge",
    "BADGES",
    "is_unlocked",
    "unlocked_badges",
    "next_badge",
    "newly_unlocked",
    "ProgressState",
    "ProgressStore",
]
