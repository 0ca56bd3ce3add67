"""XP and leveling arithmetic: a flat curve.

Every level costs the same ``XP_PER_LEVEL`` (200 XP), and every completed
focus session pays ``XP_PER_SESSION`` (50 XP), so four pomodoros make a
level.  Levels start at 1, never 0.

All functions here are pure and take the running XP total.
"""

from __future__ import annotations

from ..config import XP_PER_LEVEL


def level_for_xp(xp: int, xp_per_level: int = XP_PER_LEVEL) -> int:
    """Return the level a player is at given their total XP."""
    return xp // xp_per_level + 1


def xp_into_level(xp: int, xp_per_level: int = XP_PER_LEVEL) -> int:
    """XP earned since the current level began."""
    return xp % xp_per_level


def xp_to_next_level(xp: int, xp_per_level: int = XP_PER_LEVEL) -> int:
    """XP still needed to reach the next level."""
    return xp_per_level - xp_into_level(xp, xp_per_level)


def progress_percent(xp: int, xp_per_level: int = XP_PER_LEVEL) -> float:
    """Fill of the XP bar, 0 ≤ result < 100."""
    return 100 * xp_into_level(xp, xp_per_level) / xp_per_level
