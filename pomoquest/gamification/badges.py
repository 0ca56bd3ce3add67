"""Badge catalog for PomoQuest.

Badges are cosmetic and gated purely by the number of completed focus
sessions.  Unlocking is a derived predicate, never stored:

    🌸  Blossom Starter     1 session
    🍬  Sweet Streak        3 sessions
    🎀  Ribbon of Focus     5 sessions
    🌟  Galaxy Mind        10 sessions
    👑  Focus Queen        15 sessions
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Badge:
    key: str
    name: str
    icon: str
    threshold: int   # completed sessions required


BADGES: list[Badge] = [
    Badge(key="first",    name="Blossom Starter", icon="\U0001F338", threshold=1),
    Badge(key="streak3",  name="Sweet Streak",    icon="\U0001F36C", threshold=3),
    Badge(key="ribbon5",  name="Ribbon of Focus", icon="\U0001F380", threshold=5),
    Badge(key="galaxy10", name="Galaxy Mind",     icon="\U0001F31F", threshold=10),
    Badge(key="queen15",  name="Focus Queen",     icon="\U0001F451", threshold=15),
]


def is_unlocked(badge: Badge, completed_sessions: int) -> bool:
    return completed_sessions >= badge.threshold


def unlocked_badges(completed_sessions: int) -> list[Badge]:
    """Badges earned so far, in catalog order."""
    return [b for b in BADGES if is_unlocked(b, completed_sessions)]


def next_badge(completed_sessions: int) -> Badge | None:
    """Return the lowest-threshold badge not yet earned."""
    candidates = [b for b in BADGES if not is_unlocked(b, completed_sessions)]
    if not candidates:
        return None
    return min(candidates, key=lambda b: b.threshold)


def newly_unlocked(before: int, after: int) -> list[Badge]:
    """Badges crossed when the session count moves from *before* to *after*."""
    return [
        b for b in BADGES
        if not is_unlocked(b, before) and is_unlocked(b, after)
    ]
