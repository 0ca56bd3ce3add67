"""Persisted progress for PomoQuest: XP, session count, last completion.

Storage layout
--------------
One JSON object kept in a key-value slot (see ``database.DatabaseSlot``)::

    {"xp": 150, "completed": 3, "lastCompletedAt": 1718000000000}

``lastCompletedAt`` is milliseconds since the Unix epoch, or ``null``.
Missing fields take their defaults; unknown fields are ignored on load and
dropped on the next save.

Failure policy
--------------
A missing, unreadable or corrupt record is never fatal: ``load`` logs it
and hands back a fresh ``ProgressState``.  Writes are not guarded.

Signals
-------
``ProgressStore`` is a :class:`QObject`:

* **progress_changed(state)**       — after every completed session
* **level_up(old_level, new_level)** — when the derived level rises
* **badge_unlocked(badge)**          — once per badge threshold crossed
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import XP_PER_SESSION
from .badges import newly_unlocked
from .progression import level_for_xp

logger = logging.getLogger(__name__)


class Slot(Protocol):
    def read(self) -> str | None: ...
    def write(self, value: str) -> None: ...


# ── state ─────────────────────────────────────────────────────────────────


@dataclass
class ProgressState:
    xp: int = 0
    completed_sessions: int = 0
    last_completed_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ProgressState:
        """Build a state from the stored JSON object, field by field."""
        return cls(
            xp=_read_count(data, "xp"),
            completed_sessions=_read_count(data, "completed"),
            last_completed_at=_read_timestamp(data, "lastCompletedAt"),
        )

    def to_dict(self) -> dict:
        stamp = None
        if self.last_completed_at is not None:
            stamp = int(self.last_completed_at.timestamp() * 1000)
        return {
            "xp": self.xp,
            "completed": self.completed_sessions,
            "lastCompletedAt": stamp,
        }


def _read_count(data: dict, name: str) -> int:
    value = data.get(name, 0)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.warning("Ignoring invalid %r in stored progress: %r", name, value)
        return 0
    return value


def _read_timestamp(data: dict, name: str) -> datetime | None:
    value = data.get(name)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Ignoring invalid %r in stored progress: %r", name, value)
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        logger.warning("Ignoring out-of-range %r in stored progress: %r", name, value)
        return None


# ── store ─────────────────────────────────────────────────────────────────


class ProgressStore(QObject):
    """Owns the application's single ``ProgressState``.

    The state is loaded once, at construction, and saved right after every
    mutation.  ``record_session_completion`` is the only way XP and the
    session count change.
    """

    progress_changed = pyqtSignal(object)
    level_up = pyqtSignal(int, int)
    badge_unlocked = pyqtSignal(object)

    def __init__(self, slot: Slot, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._slot = slot
        self._state = self.load()

    @property
    def state(self) -> ProgressState:
        return self._state

    def load(self) -> ProgressState:
        """Read the slot, falling back to defaults on any problem."""
        try:
            raw = self._slot.read()
        except Exception as exc:
            logger.warning("Could not read stored progress: %s", exc)
            return ProgressState()

        if not raw:
            logger.debug("No stored progress; starting fresh")
            return ProgressState()

        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.warning("Stored progress is not valid JSON: %s", exc)
            return ProgressState()

        if not isinstance(data, dict):
            logger.warning("Stored progress is not an object: %r", data)
            return ProgressState()

        return ProgressState.from_dict(data)

    def save(self, state: ProgressState | None = None) -> None:
        """Overwrite the slot with the full state."""
        state = state if state is not None else self._state
        self._slot.write(json.dumps(state.to_dict()))
        logger.debug("Saved progress: %s", state)

    def record_session_completion(
        self, now: datetime | None = None,
    ) -> ProgressState:
        """Count one finished focus session, award XP, persist."""
        state = self._state
        old_level = level_for_xp(state.xp)
        before = state.completed_sessions

        state.completed_sessions += 1
        state.last_completed_at = now or datetime.now(timezone.utc)
        state.xp += XP_PER_SESSION
        self.save()

        new_level = level_for_xp(state.xp)
        logger.info(
            "Session #%d complete: +%d XP (total %d, level %d)",
            state.completed_sessions, XP_PER_SESSION, state.xp, new_level,
        )

        self.progress_changed.emit(state)
        if new_level > old_level:
            logger.info("Level up: %d -> %d", old_level, new_level)
            self.level_up.emit(old_level, new_level)
        for badge in newly_unlocked(before, state.completed_sessions):
            logger.info("Badge unlocked: %s", badge.name)
            self.badge_unlocked.emit(badge)

        return state
