"""Timer state machine for PomoQuest.

Modes
-----
FOCUS         25-min countdown; completing it earns XP.
SHORT_BREAK    5-min countdown.
LONG_BREAK    15-min countdown.

The three modes behave identically while counting; they differ only in
duration and in what happens at zero.  ``is_running`` is orthogonal to
the mode.

Transitions
-----------
select_mode(m)   stop, switch to *m*, refill the clock
start()          begin ticking (no-op if already running)
pause()          stop ticking, keep the remaining seconds
reset()          stop, refill the clock for the current mode
tick()           one second down; at zero → completion

Completion
----------
Focus → record the session (XP + count) and announce it.
Break → announce the end of the break.
Either way the machine returns to FOCUS with a full clock and waits.
Breaks are never chained automatically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import (
    FOCUS_SECONDS, SHORT_BREAK_SECONDS, LONG_BREAK_SECONDS, XP_PER_SESSION,
)
from ..gamification.progress import ProgressStore
from .ticker import QtTicker, Ticker

logger = logging.getLogger(__name__)


# ── modes ─────────────────────────────────────────────────────────────────


class TimerMode(Enum):
    FOCUS = "pomodoro"
    SHORT_BREAK = "short"
    LONG_BREAK = "long"


DEFAULT_DURATIONS: dict[TimerMode, int] = {
    TimerMode.FOCUS: FOCUS_SECONDS,
    TimerMode.SHORT_BREAK: SHORT_BREAK_SECONDS,
    TimerMode.LONG_BREAK: LONG_BREAK_SECONDS,
}

FOCUS_COMPLETE_NOTICE = f"Pomodoro complete! +{XP_PER_SESSION} XP \U0001F338"
BREAK_COMPLETE_NOTICE = "Break is over — back to focus!"


def duration_for(mode: TimerMode) -> int:
    return DEFAULT_DURATIONS[mode]


@dataclass(frozen=True)
class TimerSnapshot:
    mode: TimerMode
    remaining: int
    is_running: bool
    duration: int


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro countdown.

    Signals
    -------
    changed(snapshot: TimerSnapshot)
        Emitted whenever the display should be refreshed.
    running_changed(is_running: bool)
        Emitted when the countdown starts or stops.
    notice(text: str)
        A user-visible message (session done / break over).
    session_completed(mode: TimerMode)
        Emitted when any countdown reaches zero.
    """

    changed = pyqtSignal(object)
    running_changed = pyqtSignal(bool)
    notice = pyqtSignal(str)
    session_completed = pyqtSignal(object)

    def __init__(
        self,
        store: ProgressStore,
        parent: QObject | None = None,
        *,
        ticker_factory: Callable[..., Ticker] = QtTicker,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._mode: TimerMode = TimerMode.FOCUS
        self._remaining: int = duration_for(TimerMode.FOCUS)
        self._running: bool = False
        self._ticker: Ticker = ticker_factory(self.tick, self)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> TimerMode:
        return self._mode

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def duration(self) -> int:
        """Full length of the current mode."""
        return duration_for(self._mode)

    @property
    def is_running(self) -> bool:
        return self._running

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            mode=self._mode,
            remaining=self._remaining,
            is_running=self._running,
            duration=self.duration,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_mode(self, mode: TimerMode | str) -> None:
        """Switch modes.  Always stops and refills the clock."""
        mode = TimerMode(mode)
        self._stop()
        self._mode = mode
        self._remaining = duration_for(mode)
        logger.debug("Mode -> %s", mode.value)
        self._notify()

    def start(self) -> None:
        """Begin (or resume) counting down.  No-op if already running."""
        if self._running:
            return
        self._running = True
        self._ticker.start()
        logger.debug("Started %s at %ds", self._mode.value, self._remaining)
        self.running_changed.emit(True)
        self._notify()

    def pause(self) -> None:
        """Stop ticking; ``remaining`` is kept so ``start()`` resumes."""
        if not self._running:
            return
        self._stop()
        logger.debug("Paused %s at %ds", self._mode.value, self._remaining)
        self._notify()

    def toggle(self) -> None:
        if self._running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Refill the clock for the current mode (mode is kept)."""
        self._stop()
        self._remaining = duration_for(self._mode)
        self._notify()

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self._running:
            return
        self._remaining -= 1
        if self._remaining <= 0:
            self._remaining = 0
            self._stop()
            self._on_complete()
        else:
            self._notify()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _stop(self) -> None:
        self._ticker.stop()
        if self._running:
            self._running = False
            self.running_changed.emit(False)

    def _on_complete(self) -> None:
        finished = self._mode
        if finished == TimerMode.FOCUS:
            self._store.record_session_completion()
            self.notice.emit(FOCUS_COMPLETE_NOTICE)
        else:
            self.notice.emit(BREAK_COMPLETE_NOTICE)
        logger.info("Finished %s countdown", finished.value)
        self.session_completed.emit(finished)
        self.select_mode(TimerMode.FOCUS)

    def _notify(self) -> None:
        self.changed.emit(self.snapshot())
