"""Tick sources for the countdown.

A ticker is built with a callback and exposes ``start()``, ``stop()`` and
``is_active``.  While active it calls the callback once per interval.
``TimerEngine`` owns exactly one ticker; tests swap in a manual one and
drive ``TimerEngine.tick()`` themselves.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer

from ..config import TICK_INTERVAL_MS


class Ticker(Protocol):
    def start(self) -> None: ...
    def stop(self) -> None: ...

    @property
    def is_active(self) -> bool: ...


class QtTicker(QObject):
    """Repeating ``QTimer`` firing every ``TICK_INTERVAL_MS``."""

    def __init__(
        self,
        callback: Callable[[], None],
        parent: QObject | None = None,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(callback)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def start(self) -> None:
        self._qt_timer.start()

    def stop(self) -> None:
        self._qt_timer.stop()
