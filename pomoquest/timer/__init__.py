"""Timer package."""

from .engine import (
    TimerEngine,
    TimerMode,
    TimerSnapshot,
    DEFAULT_DURATIONS,
    duration_for,
)
from .ticker import QtTicker, Ticker

__all__ = [
    "TimerEngine",
    "TimerMode",
    "TimerSnapshot",
    "DEFAULT_DURATIONS",
    "duration_for",
    "QtTicker",
    "Ticker",
]
