"""Shared test helpers for PomoQuest."""

from pomoquest.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualTicker:
    """Stand-in for QtTicker: records start/stop, fires only on demand."""

    def __init__(self, callback, parent=None):
        self._callback = callback
        self.is_active = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.is_active = True
        self.starts += 1

    def stop(self):
        self.is_active = False
        self.stops += 1

    def fire(self, times: int = 1):
        for _ in range(times):
            if self.is_active:
                self._callback()


class MemorySlot:
    """In-memory key-value slot (same read/write shape as DatabaseSlot)."""

    def __init__(self, value: str | None = None):
        self.value = value
        self.writes: list[str] = []

    def read(self) -> str | None:
        return self.value

    def write(self, value: str) -> None:
        self.value = value
        self.writes.append(value)


def complete_session(engine: TimerEngine) -> None:
    """Fast-complete the current countdown by jumping to the last tick."""
    if not engine.is_running:
        engine.start()
    engine._remaining = 1
    engine.tick()
