"""PomoQuest — a Pomodoro timer that levels you up."""

__version__ = "0.1.0"
