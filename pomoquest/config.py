"""Static configuration for PomoQuest.

Durations and XP rates are fixed presets, not user settings.  Only the
data directory and log level can be moved, via environment variables:

    POMOQUEST_HOME        override the app-support directory
    POMOQUEST_LOG_LEVEL   DEBUG | INFO | WARNING | ...
"""

from __future__ import annotations

import os
from pathlib import Path


APP_TITLE = "PomoQuest"

# ── paths ────────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path(
    os.getenv("POMOQUEST_HOME")
    or Path.home() / "Library" / "Application Support" / "PomoQuest"
)
DB_PATH = APP_SUPPORT_DIR / "pomoquest.db"

LOG_DIR = APP_SUPPORT_DIR / "logs"
LOG_FILE = LOG_DIR / "pomoquest.log"
LOG_LEVEL = os.getenv("POMOQUEST_LOG_LEVEL", "INFO").upper()

# ── timer presets (seconds) ─────────────────────────────────────────────────

FOCUS_SECONDS = 25 * 60
SHORT_BREAK_SECONDS = 5 * 60
LONG_BREAK_SECONDS = 15 * 60

TICK_INTERVAL_MS = 1000

# ── progression ─────────────────────────────────────────────────────────────

XP_PER_SESSION = 50
XP_PER_LEVEL = 200

# ── persistence ─────────────────────────────────────────────────────────────

STORAGE_KEY = "pomoquest_state_v1"
