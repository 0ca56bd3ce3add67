"""Shared pytest fixtures for PomoQuest tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomoquest.database.db import configure_engine, init_db
from pomoquest.gamification.progress import ProgressStore
from pomoquest.timer.engine import TimerEngine

from helpers import ManualTicker, MemorySlot


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def slot():
    return MemorySlot()


@pytest.fixture
def store(qapp, slot):
    """Fresh ProgressStore over an empty in-memory slot."""
    return ProgressStore(slot)


@pytest.fixture
def engine(store):
    """TimerEngine driven by a manual ticker (no real time passes)."""
    return TimerEngine(store, ticker_factory=ManualTicker)
