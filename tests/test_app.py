"""Integration tests for the main window."""

from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from pomoquest.app import PomoQuestApp
from pomoquest.timer.engine import (
    TimerMode, FOCUS_COMPLETE_NOTICE, BREAK_COMPLETE_NOTICE,
)

from helpers import complete_session


def _window(store, engine):
    return PomoQuestApp(store, engine)


class TestWindow:

    def test_initial_render(self, store, engine):
        win = _window(store, engine)
        home, timer, ach = win.pages
        assert timer.regions.time_label.text() == "25:00"
        assert home.regions.sessions_label.text() == "Pomos: 0"
        assert ach.regions.xp_label.text() == "XP: 0"

    def test_ticks_refresh_clock(self, store, engine):
        win = _window(store, engine)
        engine.start()
        engine._ticker.fire(3)
        assert win.pages[1].regions.time_label.text() == "24:57"

    def test_focus_completion_updates_every_page(self, store, engine):
        win = _window(store, engine)
        complete_session(engine)
        home, timer, ach = win.pages
        assert home.regions.sessions_label.text() == "Pomos: 1"
        assert timer.regions.xp_label.text() == "50 XP"
        assert ach.regions.badge_grid.cards[0].caption == "Unlocked"
        assert timer.regions.time_label.text() == "25:00"

    def test_focus_completion_notice(self, store, engine):
        win = _window(store, engine)
        complete_session(engine)
        assert win.toast.text == FOCUS_COMPLETE_NOTICE
        assert "Blossom Starter" in win.toast.detail

    def test_level_up_in_notice_detail(self, store, engine):
        win = _window(store, engine)
        for _ in range(4):
            complete_session(engine)
        assert "Level 2 reached!" in win.toast.detail

    def test_break_notice(self, store, engine):
        win = _window(store, engine)
        engine.select_mode(TimerMode.SHORT_BREAK)
        complete_session(engine)
        assert win.toast.text == BREAK_COMPLETE_NOTICE
        assert win.toast.detail == ""
        assert store.state.completed_sessions == 0

    def test_status_hint_after_focus(self, store, engine):
        win = _window(store, engine)
        complete_session(engine)
        assert win.statusBar().currentMessage() == (
            "Nice work! Press 2 for a short break or 3 for a long one."
        )

    def test_status_hint_after_break(self, store, engine):
        win = _window(store, engine)
        engine.select_mode(TimerMode.LONG_BREAK)
        complete_session(engine)
        assert win.statusBar().currentMessage() == "Press Space to start focusing."

    def test_toast_recentres_in_parent(self, store, engine):
        win = _window(store, engine)
        central = win.centralWidget()
        central.resize(600, 700)
        win.toast.reposition()
        assert win.toast.x() == (600 - win.toast.width()) // 2
        assert win.toast.y() == 60

    def test_default_engine(self, store):
        win = PomoQuestApp(store)
        assert win.engine.mode == TimerMode.FOCUS


class TestKeyboard:

    def test_space_toggles(self, store, engine):
        win = _window(store, engine)
        QTest.keyClick(win, Qt.Key.Key_Space)
        assert engine.is_running
        QTest.keyClick(win, Qt.Key.Key_Space)
        assert not engine.is_running

    def test_escape_resets(self, store, engine):
        win = _window(store, engine)
        engine.start()
        engine._ticker.fire(10)
        QTest.keyClick(win, Qt.Key.Key_Escape)
        assert engine.remaining == 25 * 60
        assert not engine.is_running

    def test_number_keys_pick_mode(self, store, engine):
        win = _window(store, engine)
        QTest.keyClick(win, Qt.Key.Key_2)
        assert engine.mode == TimerMode.SHORT_BREAK
        QTest.keyClick(win, Qt.Key.Key_3)
        assert engine.mode == TimerMode.LONG_BREAK
        QTest.keyClick(win, Qt.Key.Key_1)
        assert engine.mode == TimerMode.FOCUS
