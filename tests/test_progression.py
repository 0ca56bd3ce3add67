"""Tests for the leveling arithmetic and the badge catalog."""

import pytest

from pomoquest.config import XP_PER_LEVEL, XP_PER_SESSION
from pomoquest.gamification.progression import (
    level_for_xp, xp_into_level, xp_to_next_level, progress_percent,
)
from pomoquest.gamification.badges import (
    BADGES, Badge, is_unlocked, unlocked_badges, next_badge, newly_unlocked,
)


# ═══════════════════════════════════════════════════════════════════════════
#  LEVELING
# ═══════════════════════════════════════════════════════════════════════════


class TestLevelCurve:

    def test_constants(self):
        assert XP_PER_LEVEL == 200
        assert XP_PER_SESSION == 50

    def test_zero_xp_is_level_1(self):
        assert level_for_xp(0) == 1

    @pytest.mark.parametrize("xp, level", [
        (0, 1), (199, 1), (200, 2), (399, 2), (400, 3), (1000, 6),
    ])
    def test_level_boundaries(self, xp, level):
        assert level_for_xp(xp) == level

    def test_level_formula_holds_everywhere(self):
        for xp in range(0, 5000, 7):
            assert level_for_xp(xp) >= 1
            assert level_for_xp(xp) == xp // 200 + 1

    def test_four_sessions_make_a_level(self):
        assert level_for_xp(3 * XP_PER_SESSION) == 1
        assert level_for_xp(4 * XP_PER_SESSION) == 2

    def test_custom_rate(self):
        assert level_for_xp(100, xp_per_level=50) == 3


class TestLevelProgress:

    def test_xp_into_level(self):
        assert xp_into_level(0) == 0
        assert xp_into_level(250) == 50
        assert xp_into_level(400) == 0

    def test_xp_to_next_level(self):
        assert xp_to_next_level(0) == 200
        assert xp_to_next_level(150) == 50
        assert xp_to_next_level(200) == 200

    def test_progress_percent_values(self):
        assert progress_percent(0) == 0
        assert progress_percent(50) == 25.0
        assert progress_percent(150) == 75.0
        assert progress_percent(200) == 0

    def test_progress_percent_bounds(self):
        for xp in range(0, 3000):
            assert 0 <= progress_percent(xp) < 100


# ═══════════════════════════════════════════════════════════════════════════
#  BADGES
# ═══════════════════════════════════════════════════════════════════════════


class TestBadgeCatalog:

    def test_five_badges_in_threshold_order(self):
        assert [b.threshold for b in BADGES] == [1, 3, 5, 10, 15]

    def test_names_and_keys(self):
        assert [b.key for b in BADGES] == [
            "first", "streak3", "ribbon5", "galaxy10", "queen15",
        ]
        assert BADGES[0].name == "Blossom Starter"
        assert BADGES[-1].name == "Focus Queen"

    def test_every_badge_has_an_icon(self):
        for b in BADGES:
            assert b.icon

    def test_badge_is_frozen(self):
        with pytest.raises(Exception):
            BADGES[0].threshold = 99  # type: ignore[misc]


class TestUnlocking:

    def test_nothing_unlocked_at_zero(self):
        assert unlocked_badges(0) == []

    def test_first_session_unlocks_blossom_only(self):
        assert [b.name for b in unlocked_badges(1)] == ["Blossom Starter"]

    def test_threshold_is_inclusive(self):
        badge = Badge(key="x", name="X", icon="*", threshold=3)
        assert not is_unlocked(badge, 2)
        assert is_unlocked(badge, 3)

    def test_all_unlocked_at_fifteen(self):
        assert unlocked_badges(15) == BADGES
        assert unlocked_badges(200) == BADGES

    def test_next_badge(self):
        assert next_badge(0).key == "first"
        assert next_badge(1).key == "streak3"
        assert next_badge(9).key == "galaxy10"
        assert next_badge(15) is None

    def test_newly_unlocked_crossings(self):
        assert [b.key for b in newly_unlocked(0, 1)] == ["first"]
        assert newly_unlocked(1, 2) == []
        assert [b.key for b in newly_unlocked(2, 3)] == ["streak3"]
        assert [b.key for b in newly_unlocked(0, 15)] == [b.key for b in BADGES]
        assert newly_unlocked(15, 16) == []
