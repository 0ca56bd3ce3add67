"""UI package."""

from .view import (
    BadgeView, CaptionStyle, StatFormats, ViewModel,
    build_view_model, format_clock,
)
from .binding import PageRegions, ViewBinder
from .badge_grid import BadgeGrid
from .pages import HomePage, TimerPage, AchievementsPage
from .notice_toast import NoticeToast

__all__ = [
    "BadgeView",
    "CaptionStyle",
    "StatFormats",
    "ViewModel",
    "build_view_model",
    "format_clock",
    "PageRegions",
    "ViewBinder",
    "BadgeGrid",
    "HomePage",
    "TimerPage",
    "AchievementsPage",
    "NoticeToast",
]
