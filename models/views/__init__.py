"""Calendar grid builders.

Pure functions that map a reference date and a flat event list to the
cells of a month, week, or day grid.
"""

from models.views.base import CellClick, EventChip, resolve_click
from models.views.day import DayView, build_day_view
from models.views.month import MAX_VISIBLE_EVENTS, DayCell, MonthView, build_month_view
from models.views.week import TimeSlotCell, WeekView, build_week_view

__all__ = [
    "CellClick",
    "EventChip",
    "resolve_click",
    "DayCell",
    "MonthView",
    "MAX_VISIBLE_EVENTS",
    "build_month_view",
    "TimeSlotCell",
    "WeekView",
    "build_week_view",
    "DayView",
    "build_day_view",
]
