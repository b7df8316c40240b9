"""Week grid builder: seven day columns by 24 hour rows."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from models.event import Event
from models.views.base import (
    HOURS_PER_DAY,
    WEEKDAY_ABBREVIATIONS,
    EventChip,
    events_in_hour,
    hour_label,
    make_chip,
    to_date,
    week_days,
    with_start,
)


class WeekDayHeader(BaseModel):
    date: date
    weekday_label: str = Field(description="Abbreviated weekday, e.g. 'Mon'")
    day_label: str
    is_today: bool


class TimeSlotCell(BaseModel):
    """One hour of one day; holds the events that start in that hour."""

    date: date
    hour: int
    events: list[EventChip] = Field(default_factory=list)


class WeekHourRow(BaseModel):
    hour: int
    label: str
    slots: list[TimeSlotCell]


class WeekView(BaseModel):
    view: Literal["week"] = "week"
    days: list[WeekDayHeader]
    rows: list[WeekHourRow]


def build_week_view(
    reference: date | datetime,
    events: list[Event],
    today: date | datetime,
    week_starts_on: int = 0,
) -> WeekView:
    """Build the week grid for the week containing ``reference``.

    Args:
        reference: Any day in the week to show.
        events: Flat list of events to bucket by start day and hour.
        today: The current date, for highlighting.
        week_starts_on: 0 = Sunday ... 6 = Saturday.

    Returns:
        The week grid.
    """
    today = to_date(today)
    days = week_days(to_date(reference), week_starts_on)

    headers = [
        WeekDayHeader(
            date=day,
            # date.weekday() is Monday-based
            weekday_label=WEEKDAY_ABBREVIATIONS[(day.weekday() + 1) % 7],
            day_label=str(day.day),
            is_today=day == today,
        )
        for day in days
    ]

    timed = with_start(events)
    rows = []
    for hour in range(HOURS_PER_DAY):
        slots = [
            TimeSlotCell(
                date=day,
                hour=hour,
                events=[
                    make_chip(event, start)
                    for event, start in events_in_hour(timed, day, hour)
                ],
            )
            for day in days
        ]
        rows.append(WeekHourRow(hour=hour, label=hour_label(hour), slots=slots))

    return WeekView(days=headers, rows=rows)
