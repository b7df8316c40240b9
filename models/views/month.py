"""Month grid builder."""

import calendar
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, computed_field

from models.event import Event
from models.views.base import (
    EventChip,
    events_on_day,
    format_time,
    make_chip,
    to_date,
    weekday_labels,
    with_start,
)

# Events drawn per day cell before the "+N more" line.
MAX_VISIBLE_EVENTS = 3


class DayCell(BaseModel):
    """One day of the month grid.

    Args:
        date: The day.
        day_label: Day-of-month number as shown.
        in_current_month: False for padding days from adjacent months.
        is_today: Whether this is the current date.
        events: Every event starting on this day.
        visible_events: Chips for the first MAX_VISIBLE_EVENTS events.
        overflow_count: Events not shown as chips.
    """

    date: date
    day_label: str
    in_current_month: bool
    is_today: bool
    events: list[Event] = Field(default_factory=list)
    visible_events: list[EventChip] = Field(default_factory=list)
    overflow_count: int = 0

    @computed_field
    @property
    def overflow_label(self) -> Optional[str]:
        if self.overflow_count == 0:
            return None
        return f"+{self.overflow_count} more"


class MonthView(BaseModel):
    """Month grid: weekday headers and whole 7-day weeks."""

    view: Literal["month"] = "month"
    year: int
    month: int
    weekday_labels: list[str]
    weeks: list[list[DayCell]]

    @property
    def days(self) -> list[DayCell]:
        return [cell for week in self.weeks for cell in week]


def month_days(reference: date, week_starts_on: int = 0) -> list[date]:
    """Every day shown for the reference date's month.

    Runs from the start of the week holding the 1st to the end of the week
    holding the last day, so the count is always a multiple of 7.
    """
    # calendar counts weekdays from Monday = 0.
    cal = calendar.Calendar(firstweekday=(week_starts_on - 1) % 7)
    return list(cal.itermonthdates(reference.year, reference.month))


def build_month_view(
    reference: date | datetime,
    events: list[Event],
    today: date | datetime,
    week_starts_on: int = 0,
) -> MonthView:
    """Build the month grid around ``reference``.

    Args:
        reference: Any day in the month to show.
        events: Flat list of events to bucket by start day.
        today: The current date, for highlighting.
        week_starts_on: 0 = Sunday ... 6 = Saturday.

    Returns:
        The month grid with events bucketed into day cells.
    """
    reference = to_date(reference)
    today = to_date(today)

    timed = with_start(events)
    cells = []
    for day in month_days(reference, week_starts_on):
        day_events = events_on_day(timed, day)
        visible = day_events[:MAX_VISIBLE_EVENTS]
        cells.append(
            DayCell(
                date=day,
                day_label=str(day.day),
                in_current_month=day.month == reference.month,
                is_today=day == today,
                events=[event for event, _ in day_events],
                visible_events=[
                    make_chip(event, start, label=f"{format_time(start)} {event.title}")
                    for event, start in visible
                ],
                overflow_count=max(0, len(day_events) - MAX_VISIBLE_EVENTS),
            )
        )

    return MonthView(
        year=reference.year,
        month=reference.month,
        weekday_labels=weekday_labels(week_starts_on),
        weeks=[cells[i:i + 7] for i in range(0, len(cells), 7)],
    )
