"""Shared pieces of the month, week, and day grid builders.

Bucketing rules:
- a day cell holds the events whose start falls on the same calendar day
- an hour cell holds the events whose start falls on the same day and in
  the same hour of day

An event is only ever placed in its start cell, even when it spans several
hours or days.
"""

from datetime import date, datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from models.event import Event
from models.intents import DateClick, EventClick, TimeSlotClick

HOURS_PER_DAY = 24

# date-fns numbering: 0 = Sunday ... 6 = Saturday
WEEKDAY_ABBREVIATIONS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class EventChip(BaseModel):
    """An event as drawn inside a cell."""

    event_id: str
    title: str
    color: str
    time_label: str = Field(description="Start time, e.g. '9:00 AM'")
    label: str = Field(description="Text shown on the chip")


class CellClick(BaseModel):
    """A click that landed on a grid cell.

    ``event_id`` is set when the click hit an event chip inside the cell.
    """

    date: date
    hour: Optional[int] = Field(default=None, ge=0, le=23)
    event_id: Optional[str] = None


def to_date(value: date | datetime) -> date:
    """Drop the time of day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_week(value: date, week_starts_on: int = 0) -> date:
    """First day of the week containing ``value``.

    Args:
        value: Any day in the week.
        week_starts_on: 0 = Sunday ... 6 = Saturday.
    """
    # date.weekday() is Monday-based; shift to Sunday-based numbering.
    sunday_based = (value.weekday() + 1) % 7
    offset = (sunday_based - week_starts_on) % 7
    return value - timedelta(days=offset)


def week_days(value: date, week_starts_on: int = 0) -> list[date]:
    """The seven days of the week containing ``value``."""
    first = start_of_week(value, week_starts_on)
    return [first + timedelta(days=i) for i in range(7)]


def weekday_labels(week_starts_on: int = 0) -> list[str]:
    return [WEEKDAY_ABBREVIATIONS[(week_starts_on + i) % 7] for i in range(7)]


def with_start(events: list[Event]) -> list[tuple[Event, datetime]]:
    """Pair each event with its parsed start, dropping unparseable ones."""
    timed = []
    for event in events:
        start = event.start
        if start is not None:
            timed.append((event, start))
    return timed


def events_on_day(
    timed: list[tuple[Event, datetime]], day: date
) -> list[tuple[Event, datetime]]:
    """Events whose start falls on ``day``, in input order."""
    return [(event, start) for event, start in timed if start.date() == day]


def events_in_hour(
    timed: list[tuple[Event, datetime]], day: date, hour: int
) -> list[tuple[Event, datetime]]:
    """Events whose start falls on ``day`` within ``hour``, in input order."""
    return [(event, start) for event, start in events_on_day(timed, day) if start.hour == hour]


def format_time(value: datetime) -> str:
    """12-hour clock label like '9:05 AM' or '12:00 PM'."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def hour_label(hour: int) -> str:
    """Row label for an hour of the day, e.g. '12:00 AM' for 0."""
    return format_time(datetime(2000, 1, 1, hour))


def make_chip(event: Event, start: datetime, label: Optional[str] = None) -> EventChip:
    return EventChip(
        event_id=event.id,
        title=event.title,
        color=event.color,
        time_label=format_time(start),
        label=label if label is not None else event.title,
    )


def resolve_click(click: CellClick) -> DateClick | TimeSlotClick | EventClick:
    """Turn a click on a cell into exactly one intent.

    A click on an event chip is an edit and never also a create, the way
    a chip's click handler stops propagation to its cell.

    Args:
        click: Where the click landed.

    Returns:
        EventClick when an event chip was hit, TimeSlotClick for an hour
        cell, DateClick for a day cell.
    """
    if click.event_id is not None:
        return EventClick(event_id=click.event_id)
    if click.hour is not None:
        return TimeSlotClick(date=click.date, hour=click.hour)
    return DateClick(date=click.date)
