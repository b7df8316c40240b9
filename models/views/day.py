"""Day grid builder: 24 hour rows for a single date."""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from models.event import Event
from models.views.base import (
    HOURS_PER_DAY,
    events_in_hour,
    format_time,
    hour_label,
    to_date,
    with_start,
)


class DayEventCard(BaseModel):
    """An event as drawn in the day view, with its time range."""

    event_id: str
    title: str
    color: str
    time_range: str = Field(description="e.g. '2:00 PM - 3:00 PM'")
    description: Optional[str] = None


class DayHourRow(BaseModel):
    date: date
    hour: int
    label: str
    events: list[DayEventCard] = Field(default_factory=list)


class DayView(BaseModel):
    view: Literal["day"] = "day"
    date: date
    weekday_label: str = Field(description="Full weekday, e.g. 'Saturday'")
    date_label: str = Field(description="Long date, e.g. 'June 15, 2024'")
    rows: list[DayHourRow]


def _card(event: Event, start: datetime) -> DayEventCard:
    end = event.end
    time_range = format_time(start)
    if end is not None:
        time_range = f"{time_range} - {format_time(end)}"
    return DayEventCard(
        event_id=event.id,
        title=event.title,
        color=event.color,
        time_range=time_range,
        description=event.description or None,
    )


def build_day_view(reference: date | datetime, events: list[Event]) -> DayView:
    """Build the day grid for ``reference``.

    Args:
        reference: The day to show.
        events: Flat list of events to bucket by start hour.

    Returns:
        The day grid.
    """
    day = to_date(reference)
    timed = with_start(events)
    rows = [
        DayHourRow(
            date=day,
            hour=hour,
            label=hour_label(hour),
            events=[_card(event, start) for event, start in events_in_hour(timed, day, hour)],
        )
        for hour in range(HOURS_PER_DAY)
    ]
    return DayView(
        date=day,
        weekday_label=day.strftime("%A"),
        date_label=f"{day.strftime('%B')} {day.day}, {day.year}",
        rows=rows,
    )
