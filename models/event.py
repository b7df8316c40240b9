"""Calendar event model and timestamp helpers.

Events are stored by the backend with string-encoded timestamps. The
helpers here turn those strings into naive local datetimes for bucketing
and format datetimes back into the ``datetime-local`` form the event form
uses.
"""

import logging
from datetime import datetime
from typing import Literal, Optional

from dateutil.parser import isoparse
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


ViewMode = Literal["month", "week", "day"]

VIEW_MODES: tuple[ViewMode, ...] = ("day", "week", "month")

# Same shape as a datetime-local input value.
FORM_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


class ColorOption(BaseModel):
    """A named entry in the event color palette."""

    name: str
    value: str


COLOR_OPTIONS: tuple[ColorOption, ...] = (
    ColorOption(name="Blue", value="#4285f4"),
    ColorOption(name="Red", value="#ea4335"),
    ColorOption(name="Green", value="#34a853"),
    ColorOption(name="Yellow", value="#fbbc04"),
    ColorOption(name="Purple", value="#9334e9"),
    ColorOption(name="Orange", value="#ff6d00"),
)

PaletteColor = Literal["#4285f4", "#ea4335", "#34a853", "#fbbc04", "#9334e9", "#ff6d00"]

DEFAULT_COLOR: PaletteColor = "#4285f4"


class Event(BaseModel):
    """A calendar event row as fetched from the backend.

    The owning ``user_id`` column is not part of the client-side model; it is
    supplied at insert time. Extra row columns are ignored.

    Args:
        id: Server-assigned identifier.
        title: Event title.
        description: Optional event description.
        start_time: Start timestamp, string-encoded.
        end_time: End timestamp, string-encoded.
        color: Hex color of the event chip.
        all_day: All-day flag. Stored, not used for layout.
        location: Optional event location.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Server-assigned identifier")
    title: str = Field(description="Event title")
    description: Optional[str] = Field(default=None, description="Event description")
    start_time: str = Field(description="Start timestamp")
    end_time: str = Field(description="End timestamp")
    color: str = Field(default=DEFAULT_COLOR, description="Hex color")
    all_day: bool = Field(default=False, description="All-day flag")
    location: Optional[str] = Field(default=None, description="Event location")

    @property
    def start(self) -> Optional[datetime]:
        """Start time as a naive local datetime, or None if unparseable."""
        return parse_timestamp(self.start_time)

    @property
    def end(self) -> Optional[datetime]:
        """End time as a naive local datetime, or None if unparseable."""
        return parse_timestamp(self.end_time)


class EventDraft(BaseModel):
    """The field set the event form submits.

    ``id`` is present only when editing an existing event. ``start_time`` and
    ``end_time`` are not checked against each other.
    """

    id: Optional[str] = None
    title: str = Field(min_length=1, description="Event title")
    description: Optional[str] = None
    start_time: str = Field(min_length=1, description="Start timestamp")
    end_time: str = Field(min_length=1, description="End timestamp")
    color: PaletteColor = DEFAULT_COLOR
    all_day: bool = False
    location: Optional[str] = None

    def to_row(self) -> dict:
        """Return the writable columns, without ``id``."""
        return self.model_dump(exclude={"id"})


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse a stored timestamp into a naive local datetime.

    Offset-aware values are converted to the process's local time zone
    before the offset is dropped, the way a browser Date would show them.

    Args:
        value: ISO 8601 timestamp string.

    Returns:
        The naive local datetime, or None if the value can't be parsed.
    """
    try:
        parsed = isoparse(value)
    except (TypeError, ValueError):
        logger.warning("Unparseable event timestamp: %r", value)
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_form_timestamp(value: datetime) -> str:
    """Format a datetime the way the event form's time inputs hold it."""
    return value.strftime(FORM_TIMESTAMP_FORMAT)
