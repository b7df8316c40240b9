"""UI intents surfaced from the header, the grids, and the event form.

Every user interaction reaches the page controller as one of these models.
The ``type`` field discriminates the union so a whole intent can travel as
one JSON body.
"""

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from models.event import EventDraft, ViewMode


class Previous(BaseModel):
    """Step the reference date back one unit of the active view."""

    type: Literal["previous"] = "previous"


class Next(BaseModel):
    """Step the reference date forward one unit of the active view."""

    type: Literal["next"] = "next"


class Today(BaseModel):
    """Reset the reference date to the current date."""

    type: Literal["today"] = "today"


class ViewChange(BaseModel):
    """Switch view mode; the reference date is kept."""

    type: Literal["view_change"] = "view_change"
    mode: ViewMode


class CreateEvent(BaseModel):
    """Open the form to create an event starting now."""

    type: Literal["create_event"] = "create_event"


class Logout(BaseModel):
    type: Literal["logout"] = "logout"


class DateClick(BaseModel):
    """Empty part of a month day cell was clicked."""

    type: Literal["date_click"] = "date_click"
    date: date


class TimeSlotClick(BaseModel):
    """Empty part of a week or day hour cell was clicked."""

    type: Literal["time_slot_click"] = "time_slot_click"
    date: date
    hour: int = Field(ge=0, le=23)


class EventClick(BaseModel):
    """An event chip was clicked."""

    type: Literal["event_click"] = "event_click"
    event_id: str


class CloseModal(BaseModel):
    type: Literal["close_modal"] = "close_modal"


class SaveEvent(BaseModel):
    """Form submission; ``draft.id`` selects update over insert."""

    type: Literal["save_event"] = "save_event"
    draft: EventDraft


class DeleteEvent(BaseModel):
    type: Literal["delete_event"] = "delete_event"
    event_id: str


Intent = Annotated[
    Union[
        Previous,
        Next,
        Today,
        ViewChange,
        CreateEvent,
        Logout,
        DateClick,
        TimeSlotClick,
        EventClick,
        CloseModal,
        SaveEvent,
        DeleteEvent,
    ],
    Field(discriminator="type"),
]
