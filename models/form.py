"""Event form shown in the modal.

The form has two modes. In ``create`` mode it is pre-filled with a one-hour
window; in ``edit`` mode it carries an existing event's exact values. The
form only produces intents: a save with the full field set, or a delete
keyed by event id. It never learns whether the backend call succeeded.
"""

from datetime import datetime, timedelta
from typing import Literal, Optional

from pydantic import BaseModel, Field, computed_field

from models.event import (
    COLOR_OPTIONS,
    DEFAULT_COLOR,
    ColorOption,
    Event,
    EventDraft,
    format_form_timestamp,
)
from models.intents import DeleteEvent, SaveEvent
from models.modal import ModalCreating, ModalEditing

FormMode = Literal["create", "edit"]

DEFAULT_DURATION = timedelta(hours=1)


class EventForm(BaseModel):
    """Field values and presentation of the event modal.

    Args:
        mode: "create" for a new event, "edit" for an existing one.
        event_id: Id of the event being edited; None in create mode.
        title: Event title (required on submit).
        description: Event description.
        start_time: Start, as the time input holds it.
        end_time: End, as the time input holds it.
        color: Selected palette color.
        all_day: All-day flag.
        location: Event location.
    """

    mode: FormMode
    event_id: Optional[str] = None
    title: str = ""
    description: Optional[str] = ""
    start_time: str = ""
    end_time: str = ""
    color: str = DEFAULT_COLOR
    all_day: bool = False
    location: Optional[str] = ""
    color_options: list[ColorOption] = Field(default_factory=lambda: list(COLOR_OPTIONS))

    @classmethod
    def for_create(cls, date: datetime, hour: Optional[int] = None) -> "EventForm":
        """Pre-fill a new event with a one-hour window.

        Args:
            date: The clicked day, or the current moment for the header's
                create button.
            hour: Clicked hour of day. When given, the window starts at
                ``hour``:00 of ``date``; otherwise at ``date`` itself.

        Returns:
            A create-mode form.
        """
        start = date.replace(second=0, microsecond=0)
        if hour is not None:
            start = start.replace(hour=hour, minute=0)
        end = start + DEFAULT_DURATION
        return cls(
            mode="create",
            start_time=format_form_timestamp(start),
            end_time=format_form_timestamp(end),
        )

    @classmethod
    def for_edit(cls, event: Event) -> "EventForm":
        """Load an existing event's exact field values."""
        return cls(
            mode="edit",
            event_id=event.id,
            title=event.title,
            description=event.description,
            start_time=event.start_time,
            end_time=event.end_time,
            color=event.color,
            all_day=event.all_day,
            location=event.location,
        )

    @classmethod
    def from_modal(cls, modal: ModalCreating | ModalEditing) -> "EventForm":
        if isinstance(modal, ModalEditing):
            return cls.for_edit(modal.event)
        return cls.for_create(modal.date, modal.hour)

    @computed_field
    @property
    def heading(self) -> str:
        return "Edit Event" if self.mode == "edit" else "Create Event"

    @computed_field
    @property
    def subheading(self) -> str:
        if self.mode == "edit":
            return "Update your event details"
        return "Add a new event to your calendar"

    @computed_field
    @property
    def submit_label(self) -> str:
        return "Update Event" if self.mode == "edit" else "Create Event"

    @computed_field
    @property
    def can_delete(self) -> bool:
        return self.mode == "edit" and self.event_id is not None

    def submit(self) -> SaveEvent:
        """Emit a save intent with the full field set.

        Returns:
            SaveEvent whose draft carries ``id`` in edit mode.

        Raises:
            pydantic.ValidationError: If title, start or end is empty, or the
                color is not in the palette.
        """
        draft = EventDraft(
            id=self.event_id if self.mode == "edit" else None,
            title=self.title,
            description=self.description,
            start_time=self.start_time,
            end_time=self.end_time,
            color=self.color,
            all_day=self.all_day,
            location=self.location,
        )
        return SaveEvent(draft=draft)

    def delete(self) -> DeleteEvent:
        """Emit a delete intent for the edited event.

        Raises:
            ValueError: In create mode, where there is nothing to delete.
        """
        if not self.can_delete:
            raise ValueError("Only an existing event can be deleted")
        return DeleteEvent(event_id=self.event_id)
