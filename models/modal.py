"""Modal state for the event form.

The modal is either closed, open to create an event at a date (and
optionally an hour), or open to edit one specific event. Each transition
replaces the whole variant, so a selected event can never linger next to
a selected date or hour.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from models.event import Event


class ModalClosed(BaseModel):
    kind: Literal["closed"] = "closed"


class ModalCreating(BaseModel):
    """Form open for a new event.

    Args:
        date: Day (or exact moment) the new event should start at.
        hour: Clicked hour of day, or None when no hour was picked.
    """

    kind: Literal["creating"] = "creating"
    date: datetime
    hour: Optional[int] = Field(default=None, ge=0, le=23)


class ModalEditing(BaseModel):
    """Form open on an existing event."""

    kind: Literal["editing"] = "editing"
    event: Event


ModalState = Annotated[
    Union[ModalClosed, ModalCreating, ModalEditing],
    Field(discriminator="kind"),
]
