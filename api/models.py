"""Shared request and response models for API endpoints."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, RootModel

from backend.models import User
from models.event import ViewMode
from models.intents import Intent


class SessionRequest(BaseModel):
    """Body of ``POST /auth/session``.

    Attributes:
        access_token: Token issued by the auth service.
    """

    access_token: str = Field(min_length=1)


class SessionResponse(BaseModel):
    """The signed-in user, or None when signed out."""

    user: Optional[User] = None


class StateResponse(BaseModel):
    """Compact summary of the page state.

    Attributes:
        current_date: Reference date (ISO 8601).
        view_mode: Active grid shape.
        event_count: Number of loaded events.
        modal: Modal purpose.
        user_id: Signed-in user's id, or None.
    """

    current_date: str
    view_mode: ViewMode
    event_count: int
    modal: Literal["closed", "creating", "editing"]
    user_id: Optional[str] = None


class StatusResponse(BaseModel):
    """Generic acknowledgement."""

    status: str
    message: str


class IntentRequest(RootModel[Intent]):
    """Body of ``POST /calendar/intents``: one intent, discriminated by ``type``."""
