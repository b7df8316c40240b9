"""Transient user-visible notifications (toasts)."""

from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field


NotificationVariant = Literal["default", "destructive"]


class Notification(BaseModel):
    """A one-shot message shown to the user.

    Args:
        id: Unique notification identifier.
        title: Short headline, e.g. "Error deleting event".
        description: Detail line; for failures, the backend's message.
        variant: "destructive" for failures, "default" otherwise.
        created_at: When the notification was raised.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str = ""
    variant: NotificationVariant = "default"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class NotificationCenter:
    """Queue of notifications waiting to be shown.

    Notifications are transient: ``drain`` hands them out once and forgets
    them. Nothing here feeds back into form or list state.
    """

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def push(self, notification: Notification) -> Notification:
        self._pending.append(notification)
        return notification

    def success(self, title: str, description: str = "") -> Notification:
        return self.push(Notification(title=title, description=description))

    def error(self, title: str, description: str = "") -> Notification:
        return self.push(
            Notification(title=title, description=description, variant="destructive")
        )

    @property
    def pending(self) -> list[Notification]:
        """Notifications not yet drained, oldest first."""
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return all pending notifications and clear the queue."""
        drained, self._pending = self._pending, []
        return drained
