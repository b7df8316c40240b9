"""In-memory backend for local development and tests.

Implements the same EventStore and AuthProvider interfaces as the REST
client, holding rows in a dict keyed by id. Ids are uuid4 strings assigned
on insert, the way the hosted store assigns them.

This is an internal module. Import from `backend` instead.
"""

import logging
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from backend.exceptions import AuthError, NotFoundError
from backend.interfaces import AuthProvider, EventStore
from backend.models import Session, User
from models.event import Event, EventDraft, parse_timestamp

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """The ``events`` table held in process memory.

    Attributes:
        rows: Stored rows keyed by id, including the ``user_id`` column.
    """

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}

    async def select_events(self, user_id: str) -> list[Event]:
        owned = [row for row in self.rows.values() if row["user_id"] == user_id]
        owned.sort(key=_start_sort_key)
        return [Event(**row) for row in owned]

    async def insert_event(self, user_id: str, draft: EventDraft) -> Event:
        row = {"id": str(uuid4()), "user_id": user_id, **draft.to_row()}
        self.rows[row["id"]] = row
        logger.debug("Inserted event %s for user %s", row["id"], user_id)
        return Event(**row)

    async def update_event(self, event_id: str, draft: EventDraft) -> Event:
        if event_id not in self.rows:
            raise NotFoundError(
                f"Event '{event_id}' not found",
                resource_type="event",
                resource_id=event_id,
            )
        row = self.rows[event_id]
        row.update(draft.to_row())
        return Event(**row)

    async def delete_event(self, event_id: str) -> None:
        if event_id not in self.rows:
            raise NotFoundError(
                f"Event '{event_id}' not found",
                resource_type="event",
                resource_id=event_id,
            )
        del self.rows[event_id]

    def get_row(self, event_id: str) -> Optional[dict[str, Any]]:
        """Return the raw stored row, or None."""
        return self.rows.get(event_id)


class InMemoryAuth(AuthProvider):
    """Auth service stand-in that knows a fixed set of access tokens."""

    def __init__(self) -> None:
        super().__init__()
        self._users: dict[str, User] = {}
        self._session: Optional[Session] = None

    def register(self, access_token: str, user: User) -> None:
        """Make ``access_token`` a valid token for ``user``."""
        self._users[access_token] = user

    async def get_session(self) -> Optional[Session]:
        return self._session

    async def set_session(self, access_token: str) -> Session:
        """Sign in with a registered token and notify listeners.

        Raises:
            AuthError: If the token was never registered.
        """
        user = self._users.get(access_token)
        if user is None:
            raise AuthError("Invalid access token")
        self._session = Session(access_token=access_token, user=user)
        await self._emit("SIGNED_IN", self._session)
        return self._session

    async def sign_out(self) -> None:
        self._session = None
        await self._emit("SIGNED_OUT", None)


class InMemoryBackend:
    """Events table plus auth service, both in memory.

    Exposes the same ``events`` and ``auth`` attributes as
    AsyncBackendClient so the two are interchangeable.
    """

    def __init__(self) -> None:
        self.events = InMemoryEventStore()
        self.auth = InMemoryAuth()

    async def close(self) -> None:
        """Nothing to release; present for parity with the REST client."""


def _start_sort_key(row: dict[str, Any]) -> tuple[datetime, str]:
    parsed = parse_timestamp(row["start_time"])
    return (parsed or datetime.max, row["start_time"])
