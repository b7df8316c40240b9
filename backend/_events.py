"""Events table sub-client for the hosted row store.

This module provides AsyncEventsClient, which reads and writes the single
``events`` table through the row store's REST interface (``/rest/v1``).
Filters use the ``column=op.value`` query syntax.

This is an internal module. Import from `backend` instead.
"""

from typing import Any

from backend._base import AsyncBaseClient
from backend.exceptions import NotFoundError
from backend.interfaces import EventStore
from models.event import Event, EventDraft


# Ask the row store to echo affected rows, so empty results mean "no match".
RETURN_REPRESENTATION = {"Prefer": "return=representation"}


class AsyncEventsClient(AsyncBaseClient, EventStore):
    """Asynchronous client for the ``events`` table.

    Example:
        async with AsyncBackendClient(base_url, api_key) as backend:
            await backend.auth.set_session(access_token)
            events = await backend.events.select_events(user_id)
    """

    _BASE_PATH = "/rest/v1/events"

    async def select_events(self, user_id: str) -> list[Event]:
        """Select all of the user's events, ordered by start time ascending.

        Args:
            user_id: Owner of the rows.

        Returns:
            The user's events.

        Raises:
            BackendError: If the request fails.
        """
        data = await self._get(
            self._BASE_PATH,
            params={
                "select": "*",
                "user_id": f"eq.{user_id}",
                "order": "start_time.asc",
            },
        )
        return [Event(**row) for row in data or []]

    async def insert_event(self, user_id: str, draft: EventDraft) -> Event:
        """Insert one event owned by ``user_id``.

        Args:
            user_id: Owner of the new row.
            draft: The form's field set; any ``id`` is ignored.

        Returns:
            The inserted row, with its server-assigned id.

        Raises:
            BackendError: If the request fails.
        """
        row: dict[str, Any] = {"user_id": user_id, **draft.to_row()}
        data = await self._post(self._BASE_PATH, json=row, headers=RETURN_REPRESENTATION)
        return Event(**self._single(data, "insert"))

    async def update_event(self, event_id: str, draft: EventDraft) -> Event:
        """Update the writable columns of one event.

        Args:
            event_id: Row to update.
            draft: New field values.

        Returns:
            The updated row.

        Raises:
            NotFoundError: If no row matched ``event_id``.
            BackendError: If the request fails.
        """
        data = await self._patch(
            self._BASE_PATH,
            json=draft.to_row(),
            params={"id": f"eq.{event_id}"},
            headers=RETURN_REPRESENTATION,
        )
        if not data:
            raise NotFoundError(
                f"Event '{event_id}' not found",
                resource_type="event",
                resource_id=event_id,
            )
        return Event(**data[0])

    async def delete_event(self, event_id: str) -> None:
        """Delete one event.

        Args:
            event_id: Row to delete.

        Raises:
            NotFoundError: If no row matched ``event_id``.
            BackendError: If the request fails.
        """
        data = await self._delete(
            self._BASE_PATH,
            params={"id": f"eq.{event_id}"},
            headers=RETURN_REPRESENTATION,
        )
        if not data:
            raise NotFoundError(
                f"Event '{event_id}' not found",
                resource_type="event",
                resource_id=event_id,
            )

    @staticmethod
    def _single(data: Any, operation: str) -> dict[str, Any]:
        if isinstance(data, list):
            if not data:
                raise NotFoundError(f"Event {operation} returned no row", resource_type="event")
            return data[0]
        return data
