"""Abstract interfaces for the backend collaborator.

The page controller only talks to these two interfaces. The REST client
and the in-memory backend both implement them.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from backend.models import AuthChangeEvent, Session
from models.event import Event, EventDraft


AuthStateListener = Callable[[AuthChangeEvent, Optional[Session]], Awaitable[None]]


class Subscription:
    """Handle returned by ``on_auth_state_change``; call ``unsubscribe()`` to stop."""

    def __init__(self, listeners: list[AuthStateListener], listener: AuthStateListener) -> None:
        self._listeners = listeners
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._listener in self._listeners

    def unsubscribe(self) -> None:
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)


class EventStore(ABC):
    """Single-table CRUD over the ``events`` table."""

    @abstractmethod
    async def select_events(self, user_id: str) -> list[Event]:
        """Return all of the user's events ordered by start time ascending."""

    @abstractmethod
    async def insert_event(self, user_id: str, draft: EventDraft) -> Event:
        """Insert one row owned by ``user_id`` and return it."""

    @abstractmethod
    async def update_event(self, event_id: str, draft: EventDraft) -> Event:
        """Update the writable columns of one row.

        Raises:
            NotFoundError: If no row has ``event_id``.
        """

    @abstractmethod
    async def delete_event(self, event_id: str) -> None:
        """Delete one row.

        Raises:
            NotFoundError: If no row has ``event_id``.
        """


class AuthProvider(ABC):
    """Session management delegated to the backend's auth service."""

    def __init__(self) -> None:
        self._listeners: list[AuthStateListener] = []

    @abstractmethod
    async def get_session(self) -> Optional[Session]:
        """Return the current session, or None when signed out."""

    @abstractmethod
    async def set_session(self, access_token: str) -> Session:
        """Adopt an access token and notify listeners with ``SIGNED_IN``.

        Raises:
            AuthError: If the token is rejected.
        """

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session and notify listeners."""

    def on_auth_state_change(self, listener: AuthStateListener) -> Subscription:
        """Register an async listener for auth-state changes.

        Args:
            listener: Coroutine function called with the change event name
                and the new session (None when signed out).

        Returns:
            A Subscription that removes the listener when unsubscribed.
        """
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)

    async def _emit(self, event: AuthChangeEvent, session: Optional[Session]) -> None:
        # Copy so a listener may unsubscribe while being notified.
        for listener in list(self._listeners):
            await listener(event, session)
