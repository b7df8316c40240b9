"""Backend collaborator for the calendar app.

The hosted backend is a row store with a single ``events`` table plus an
auth service. This package provides an async REST client for it and an
in-memory stand-in with the same interface.

Exports:
    AsyncBackendClient: REST client for the hosted row store and auth service.
    InMemoryBackend: In-process backend for development and tests.
    EventStore, AuthProvider, Subscription: Interfaces the controller uses.
    User, Session: Auth models.

    Exceptions:
        BackendError: Base exception for all backend errors.
        ConnectionError: Failed to connect to the backend.
        TimeoutError: Request timed out.
        APIError: Backend returned an error response.
        ValidationError: Row data rejected (HTTP 400/422).
        AuthError: Credentials rejected (HTTP 401/403).
        NotFoundError: Row not found.
        ConflictError: State conflict (HTTP 409).
        ServerError: Backend-side error (HTTP 5xx).
"""

from backend._auth import AsyncAuthClient
from backend._events import AsyncEventsClient
from backend._memory import InMemoryAuth, InMemoryBackend, InMemoryEventStore
from backend.client import AsyncBackendClient
from backend.exceptions import (
    APIError,
    AuthError,
    BackendError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from backend.interfaces import AuthProvider, EventStore, Subscription
from backend.models import AuthChangeEvent, Session, User

__all__ = [
    # Clients
    "AsyncBackendClient",
    "AsyncEventsClient",
    "AsyncAuthClient",
    "InMemoryBackend",
    "InMemoryEventStore",
    "InMemoryAuth",
    # Interfaces
    "EventStore",
    "AuthProvider",
    "Subscription",
    # Models
    "AuthChangeEvent",
    "Session",
    "User",
    # Exceptions
    "BackendError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "AuthError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
