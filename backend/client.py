"""Main backend client class.

AsyncBackendClient is the entry point for talking to the hosted backend.
It provides namespaced access to the events table and the auth service
through sub-client properties.

Example:
    async with AsyncBackendClient(
        base_url="https://project.example.co",
        api_key="public-anon-key",
    ) as backend:
        session = await backend.auth.set_session(access_token)
        events = await backend.events.select_events(session.user.id)
"""

from typing import Any

import httpx

from backend._auth import AsyncAuthClient
from backend._events import AsyncEventsClient
from backend._http import AsyncHTTPClient


class AsyncBackendClient:
    """Asynchronous client for the hosted row store and its auth service.

    Attributes:
        base_url: The base URL of the backend service.
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:54321",
        api_key: str = "",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the backend client.

        Args:
            base_url: The base URL of the backend service.
            api_key: The project's public api key.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures (502/503/504).
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self._http = AsyncHTTPClient(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )

        # Sub-clients are created lazily
        self._events: AsyncEventsClient | None = None
        self._auth: AsyncAuthClient | None = None

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    @property
    def retry_enabled(self) -> bool:
        return self._http.retry_enabled

    @property
    def max_retries(self) -> int:
        return self._http.max_retries

    @property
    def events(self) -> AsyncEventsClient:
        """Access the ``events`` table (select, insert, update, delete)."""
        if self._events is None:
            self._events = AsyncEventsClient(self._http)
        return self._events

    @property
    def auth(self) -> AsyncAuthClient:
        """Access the auth service (session, sign-out, state changes)."""
        if self._auth is None:
            self._auth = AsyncAuthClient(self._http)
        return self._auth

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> "AsyncBackendClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
