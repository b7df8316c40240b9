"""Auth sub-client for the hosted backend's auth service (``/auth/v1``).

Authentication itself (sign-in flows, token refresh) is the service's job.
This client only holds the current session, validates an access token
handed to it, signs out, and tells subscribers when the session changes.

This is an internal module. Import from `backend` instead.
"""

import logging
from typing import TYPE_CHECKING, Optional

from backend._base import AsyncBaseClient
from backend.exceptions import AuthError, NotFoundError
from backend.interfaces import AuthProvider
from backend.models import Session, User

if TYPE_CHECKING:
    from backend._http import AsyncHTTPClient

logger = logging.getLogger(__name__)


class AsyncAuthClient(AsyncBaseClient, AuthProvider):
    """Asynchronous client for the auth service.

    The access token of the current session is shared with the HTTP client,
    so row-store requests made after ``set_session`` are scoped to the user.
    """

    _BASE_PATH = "/auth/v1"

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        AsyncBaseClient.__init__(self, http_client)
        AuthProvider.__init__(self)
        self._session: Optional[Session] = None

    async def get_session(self) -> Optional[Session]:
        """Return the current session, or None when signed out."""
        return self._session

    async def set_session(self, access_token: str) -> Session:
        """Adopt an access token issued by the auth service.

        The token is checked against ``GET /auth/v1/user`` before it is
        stored. Listeners receive ``SIGNED_IN``.

        Args:
            access_token: Bearer token from the service's sign-in flow.

        Returns:
            The new session.

        Raises:
            AuthError: If the service rejects the token.
            BackendError: If the request fails.
        """
        data = await self._get(
            f"{self._BASE_PATH}/user",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        session = Session(access_token=access_token, user=User(**data))
        self._session = session
        self._http.access_token = access_token
        logger.info("Signed in as user %s", session.user.id)
        await self._emit("SIGNED_IN", session)
        return session

    async def sign_out(self) -> None:
        """Revoke the current session and notify listeners with ``SIGNED_OUT``.

        A token the service no longer accepts (401, 403 or 404 from the
        logout call) is already dead, so the local session is dropped anyway.
        On transport errors and server errors the local session is kept, so
        the caller can report the error and the user stays signed in.

        Raises:
            BackendError: If the service can't be reached or fails.
        """
        if self._session is not None:
            try:
                await self._post(f"{self._BASE_PATH}/logout")
            except (AuthError, NotFoundError) as e:
                logger.warning("Session already revoked by the service: %s", e)
        self._session = None
        self._http.access_token = None
        logger.info("Signed out")
        await self._emit("SIGNED_OUT", None)
