"""Internal HTTP handling utilities for the backend client.

This module provides the low-level HTTP communication layer shared by the
events table client and the auth client. It handles:
- Making async HTTP requests with the service's auth headers
- Response parsing and error mapping
- Optional retry with exponential backoff
- Connection management

This is an internal module and should not be imported directly by users.
"""

import asyncio
import logging
from typing import Any, Literal

import httpx

from backend.exceptions import (
    APIError,
    AuthError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)


HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Parse an error response to extract message, code, and details.

    Understands the row store's ``{"message", "code", "details", "hint"}``
    body, the auth service's ``{"error", "error_description"}`` and
    ``{"msg"}`` bodies, and falls back to the raw response text.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_code, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        if text:
            return text, None, None
        return f"HTTP {response.status_code} error", None, None

    if isinstance(body, dict):
        if "message" in body:
            extra = {k: body[k] for k in ("details", "hint") if body.get(k)}
            return str(body["message"]), body.get("code"), extra or None
        if "error_description" in body:
            return str(body["error_description"]), body.get("error"), None
        if "msg" in body:
            return str(body["msg"]), body.get("error_code"), None
        if "error" in body:
            return str(body["error"]), None, None

    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception for error status codes.

    Args:
        response: The HTTP response to check.

    Raises:
        ValidationError: For HTTP 400 and 422 responses.
        AuthError: For HTTP 401 and 403 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_code, details = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code in (400, 422):
        raise ValidationError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    elif status_code in (401, 403):
        raise AuthError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    elif status_code == 404:
        raise NotFoundError(
            message=message,
            details=details,
            response_body=response_body,
        )
    elif status_code == 409:
        raise ConflictError(
            message=message,
            details=details,
            response_body=response_body,
        )
    elif status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    else:
        raise APIError(
            message=message,
            status_code=status_code,
            error_type=error_code,
            details=details,
            response_body=response_body,
        )


def _parse_body(response: httpx.Response) -> Any:
    """Decode a successful response body, or None when it's empty.

    Raises:
        APIError: If the body isn't JSON (e.g. an HTML page from a proxy).
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise APIError(
            message=f"Expected a JSON response body: {e}",
            status_code=response.status_code,
            response_body=response.text,
        ) from e


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Calculate exponential backoff delay for retry attempts.

    Args:
        attempt: The retry attempt number (0-indexed).
        base: Base delay in seconds.

    Returns:
        The delay in seconds, capped at DEFAULT_RETRY_BACKOFF_MAX.
    """
    delay = base * (2 ** attempt)
    return min(delay, DEFAULT_RETRY_BACKOFF_MAX)


class AsyncHTTPClient:
    """Asynchronous HTTP client for the hosted backend.

    Wraps httpx.AsyncClient with the service's auth headers, error mapping,
    and optional retry. Every request carries the project ``apikey`` header;
    the ``Authorization`` bearer is the signed-in user's access token when
    one is set, otherwise the api key itself.

    Attributes:
        base_url: The base URL of the backend service.
        api_key: The project's public api key.
        access_token: The current user's access token, if signed in.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async HTTP client.

        Args:
            base_url: The base URL of the backend service.
            api_key: The project's public api key.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on transient failures.
            max_retries: Maximum number of retry attempts.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.access_token: str | None = None
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def _auth_headers(self) -> dict[str, str]:
        bearer = self.access_token or self.api_key
        headers = {"apikey": self.api_key}
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        return headers

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.
            headers: Extra headers merged over the auth headers.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the backend returns an error response.
        """
        url = f"{self.base_url}{path}"

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        request_headers = self._auth_headers()
        if headers:
            request_headers.update(headers)

        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt == attempts - 1
            try:
                response = await self._client.request(
                    method,
                    path,
                    params=params,
                    json=json,
                    headers=request_headers,
                )
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                error = self._transport_error(e, url)
                if is_last:
                    raise error from e
                logger.debug("Retrying %s %s after %s", method, path, type(e).__name__)
            else:
                if is_last or response.status_code not in RETRYABLE_STATUS_CODES:
                    _raise_for_status(response)
                    return _parse_body(response)
                logger.debug(
                    "Retrying %s %s after HTTP %s", method, path, response.status_code
                )
            await asyncio.sleep(_calculate_backoff(attempt))

    def _transport_error(
        self, error: httpx.HTTPError, url: str
    ) -> ConnectionError | TimeoutError:
        if isinstance(error, httpx.TimeoutException):
            return TimeoutError(
                message=f"Request to {url} timed out",
                timeout=self.timeout,
                url=url,
            )
        return ConnectionError(message=f"Failed to connect to {url}", url=url, cause=error)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json, headers=headers)

    async def patch(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("PATCH", path, params=params, json=json, headers=headers)

    async def delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self.request("DELETE", path, params=params, headers=headers)
