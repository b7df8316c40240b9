"""Exception hierarchy for the calendar backend collaborator.

Every failure of the hosted row store or its auth service surfaces as one of
these exceptions. The page controller catches ``BackendError`` at each call
site and turns it into a transient notification, so callers rarely need the
finer-grained types.

Exception Hierarchy:
    BackendError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Backend returned an error response
        ├── ValidationError (HTTP 400/422)
        ├── AuthError (HTTP 401/403)
        ├── NotFoundError (HTTP 404, or an empty mutation result)
        ├── ConflictError (HTTP 409)
        └── ServerError (HTTP 5xx)

Example:
    Reporting any backend failure::

        try:
            await backend.events.delete_event(event_id)
        except BackendError as e:
            notifications.error("Error deleting event", e.message)
"""

from typing import Any


class BackendError(Exception):
    """Base exception for all backend errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(BackendError):
    """Failed to connect to the backend service.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(BackendError):
    """Request to the backend timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        if self.timeout is not None:
            return f"{self.message} (timeout: {self.timeout}s)"
        return self.message


class APIError(BackendError):
    """Backend returned an error response.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the backend.
        error_type: Error code from the response body (if available).
        details: Additional error details from the response (if available).
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class ValidationError(APIError):
    """The backend rejected the row data (HTTP 400 or 422)."""

    def __init__(
        self,
        message: str,
        status_code: int = 422,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class AuthError(APIError):
    """Missing, expired, or rejected credentials (HTTP 401 or 403)."""

    def __init__(
        self,
        message: str,
        status_code: int = 401,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="auth_error",
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """Row not found.

    Raised for HTTP 404 responses, and also when an update or delete
    matched no row (the row store answers those with an empty result).

    Attributes:
        resource_type: The type of resource that wasn't found (if known).
        resource_id: The identifier that wasn't found (if known).
    """

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            message=message,
            status_code=404,
            error_type="not_found",
            details=details,
            response_body=response_body,
        )


class ConflictError(APIError):
    """State conflict (HTTP 409), e.g. a duplicate primary key on insert."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_type="conflict",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """Backend-side error (HTTP 5xx).

    If retry is enabled on the HTTP client, 502/503/504 responses are
    retried before this is raised.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
