"""Exception handlers for the calendar FastAPI application.

This module defines custom exception handlers that convert Python exceptions
into consistent, user-friendly JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from backend.exceptions import BackendError
from models.controller import EventNotFoundError

logger = logging.getLogger(__name__)


# Custom Exception Classes


class NotAuthenticatedError(Exception):
    """Raised when a request needs a signed-in user and there isn't one.

    Args:
        message: Why authentication failed.
    """

    def __init__(self, message: str = "Not signed in"):
        self.message = message
        super().__init__(message)


# Exception Handlers
# These convert exceptions into JSON responses


async def event_not_found_handler(request: Request, exc: EventNotFoundError):
    """Handle EventNotFoundError exceptions.

    Returns a 404 naming the event that isn't in the loaded event list.

    Args:
        request: The incoming request that triggered the error.
        exc: The EventNotFoundError exception.

    Returns:
        JSONResponse with 404 status.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Event Not Found",
            "detail": f"The event '{exc.event_id}' is not in the current event list",
            "event_id": exc.event_id,
        },
    )


async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
    """Handle NotAuthenticatedError exceptions with a 401."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={
            "error": "Not Authenticated",
            "detail": exc.message,
            "suggestion": "Sign in with POST /auth/session",
        },
    )


async def backend_error_handler(request: Request, exc: BackendError):
    """Handle backend failures that escape a route.

    Returns a 502 (Bad Gateway), since the failure happened upstream.

    Args:
        request: The incoming request that triggered the error.
        exc: The BackendError exception.

    Returns:
        JSONResponse with 502 status.
    """
    logger.warning("Backend error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "Backend Error",
            "detail": exc.message,
            "type": type(exc).__name__,
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors.

    These occur when data built inside a route doesn't match its model.
    Request bodies are validated by FastAPI itself.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    ValueErrors indicate input that passed Pydantic validation but can't be
    applied, such as deleting from a create form.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValueError exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    This is a catch-all handler for unexpected errors. It logs the traceback
    and keeps it out of the response.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.exception("Unhandled exception on %s", request.url.path, exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
