"""Main entry point for the calendar FastAPI application.

This module creates and configures the FastAPI app instance that serves the
calendar page: month, week, and day grids over the signed-in user's events,
plus the event form.

To run the development server:
    uvicorn main:app --reload

To run against the hosted backend:
    BACKEND_MODE=rest BACKEND_URL=... BACKEND_API_KEY=... uvicorn main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_page_controller, shutdown_page_controller
from api.exceptions import (
    NotAuthenticatedError,
    backend_error_handler,
    event_not_found_handler,
    generic_exception_handler,
    not_authenticated_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import auth as auth_routes
from api.routes import calendar as calendar_routes
from backend.exceptions import BackendError
from config import Settings
from models.controller import EventNotFoundError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the app.

    Args:
        level: Level name such as "DEBUG" or "INFO".
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Startup reads the settings, configures logging, builds the backend and
    the page controller, and loads the current session. Shutdown closes the
    backend client.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Starting calendar app")
    await initialize_page_controller(settings)

    yield  # App runs and handles requests here

    logger.info("Shutting down calendar app")
    await shutdown_page_controller()


# Create the FastAPI application instance
app = FastAPI(
    title="Calendar",
    description="Month, week, and day calendar views over a hosted events table",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Order matters: specific exceptions before general ones
app.add_exception_handler(EventNotFoundError, event_not_found_handler)
app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
app.add_exception_handler(BackendError, backend_error_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register route modules
app.include_router(calendar_routes.router)
app.include_router(auth_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the Calendar API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring.

    Returns:
        A dictionary indicating the service is healthy.
    """
    return {"status": "healthy"}
