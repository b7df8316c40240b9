"""Dependency injection providers for the FastAPI application.

This module owns the single PageController (and the backend it talks to)
for the running app, and exposes it to route handlers as a dependency.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends

from backend import AsyncBackendClient, InMemoryBackend, User
from config import Settings
from models.controller import PageController

logger = logging.getLogger(__name__)


# Global state
# One controller per app process; it owns the page state for the session.
_page_controller: PageController | None = None
_backend: AsyncBackendClient | InMemoryBackend | None = None


def get_page_controller() -> PageController:
    """Get the shared PageController instance.

    Returns:
        The shared PageController.

    Raises:
        RuntimeError: If the controller hasn't been initialized yet.
    """
    if _page_controller is None:
        raise RuntimeError(
            "PageController not initialized. Call initialize_page_controller() first."
        )
    return _page_controller


def create_backend(settings: Settings) -> AsyncBackendClient | InMemoryBackend:
    """Build the backend collaborator selected by ``settings.backend_mode``."""
    if settings.backend_mode == "rest":
        return AsyncBackendClient(
            base_url=settings.backend_url,
            api_key=settings.backend_api_key,
            timeout=settings.backend_timeout,
            retry_enabled=settings.backend_retry_enabled,
        )

    backend = InMemoryBackend()
    backend.auth.register(
        settings.dev_access_token,
        User(id="dev-user", user_metadata={"full_name": settings.dev_user_name}),
    )
    return backend


async def initialize_page_controller(
    settings: Optional[Settings] = None,
    backend: AsyncBackendClient | InMemoryBackend | None = None,
) -> PageController:
    """Create the shared PageController and load the current session.

    Args:
        settings: App settings; read from the environment when omitted.
        backend: Backend to use instead of the one ``settings`` selects.

    Returns:
        The newly created PageController.
    """
    global _page_controller, _backend

    settings = settings or Settings.from_env()
    _backend = backend or create_backend(settings)
    _page_controller = PageController(
        store=_backend.events,
        auth=_backend.auth,
        default_view=settings.default_view,
        week_starts_on=settings.week_starts_on,
    )
    await _page_controller.start()
    logger.info("PageController initialized (backend: %s)", settings.backend_mode)
    return _page_controller


async def shutdown_page_controller() -> None:
    """Unsubscribe the controller and close the backend client."""
    global _page_controller, _backend

    if _page_controller is not None:
        _page_controller.stop()
    if _backend is not None:
        await _backend.close()

    _page_controller = None
    _backend = None


# Type alias for dependency injection
PageControllerDep = Annotated[PageController, Depends(get_page_controller)]
