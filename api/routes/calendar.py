"""Calendar page endpoints.

The page is driven entirely by intents: clients post what the user did and
get back the re-rendered page (header, active grid, open form, toasts).
"""

import logging

from fastapi import APIRouter

from api.dependencies import PageControllerDep
from api.models import IntentRequest, StateResponse
from models.controller import CalendarPage
from models.views import CellClick, resolve_click

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/calendar",
    tags=["calendar"],
)


# Route Handlers


@router.get("", response_model=CalendarPage)
async def get_calendar_page(controller: PageControllerDep):
    """Render the calendar page.

    Pending notifications are included once and then cleared.

    Args:
        controller: Page controller dependency.

    Returns:
        The rendered page.
    """
    return controller.render()


@router.get("/state", response_model=StateResponse)
async def get_calendar_state(controller: PageControllerDep):
    """Get a compact summary of the page state.

    Unlike ``GET /calendar`` this leaves pending notifications in place.
    """
    return StateResponse(**controller.snapshot())


@router.post("/intents", response_model=CalendarPage)
async def dispatch_intent(request: IntentRequest, controller: PageControllerDep):
    """Apply one UI intent and re-render.

    Args:
        request: The intent, discriminated by its ``type`` field.
        controller: Page controller dependency.

    Returns:
        The page after the intent has been applied.

    Raises:
        EventNotFoundError: If an event click names an event that isn't
            loaded (mapped to 404).
    """
    await controller.dispatch(request.root)
    return controller.render()


@router.post("/click", response_model=CalendarPage)
async def click_cell(click: CellClick, controller: PageControllerDep):
    """Handle a click on a grid cell.

    A click carrying ``event_id`` opens that event for editing; otherwise it
    opens the create form for the clicked day, or hour when ``hour`` is set.

    Args:
        click: Where the click landed.
        controller: Page controller dependency.

    Returns:
        The page after the click has been handled.
    """
    intent = resolve_click(click)
    logger.debug("Cell click on %s resolved to %s", click.date, intent.type)
    await controller.dispatch(intent)
    return controller.render()
