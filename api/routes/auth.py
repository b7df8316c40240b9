"""Session endpoints.

Sign-in itself happens at the auth service; these endpoints hand the
resulting access token to the app, report who is signed in, and sign out.
"""

from fastapi import APIRouter

from api.dependencies import PageControllerDep
from api.exceptions import NotAuthenticatedError
from api.models import SessionRequest, SessionResponse, StatusResponse
from backend.exceptions import AuthError

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/session", response_model=SessionResponse)
async def create_session(request: SessionRequest, controller: PageControllerDep):
    """Sign in with an access token.

    The controller is notified through its auth subscription and loads the
    user's events.

    Args:
        request: The access token.
        controller: Page controller dependency.

    Returns:
        The signed-in user.

    Raises:
        NotAuthenticatedError: If the token is rejected (mapped to 401).
        BackendError: If the auth service can't be reached (mapped to 502).
    """
    try:
        session = await controller.auth.set_session(request.access_token)
    except AuthError as e:
        raise NotAuthenticatedError(e.message) from e
    return SessionResponse(user=session.user)


@router.get("/session", response_model=SessionResponse)
async def get_session(controller: PageControllerDep):
    """Get the signed-in user, or null when signed out."""
    session = await controller.auth.get_session()
    return SessionResponse(user=session.user if session else None)


@router.post("/logout", response_model=StatusResponse)
async def logout(controller: PageControllerDep):
    """Sign out.

    Failures are reported as a notification on the next page render, the
    same as the header's logout button.
    """
    await controller.logout()
    if await controller.auth.get_session() is not None:
        return StatusResponse(status="error", message="Sign-out failed")
    return StatusResponse(status="ok", message="Signed out")
