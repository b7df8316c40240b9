"""Session and user models returned by the auth service."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


AuthChangeEvent = Literal["INITIAL_SESSION", "SIGNED_IN", "SIGNED_OUT", "TOKEN_REFRESHED"]


class User(BaseModel):
    """The authenticated user, as the auth service describes it.

    Args:
        id: Stable user identifier; scopes the user's event rows.
        email: Sign-in email, if the service exposes it.
        user_metadata: Free-form profile data (``full_name`` etc.).
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="User identifier")
    email: Optional[str] = Field(default=None, description="Sign-in email")
    user_metadata: dict[str, Any] = Field(
        default_factory=dict, description="Profile metadata"
    )

    @property
    def display_name(self) -> Optional[str]:
        """The user's full name from profile metadata, if any."""
        name = self.user_metadata.get("full_name")
        return str(name) if name else None


class Session(BaseModel):
    """An authenticated session: the bearer token and its user."""

    access_token: str
    user: User
