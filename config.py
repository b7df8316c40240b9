"""Application settings.

Values come from the process environment, with a ``.env`` file in the
working directory loaded first.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from models.event import ViewMode


BackendMode = Literal["memory", "rest"]


class Settings(BaseModel):
    """Runtime configuration.

    Args:
        backend_mode: "rest" talks to the hosted backend; "memory" keeps
            events in process for local development.
        backend_url: Base URL of the hosted backend.
        backend_api_key: Public api key sent with every backend request.
        backend_timeout: Backend request timeout in seconds.
        backend_retry_enabled: Retry 502/503/504 responses with backoff.
        default_view: View mode shown on first load.
        week_starts_on: First weekday of grids, 0 = Sunday ... 6 = Saturday.
        dev_access_token: Token accepted by the in-memory auth service.
        dev_user_name: Display name of the in-memory backend's user.
        log_level: Root logging level.
    """

    backend_mode: BackendMode = "memory"
    backend_url: str = "http://localhost:54321"
    backend_api_key: str = ""
    backend_timeout: float = Field(default=30.0, gt=0)
    backend_retry_enabled: bool = False
    default_view: ViewMode = "month"
    week_starts_on: int = Field(default=0, ge=0, le=6)
    dev_access_token: str = "dev-token"
    dev_user_name: str = "Dev User"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (after loading .env)."""
        load_dotenv()
        env = os.environ
        values = {
            "backend_mode": env.get("BACKEND_MODE"),
            "backend_url": env.get("BACKEND_URL"),
            "backend_api_key": env.get("BACKEND_API_KEY"),
            "backend_timeout": env.get("BACKEND_TIMEOUT"),
            "backend_retry_enabled": env.get("BACKEND_RETRY_ENABLED"),
            "default_view": env.get("DEFAULT_VIEW"),
            "week_starts_on": env.get("WEEK_STARTS_ON"),
            "dev_access_token": env.get("DEV_ACCESS_TOKEN"),
            "dev_user_name": env.get("DEV_USER_NAME"),
            "log_level": env.get("LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value is not None})
