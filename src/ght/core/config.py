"""Core configuration.

Why here:
- Centralizes the tunables (pydantic-settings) without leaking them into the CLI.
- Lets adapters (HTTP) read config consistently.

No `.env` file is read. Every value has a default matching the tool's
documented behavior; `GHT_*` environment variables override them.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ght import __version__

DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_MAX_BODY_BYTES = 2 << 20


class AppSettings(BaseSettings):
    """Runtime settings for a single invocation."""

    model_config = SettingsConfigDict(
        env_prefix="GHT_",
        extra="ignore",
        case_sensitive=False,
    )

    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Overall budget for the GET request, body read included (seconds).",
    )
    max_body_bytes: int = Field(
        default=DEFAULT_MAX_BODY_BYTES,
        gt=0,
        description="Hard cap on response bytes considered for title extraction.",
    )
    user_agent: str = Field(
        default=f"ght/{__version__}",
        min_length=1,
        description="User-Agent sent with the request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the `ght` loggers (DEBUG, INFO, WARNING, ...).",
    )
