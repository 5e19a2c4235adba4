"""Pydantic configuration models for the Hack or Snooze client."""

from typing import Literal

from pydantic import BaseModel, Field


# ============================================================
# API Config
# ============================================================


class ApiConfig(BaseModel):
    """Configuration for StoryApi.

    ``base_url`` None means HACK_OR_SNOOZE_BASE_URL env var, then the hosted service.
    """

    base_url: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


# ============================================================
# Credentials Config
# ============================================================


class CredentialsConfig(BaseModel):
    """Where the CLI keeps the session token."""

    path: str = "~/.config/hack-or-snooze/credentials.json"

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for console logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(message)s"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class HackOrSnoozeConfig(BaseModel):
    """Root configuration for Hack or Snooze."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
