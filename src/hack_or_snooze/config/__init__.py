"""Configuration module for Hack or Snooze."""

from hack_or_snooze.config.factory import create_api, create_credential_store, create_from_config
from hack_or_snooze.config.loader import get_default_config_path, load_config
from hack_or_snooze.config.models import (
    ApiConfig,
    CredentialsConfig,
    HackOrSnoozeConfig,
    LoggingConfig,
)

__all__ = [
    "ApiConfig",
    "CredentialsConfig",
    "HackOrSnoozeConfig",
    "LoggingConfig",
    "create_api",
    "create_credential_store",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
