"""Factory functions to create components from configuration."""

from hack_or_snooze.api.client import StoryApi
from hack_or_snooze.config.models import HackOrSnoozeConfig
from hack_or_snooze.credentials import CredentialStore


def create_api(config: HackOrSnoozeConfig) -> StoryApi:
    """Create the API session from config."""
    return StoryApi(
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
    )


def create_credential_store(config: HackOrSnoozeConfig) -> CredentialStore:
    """Create the credential store from config."""
    return CredentialStore(config.credentials.path)


def create_from_config(config: HackOrSnoozeConfig) -> tuple[StoryApi, CredentialStore]:
    """Create every component the CLI needs.

    Returns:
        Tuple of (api, credential_store).
    """
    return (create_api(config), create_credential_store(config))
