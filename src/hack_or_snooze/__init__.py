"""Hack or Snooze: an asyncio client for the Hack or Snooze story sharing API."""

from hack_or_snooze.api import DEFAULT_BASE_URL, StoryApi
from hack_or_snooze.config import HackOrSnoozeConfig, create_from_config, load_config
from hack_or_snooze.credentials import CredentialStore, StoredCredentials
from hack_or_snooze.data import NewStory, Story
from hack_or_snooze.errors import (
    AuthError,
    DecodeError,
    FavoriteSyncError,
    HackOrSnoozeError,
    NetworkError,
    NotFoundError,
    ParseError,
    ServerError,
    ValidationError,
)
from hack_or_snooze.stories import StoryList
from hack_or_snooze.url import extract_host
from hack_or_snooze.users import FavoriteChange, User

__all__ = [
    # Models
    "FavoriteChange",
    "NewStory",
    "Story",
    "StoryList",
    "User",
    # Session
    "DEFAULT_BASE_URL",
    "StoryApi",
    # Credentials
    "CredentialStore",
    "StoredCredentials",
    # Functions
    "extract_host",
    # Errors
    "AuthError",
    "DecodeError",
    "FavoriteSyncError",
    "HackOrSnoozeError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "ServerError",
    "ValidationError",
    # Config
    "HackOrSnoozeConfig",
    "create_from_config",
    "load_config",
]
