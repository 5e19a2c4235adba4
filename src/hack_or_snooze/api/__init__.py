"""Access to the Hack or Snooze HTTP API."""

from hack_or_snooze.api.client import DEFAULT_BASE_URL, StoryApi
from hack_or_snooze.api.schemas import (
    AuthResponse,
    StoriesResponse,
    StoryRecord,
    StoryResponse,
    UserRecord,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "DEFAULT_BASE_URL",
    "StoriesResponse",
    "StoryApi",
    "StoryRecord",
    "StoryResponse",
    "UserRecord",
    "UserResponse",
]
