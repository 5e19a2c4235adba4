"""Exception hierarchy for the Hack or Snooze client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hack_or_snooze.users import FavoriteChange


class HackOrSnoozeError(Exception):
    """Base class for all client errors."""


class NetworkError(HackOrSnoozeError):
    """The request never produced an HTTP response."""


class ServerError(HackOrSnoozeError):
    """The API answered with a failure (or with an unusable body).

    Args:
        message: Human readable description, usually the server's own message.
        status_code: HTTP status of the response, if there was one.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(ServerError):
    """The API rejected the submitted data (400/409/422)."""


class AuthError(ServerError):
    """Bad credentials, a bad token, or no token at all."""


class NotFoundError(ServerError):
    """The addressed story or user does not exist."""


class DecodeError(ServerError):
    """A successful response whose body did not match the expected schema."""


class ParseError(HackOrSnoozeError, ValueError):
    """A story URL could not be parsed as an absolute URI."""


class FavoriteSyncError(HackOrSnoozeError):
    """A favorite toggle was applied locally but the API did not confirm it.

    The local change is left in place; ``change`` holds everything needed
    to undo it with ``User.revert_favorite``.
    """

    def __init__(self, change: FavoriteChange, error: HackOrSnoozeError) -> None:
        super().__init__(f"Could not {change.action} favorite {change.story.story_id}: {error}")
        self.change = change
        self.error = error
