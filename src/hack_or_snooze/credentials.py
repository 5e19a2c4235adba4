"""Persistence of the session token between runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pydantic
from pydantic import BaseModel

if TYPE_CHECKING:
    from hack_or_snooze.users import User

logger = logging.getLogger(__name__)


class StoredCredentials(BaseModel):
    """What is needed to log a user back in without a password."""

    token: str
    username: str

    model_config = {"frozen": True}


class CredentialStore:
    """Keeps one user's credentials in a JSON file.

    Args:
        path: File to store credentials in. ``~`` is expanded.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, user: User) -> None:
        """Write ``user``'s token and username, replacing any previous ones."""
        credentials = user.to_credentials()
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(credentials.model_dump_json())
        logger.debug(f"Saved credentials for {credentials.username} to {self._path}")

    def load(self) -> StoredCredentials | None:
        """Read stored credentials.

        Returns:
            The credentials, or None if nothing usable is stored.
        """
        if not self._path.exists():
            return None
        try:
            return StoredCredentials.model_validate_json(self._path.read_text())
        except (OSError, pydantic.ValidationError):
            logger.warning(f"Ignoring unreadable credentials file {self._path}", exc_info=True)
            return None

    def clear(self) -> None:
        """Forget the stored credentials."""
        self._path.unlink(missing_ok=True)
