"""HTTP session for the Hack or Snooze API."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from hack_or_snooze.api.schemas import (
    AuthResponse,
    StoriesResponse,
    StoryRecord,
    StoryResponse,
    UserRecord,
    UserResponse,
    decode,
)
from hack_or_snooze.errors import (
    AuthError,
    DecodeError,
    NetworkError,
    NotFoundError,
    ServerError,
    ValidationError,
)

DEFAULT_BASE_URL = "https://hack-or-snooze-v3.herokuapp.com"

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[ServerError]] = {
    400: ValidationError,
    401: AuthError,
    403: AuthError,
    404: NotFoundError,
    409: ValidationError,
    422: ValidationError,
}


class StoryApi:
    """Session object for one Hack or Snooze deployment.

    Holds the connection settings that every model operation needs and is
    passed explicitly to ``StoryList`` and ``User``. Each call opens a
    short-lived ``httpx.AsyncClient``.

    Args:
        base_url: API root (defaults to HACK_OR_SNOOZE_BASE_URL env var, then
            the hosted service).
        timeout: Transport timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = (
            base_url or os.environ.get("HACK_OR_SNOOZE_BASE_URL") or DEFAULT_BASE_URL
        ).rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URL, starting with "/".
            json: Request body.
            params: Query string parameters.

        Returns:
            The parsed JSON body, or None for an empty body.

        Raises:
            NetworkError: If no response was received.
            ServerError: For a non-2xx response (or a subclass matching the status).
            DecodeError: If a successful response is not valid JSON.
        """
        logger.debug(f"{method} {path}")
        async with httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout) as client:
            try:
                response = await client.request(method, path, json=json, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise _error_from_response(e.response) from e
            except httpx.HTTPError as e:
                raise NetworkError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

    # -- Stories --

    async def list_stories(self) -> list[StoryRecord]:
        data = await self.request("GET", "/stories")
        return decode(StoriesResponse, data).stories

    async def create_story(self, token: str, *, title: str, author: str, url: str) -> StoryRecord:
        body = {"token": token, "story": {"title": title, "author": author, "url": url}}
        data = await self.request("POST", "/stories", json=body)
        return decode(StoryResponse, data).story

    async def delete_story(self, token: str, story_id: str) -> None:
        await self.request("DELETE", f"/stories/{story_id}", json={"token": token})

    # -- Users --

    async def signup(self, username: str, password: str, name: str) -> AuthResponse:
        body = {"user": {"username": username, "password": password, "name": name}}
        data = await self.request("POST", "/signup", json=body)
        return decode(AuthResponse, data)

    async def login(self, username: str, password: str) -> AuthResponse:
        body = {"user": {"username": username, "password": password}}
        data = await self.request("POST", "/login", json=body)
        return decode(AuthResponse, data)

    async def get_user(self, token: str, username: str) -> UserRecord:
        data = await self.request("GET", f"/users/{username}", params={"token": token})
        return decode(UserResponse, data).user

    async def add_favorite(self, token: str, username: str, story_id: str) -> None:
        await self.request(
            "POST", f"/users/{username}/favorites/{story_id}", json={"token": token}
        )

    async def remove_favorite(self, token: str, username: str, story_id: str) -> None:
        await self.request(
            "DELETE", f"/users/{username}/favorites/{story_id}", json={"token": token}
        )


def _error_from_response(response: httpx.Response) -> ServerError:
    """Map a failed response onto the error hierarchy.

    The API reports failures as ``{"error": {"status": ..., "message": ...}}``;
    the message is used when present.
    """
    status = response.status_code
    message = response.reason_phrase or f"HTTP {status}"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            message = str(error["message"])

    error_cls = _STATUS_ERRORS.get(status, ServerError)
    return error_cls(message, status_code=status)
