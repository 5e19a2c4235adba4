"""Pydantic models for the records exchanged with the Hack or Snooze API.

Every response body is validated here before it reaches the domain model,
so a malformed response surfaces as a ``DecodeError`` instead of a story
with missing fields.
"""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, Field

from hack_or_snooze.errors import DecodeError

RecordT = TypeVar("RecordT", bound=BaseModel)


class StoryRecord(BaseModel):
    """A story as returned by the API."""

    story_id: str = Field(alias="storyId")
    title: str
    author: str
    url: str
    username: str
    created_at: str = Field(alias="createdAt")

    model_config = {"frozen": True, "populate_by_name": True}


class UserRecord(BaseModel):
    """A user profile as returned by the API.

    The server calls the user's own stories ``stories``.
    """

    username: str
    name: str
    created_at: str = Field(alias="createdAt")
    favorites: list[StoryRecord] = Field(default_factory=list)
    stories: list[StoryRecord] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}


class StoriesResponse(BaseModel):
    stories: list[StoryRecord]


class StoryResponse(BaseModel):
    story: StoryRecord


class UserResponse(BaseModel):
    user: UserRecord


class AuthResponse(BaseModel):
    """Body of a successful signup or login."""

    user: UserRecord
    token: str


def decode(model: type[RecordT], data: Any) -> RecordT:
    """Validate ``data`` against ``model``.

    Raises:
        DecodeError: If the data does not match the schema.
    """
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise DecodeError(f"Malformed {model.__name__}: {e}") from e
