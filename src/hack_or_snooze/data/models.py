"""Core data models for Hack or Snooze."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hack_or_snooze.api.schemas import StoryRecord, decode
from hack_or_snooze.url import extract_host


@dataclass(frozen=True, eq=False)
class Story:
    """A single shared link.

    Stories are immutable and compare (and hash) by ``story_id`` alone, so
    the same story held in a feed and in a user's favorites is equal even
    when the two copies were decoded from different responses.
    """

    story_id: str
    title: str
    author: str
    url: str
    username: str
    created_at: str

    @classmethod
    def from_record(cls, record: StoryRecord | Mapping[str, Any]) -> Story:
        """Build a story from an API record.

        Args:
            record: A validated ``StoryRecord`` or a raw ``storyId``/``createdAt``
                style mapping, which is validated first.

        Raises:
            DecodeError: If a raw mapping is missing fields.
        """
        if not isinstance(record, StoryRecord):
            record = decode(StoryRecord, record)
        return cls(
            story_id=record.story_id,
            title=record.title,
            author=record.author,
            url=record.url,
            username=record.username,
            created_at=record.created_at,
        )

    def get_host_name(self) -> str:
        """Return the host part of the story's URL.

        Raises:
            ParseError: If ``url`` is not an absolute URI.
        """
        return extract_host(self.url)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Story):
            return NotImplemented
        return self.story_id == other.story_id

    def __hash__(self) -> int:
        return hash(self.story_id)


@dataclass(frozen=True)
class NewStory:
    """The fields a user submits to create a story."""

    title: str
    author: str
    url: str
