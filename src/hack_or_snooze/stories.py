"""The story feed and the operations that change it."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from hack_or_snooze.api.client import StoryApi
from hack_or_snooze.data import NewStory, Story

if TYPE_CHECKING:
    from hack_or_snooze.users import User

logger = logging.getLogger(__name__)


class StoryList:
    """An ordered list of stories, newest first.

    Local changes are only made after the API confirms them, so a failed
    call leaves the list (and the user's collections) untouched.

    Args:
        api: Session used for all remote calls.
        stories: Initial stories, in display order.
    """

    def __init__(self, api: StoryApi, stories: list[Story] | None = None) -> None:
        self._api = api
        self.stories: list[Story] = list(stories) if stories else []

    @classmethod
    async def get_stories(cls, api: StoryApi) -> StoryList:
        """Fetch the global feed.

        Returns:
            A new StoryList in the order the server sent the stories.
        """
        records = await api.list_stories()
        stories = [Story.from_record(record) for record in records]
        logger.debug(f"Fetched {len(stories)} stories")
        return cls(api, stories)

    async def add_story(self, user: User, new_story: NewStory) -> Story:
        """Post a story as ``user`` and put it at the top of the feed.

        The story is also prepended to ``user.own_stories``.

        Returns:
            The story as created by the server.

        Raises:
            AuthError: If ``user`` has no login token.
        """
        token = user.require_token()
        record = await self._api.create_story(
            token,
            title=new_story.title,
            author=new_story.author,
            url=new_story.url,
        )
        story = Story.from_record(record)

        self.stories.insert(0, story)
        user.own_stories.insert(0, story)
        logger.info(f"{user.username} posted story {story.story_id}")
        return story

    async def remove_story(self, user: User, story_id: str) -> None:
        """Delete a story and drop it from the feed and the user's lists.

        Each of the three collections is filtered on its own; a story that
        the user neither wrote nor favorited is simply absent from those.

        Raises:
            AuthError: If ``user`` has no login token.
            NotFoundError: If the story does not exist remotely.
        """
        token = user.require_token()
        await self._api.delete_story(token, story_id)

        self.stories = [s for s in self.stories if s.story_id != story_id]
        user.own_stories = [s for s in user.own_stories if s.story_id != story_id]
        user.favorites = [s for s in user.favorites if s.story_id != story_id]
        logger.info(f"{user.username} removed story {story_id}")

    def find(self, story_id: str) -> Story | None:
        """Return the story with ``story_id``, if it is in the list."""
        return next((s for s in self.stories if s.story_id == story_id), None)

    def __len__(self) -> int:
        return len(self.stories)

    def __iter__(self) -> Iterator[Story]:
        return iter(self.stories)

    def __getitem__(self, index: int) -> Story:
        return self.stories[index]
