"""The signed-in user and favorite management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from hack_or_snooze.api.client import StoryApi
from hack_or_snooze.api.schemas import UserRecord
from hack_or_snooze.credentials import CredentialStore, StoredCredentials
from hack_or_snooze.data import Story
from hack_or_snooze.errors import AuthError, FavoriteSyncError, HackOrSnoozeError

logger = logging.getLogger(__name__)


@dataclass
class FavoriteChange:
    """Outcome of toggling a favorite.

    The local change has always been applied by the time a FavoriteChange
    exists; ``confirmed`` says whether the API accepted it as well.
    ``index`` is the position the story was appended at (for an add) or
    occupied before removal (for a remove) in ``favorites``.
    """

    story: Story
    action: Literal["add", "remove"]
    confirmed: bool = False
    error: HackOrSnoozeError | None = None
    index: int | None = None


@dataclass
class User:
    """The user of the current session.

    ``username`` is fixed at construction; the other fields change as the
    session mutates stories and favorites.
    """

    api: StoryApi = field(repr=False, compare=False)
    username: str
    name: str
    created_at: str
    login_token: str = field(default="", repr=False)
    favorites: list[Story] = field(default_factory=list)
    own_stories: list[Story] = field(default_factory=list)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "username" and "username" in self.__dict__:
            raise AttributeError("username cannot be changed once the user exists")
        super().__setattr__(name, value)

    @classmethod
    def from_record(cls, api: StoryApi, record: UserRecord, token: str) -> User:
        """Build a user from an API record and the session token."""
        return cls(
            api=api,
            username=record.username,
            name=record.name,
            created_at=record.created_at,
            login_token=token,
            favorites=[Story.from_record(s) for s in record.favorites],
            own_stories=[Story.from_record(s) for s in record.stories],
        )

    @classmethod
    async def signup(cls, api: StoryApi, username: str, password: str, name: str) -> User:
        """Register a new account and return it logged in.

        Raises:
            ValidationError: If the username is taken or a field is rejected.
        """
        auth = await api.signup(username, password, name)
        logger.info(f"Signed up {auth.user.username}")
        return cls.from_record(api, auth.user, auth.token)

    @classmethod
    async def login(cls, api: StoryApi, username: str, password: str) -> User:
        """Log in an existing account.

        Raises:
            AuthError: If the credentials are wrong.
        """
        auth = await api.login(username, password)
        logger.info(f"Logged in {auth.user.username}")
        return cls.from_record(api, auth.user, auth.token)

    @classmethod
    async def login_via_stored_credentials(
        cls, api: StoryApi, token: str, username: str
    ) -> User | None:
        """Restore a session from a saved token and username.

        Used for silent session restore, so unlike ``login`` this never
        raises: any failure is logged and None is returned.
        """
        try:
            record = await api.get_user(token, username)
            return cls.from_record(api, record, token)
        except Exception:
            logger.warning(f"Could not restore session for {username}", exc_info=True)
            return None

    @classmethod
    async def restore(cls, api: StoryApi, store: CredentialStore) -> User | None:
        """Restore the session saved in ``store``, if there is a usable one."""
        credentials = store.load()
        if credentials is None:
            return None
        return await cls.login_via_stored_credentials(
            api, credentials.token, credentials.username
        )

    def require_token(self) -> str:
        """Return the login token.

        Raises:
            AuthError: If the user has no token.
        """
        if not self.login_token:
            raise AuthError(f"User {self.username} is not logged in")
        return self.login_token

    async def add_favorite(self, story: Story) -> FavoriteChange:
        """Mark ``story`` as a favorite.

        The story is appended to ``favorites`` before the API is called and
        stays there if the call fails.

        Returns:
            A confirmed FavoriteChange.

        Raises:
            AuthError: If the user has no token (nothing is changed).
            FavoriteSyncError: If the API did not confirm the change.
        """
        token = self.require_token()
        self.favorites.append(story)
        change = FavoriteChange(story=story, action="add", index=len(self.favorites) - 1)
        return await self._sync_favorite(change, token)

    async def remove_favorite(self, story: Story) -> FavoriteChange:
        """Unmark ``story`` as a favorite.

        Same optimistic contract as ``add_favorite``.
        """
        token = self.require_token()
        index = next(
            (i for i, s in enumerate(self.favorites) if s.story_id == story.story_id),
            None,
        )
        self.favorites = [s for s in self.favorites if s.story_id != story.story_id]
        change = FavoriteChange(story=story, action="remove", index=index)
        return await self._sync_favorite(change, token)

    def revert_favorite(self, change: FavoriteChange) -> None:
        """Undo the local effect of ``change``. The API is not called."""
        if change.action == "add":
            self._drop_added_favorite(change)
        elif change.index is not None and not self.is_favorite(change.story):
            self.favorites.insert(change.index, change.story)

    def _drop_added_favorite(self, change: FavoriteChange) -> None:
        """Remove the entry ``change`` appended, leaving earlier copies alone."""
        index = change.index
        in_place = index is not None and index < len(self.favorites)
        if not (in_place and self.favorites[index] == change.story):
            matches = [
                i for i, s in enumerate(self.favorites) if s.story_id == change.story.story_id
            ]
            if not matches:
                return
            index = matches[-1]
        del self.favorites[index]

    def is_favorite(self, story: Story) -> bool:
        return any(s.story_id == story.story_id for s in self.favorites)

    def to_credentials(self) -> StoredCredentials:
        """Return what needs to be persisted to restore this session."""
        return StoredCredentials(token=self.require_token(), username=self.username)

    async def _sync_favorite(self, change: FavoriteChange, token: str) -> FavoriteChange:
        """Send an already applied favorite change to the API."""
        try:
            if change.action == "add":
                await self.api.add_favorite(token, self.username, change.story.story_id)
            else:
                await self.api.remove_favorite(token, self.username, change.story.story_id)
        except HackOrSnoozeError as e:
            change.error = e
            logger.warning(
                f"Favorite {change.action} for story {change.story.story_id} "
                f"was not confirmed: {e}"
            )
            raise FavoriteSyncError(change, e) from e

        change.confirmed = True
        return change
