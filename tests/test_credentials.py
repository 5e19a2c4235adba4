"""Tests for the credential store and session restore."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from hack_or_snooze.api.client import StoryApi
from hack_or_snooze.api.schemas import UserRecord
from hack_or_snooze.credentials import CredentialStore, StoredCredentials
from hack_or_snooze.errors import AuthError
from hack_or_snooze.users import User


@pytest.fixture
def user_record() -> UserRecord:
    return UserRecord(username="ann", name="Ann A", created_at="2025-12-01T00:00:00.000Z")


@pytest.fixture
def api(user_record: UserRecord) -> MagicMock:
    mock = MagicMock(spec=StoryApi)
    mock.get_user = AsyncMock(return_value=user_record)
    return mock


@pytest.fixture
def store(tmp_path: Path) -> CredentialStore:
    return CredentialStore(tmp_path / "nested" / "credentials.json")


def test_save_and_load(store: CredentialStore, api: MagicMock, user_record: UserRecord) -> None:
    store.save(User.from_record(api, user_record, "tok"))

    assert store.path.exists()
    assert store.load() == StoredCredentials(token="tok", username="ann")


def test_load_missing_file(store: CredentialStore) -> None:
    assert store.load() is None


def test_load_corrupt_file(store: CredentialStore) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")
    assert store.load() is None


def test_clear(store: CredentialStore, api: MagicMock, user_record: UserRecord) -> None:
    store.save(User.from_record(api, user_record, "tok"))
    store.clear()
    assert not store.path.exists()
    store.clear()  # clearing twice is fine


def test_save_without_token_raises(
    store: CredentialStore, api: MagicMock, user_record: UserRecord
) -> None:
    with pytest.raises(AuthError):
        store.save(User.from_record(api, user_record, ""))
    assert not store.path.exists()


def test_path_expands_user(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert CredentialStore("~/creds.json").path == tmp_path / "creds.json"


async def test_restore(store: CredentialStore, api: MagicMock, user_record: UserRecord) -> None:
    store.save(User.from_record(api, user_record, "tok"))

    user = await User.restore(api, store)

    assert user is not None
    assert user.username == "ann"
    assert user.login_token == "tok"
    api.get_user.assert_awaited_once_with("tok", "ann")


async def test_restore_without_credentials(store: CredentialStore, api: MagicMock) -> None:
    assert await User.restore(api, store) is None
    api.get_user.assert_not_awaited()


async def test_restore_with_rejected_token(
    store: CredentialStore, api: MagicMock, user_record: UserRecord
) -> None:
    store.save(User.from_record(api, user_record, "expired"))
    api.get_user.side_effect = AuthError("Invalid token", status_code=401)

    assert await User.restore(api, store) is None
