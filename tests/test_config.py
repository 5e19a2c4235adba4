"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pydantic
import pytest

from hack_or_snooze.api.client import DEFAULT_BASE_URL, StoryApi
from hack_or_snooze.config import (
    ApiConfig,
    CredentialsConfig,
    HackOrSnoozeConfig,
    LoggingConfig,
    create_api,
    create_credential_store,
    create_from_config,
    get_default_config_path,
    load_config,
)
from hack_or_snooze.credentials import CredentialStore


def _write_yaml(content: str) -> Path:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        return Path(f.name)


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_api_config_defaults(self) -> None:
        config = ApiConfig()
        assert config.base_url is None
        assert config.timeout_seconds == 30.0

    def test_api_config_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ApiConfig(timeout_seconds=0)

    def test_credentials_config_defaults(self) -> None:
        config = CredentialsConfig()
        assert config.path == "~/.config/hack-or-snooze/credentials.json"

    def test_logging_config_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "%(message)s"

    def test_logging_config_rejects_unknown_level(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            LoggingConfig(level="FOO")  # type: ignore[arg-type]

    def test_root_config_defaults(self) -> None:
        config = HackOrSnoozeConfig()
        assert config.api == ApiConfig()
        assert config.credentials == CredentialsConfig()
        assert config.logging == LoggingConfig()

    def test_configs_are_frozen(self) -> None:
        config = ApiConfig()
        with pytest.raises(pydantic.ValidationError):
            config.timeout_seconds = 5.0  # type: ignore[misc]


class TestLoadConfig:
    """Tests for YAML loading."""

    def test_load_full_config(self) -> None:
        path = _write_yaml(
            """
api:
  base_url: https://staging.test
  timeout_seconds: 5
credentials:
  path: /tmp/creds.json
logging:
  level: DEBUG
"""
        )
        config = load_config(path)

        assert config.api.base_url == "https://staging.test"
        assert config.api.timeout_seconds == 5.0
        assert config.credentials.path == "/tmp/creds.json"
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "%(message)s"

    def test_load_empty_file_gives_defaults(self) -> None:
        assert load_config(_write_yaml("")) == HackOrSnoozeConfig()

    def test_load_invalid_config(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            load_config(_write_yaml("api:\n  timeout_seconds: fast\n"))

    def test_load_rejects_unknown_log_level(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            load_config(_write_yaml("logging:\n  level: FOO\n"))

    def test_load_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_default_config_loads(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert load_config(path) == HackOrSnoozeConfig()


class TestFactory:
    """Tests for building components from config."""

    def test_create_api(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HACK_OR_SNOOZE_BASE_URL", raising=False)
        api = create_api(HackOrSnoozeConfig())
        assert isinstance(api, StoryApi)
        assert api.base_url == DEFAULT_BASE_URL

    def test_create_api_with_base_url(self) -> None:
        config = HackOrSnoozeConfig(api=ApiConfig(base_url="https://staging.test"))
        assert create_api(config).base_url == "https://staging.test"

    def test_create_credential_store(self, tmp_path: Path) -> None:
        path = tmp_path / "creds.json"
        config = HackOrSnoozeConfig(credentials=CredentialsConfig(path=str(path)))
        store = create_credential_store(config)
        assert isinstance(store, CredentialStore)
        assert store.path == path

    def test_create_from_config(self) -> None:
        api, store = create_from_config(HackOrSnoozeConfig())
        assert isinstance(api, StoryApi)
        assert isinstance(store, CredentialStore)
