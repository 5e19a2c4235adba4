"""YAML configuration loading utilities."""

from pathlib import Path

import yaml

from hack_or_snooze.config.models import HackOrSnoozeConfig


def load_config(path: Path | str) -> HackOrSnoozeConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated HackOrSnoozeConfig. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)

    return HackOrSnoozeConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
