"""Platform-specific paths for mailbreeze configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_NAME = "mailbreeze"


def _get_env_path(env_var: str, fallback: Path) -> Path:
    """Get path from environment variable or fallback."""
    if env_value := os.environ.get(env_var):
        return Path(env_value)
    return fallback


def config_dir() -> Path:
    """Get user config directory.

    Respects MAILBREEZE_CONFIG_DIR environment variable.
    """
    base_dir = Path(user_config_dir(PACKAGE_NAME))
    return _get_env_path("MAILBREEZE_CONFIG_DIR", base_dir)


def config_file() -> Path:
    """Get main config.toml path."""
    return config_dir() / "config.toml"


def credentials_file() -> Path:
    """Get the stored API key path."""
    return config_dir() / "credentials" / "api_key"


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    for directory in (config_dir(), credentials_file().parent):
        directory.mkdir(parents=True, exist_ok=True)
