"""Configuration structures and loading for mailbreeze."""

import os
import tomllib
from pathlib import Path
from typing import Literal

import msgspec
import tomli_w

from mailbreeze.core.types import AuthStyle

# Default values
DEFAULT_BASE_URL = "https://api.mailbreeze.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_LOG_LEVEL = "warning"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


# API configuration
class ApiConfig(msgspec.Struct, omit_defaults=True):
    """Connection settings for the MailBreeze API."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    auth_style: AuthStyle = AuthStyle.HEADER
    domain_id: str | None = None


# Logging configuration
class LoggingConfig(msgspec.Struct, omit_defaults=True):
    """Log output settings."""

    level: LogLevel = DEFAULT_LOG_LEVEL
    json: bool = False


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    api: ApiConfig = msgspec.field(default_factory=ApiConfig)
    logging: LoggingConfig = msgspec.field(default_factory=LoggingConfig)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def _env_number(name: str, cast: type[int] | type[float]) -> int | float:
    value = os.environ[name]
    try:
        return cast(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    MAILBREEZE_BASE_URL: API base URL
    MAILBREEZE_TIMEOUT: Request timeout in seconds
    MAILBREEZE_MAX_RETRIES: Retries after the first attempt
    MAILBREEZE_AUTH_STYLE: "header" or "bearer"
    MAILBREEZE_LOG_LEVEL: Minimum log level
    """
    api_changes: dict = {}

    if base_url := os.environ.get("MAILBREEZE_BASE_URL"):
        api_changes["base_url"] = base_url

    if "MAILBREEZE_TIMEOUT" in os.environ:
        api_changes["timeout"] = _env_number("MAILBREEZE_TIMEOUT", float)

    if "MAILBREEZE_MAX_RETRIES" in os.environ:
        api_changes["max_retries"] = _env_number("MAILBREEZE_MAX_RETRIES", int)

    if auth_style := os.environ.get("MAILBREEZE_AUTH_STYLE"):
        try:
            api_changes["auth_style"] = AuthStyle(auth_style.lower())
        except ValueError as e:
            raise ValueError(
                f"MAILBREEZE_AUTH_STYLE must be 'header' or 'bearer', got {auth_style!r}"
            ) from e

    if api_changes:
        config = msgspec.structs.replace(
            config, api=msgspec.structs.replace(config.api, **api_changes)
        )

    if level := os.environ.get("MAILBREEZE_LOG_LEVEL"):
        logging_config = msgspec.structs.replace(config.logging, level=level.lower())
        config = msgspec.structs.replace(config, logging=logging_config)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults."""
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    config = convert_config(raw_data) if raw_data else Config()

    return _apply_env_overrides(config)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()

    # TOML has no null
    def clean_none(d: dict) -> dict:
        return {
            k: clean_none(v) if isinstance(v, dict) else v
            for k, v in d.items()
            if v is not None
        }

    _save_to_toml(clean_none(msgspec.to_builtins(config)), config_path)

    global _config
    _config = config


def reset_config(path: Path | None = None) -> Config:
    """Remove the config file and fall back to defaults."""
    from .paths import config_file

    config_path = path or config_file()
    if config_path.exists():
        config_path.unlink()
    return reload_config() if path is None else load_config(config_path)
