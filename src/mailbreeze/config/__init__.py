"""Configuration management for mailbreeze."""

from mailbreeze.config.credentials import (
    API_KEY_ENV_VAR,
    MissingApiKeyError,
    check_credential_permissions,
    delete_api_key,
    delete_credential,
    find_api_key,
    get_api_key,
    read_credential,
    store_api_key,
    write_credential,
)
from mailbreeze.config.paths import (
    config_dir,
    config_file,
    credentials_file,
    ensure_directories,
)
from mailbreeze.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ApiConfig,
    Config,
    LoggingConfig,
    get_config,
    load_config,
    reload_config,
    reset_config,
    save_config,
)

__all__ = [
    # paths
    "config_dir",
    "config_file",
    "credentials_file",
    "ensure_directories",
    # settings
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_MAX_RETRIES",
    "ApiConfig",
    "Config",
    "LoggingConfig",
    "get_config",
    "load_config",
    "reload_config",
    "reset_config",
    "save_config",
    # credentials
    "API_KEY_ENV_VAR",
    "MissingApiKeyError",
    "write_credential",
    "read_credential",
    "delete_credential",
    "check_credential_permissions",
    "find_api_key",
    "get_api_key",
    "store_api_key",
    "delete_api_key",
]
