"""API key storage for mailbreeze."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from mailbreeze.config.paths import credentials_file

API_KEY_ENV_VAR = "MAILBREEZE_API_KEY"

_INSECURE_BITS = stat.S_IRGRP | stat.S_IWGRP | stat.S_IROTH | stat.S_IWOTH


class MissingApiKeyError(ValueError):
    """No API key was passed, set in the environment or stored."""

    def __init__(self, message: str = "API key is required") -> None:
        super().__init__(message)


def write_credential(path: Path, content: bytes) -> None:
    """Securely write credential to file with 0o600 permissions."""
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write to temp file first, then rename for atomicity
    temp_path = path.with_suffix(".tmp")
    temp_path.write_bytes(content)
    temp_path.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 0o600
    temp_path.replace(path)


def read_credential(path: Path) -> bytes | None:
    """Read credential file if it exists and has secure permissions."""
    if not path.exists():
        return None

    if path.stat().st_mode & _INSECURE_BITS:
        return None

    return path.read_bytes()


def delete_credential(path: Path) -> bool:
    """Delete credential file.

    Returns:
        True if deleted, False if didn't exist
    """
    if not path.exists():
        return False

    path.unlink()
    return True


def check_credential_permissions(path: Path) -> bool:
    """Verify credential file has secure permissions (0o600 or stricter)."""
    if not path.exists():
        return True

    return not (path.stat().st_mode & _INSECURE_BITS)


def find_api_key() -> tuple[str | None, str | None]:
    """Locate the API key.

    Returns:
        (api_key, source) - source is 'env', 'file', or None
    """
    if env_key := os.environ.get(API_KEY_ENV_VAR, "").strip():
        return env_key, "env"

    content = read_credential(credentials_file())
    if content and (stored := content.decode().strip()):
        return stored, "file"

    return None, None


def get_api_key() -> str | None:
    """Get the API key from the environment or the credential file."""
    api_key, _ = find_api_key()
    return api_key


def store_api_key(api_key: str) -> Path:
    """Save an API key to the credential file."""
    path = credentials_file()
    write_credential(path, api_key.strip().encode())
    return path


def delete_api_key() -> bool:
    """Remove the stored API key."""
    return delete_credential(credentials_file())
