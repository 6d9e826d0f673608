"""Engine configuration and per-request structures."""

from __future__ import annotations

from enum import StrEnum

import msgspec


class AuthStyle(StrEnum):
    """How the API key is sent."""

    HEADER = "header"  # X-API-Key: <key>
    BEARER = "bearer"  # Authorization: Bearer <key>


class EngineConfig(msgspec.Struct, frozen=True):
    """Immutable settings shared by every request an engine makes."""

    api_key: str
    base_url: str
    timeout: float  # seconds
    max_retries: int
    auth_style: AuthStyle = AuthStyle.HEADER

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key is required")
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        # Strip a single trailing slash so paths join cleanly
        if self.base_url.endswith("/"):
            msgspec.structs.force_setattr(self, "base_url", self.base_url[:-1])

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def __repr__(self) -> str:
        # Never echo the key
        return (
            f"EngineConfig(base_url={self.base_url!r}, timeout={self.timeout!r}, "
            f"max_retries={self.max_retries!r}, auth_style={self.auth_style.value!r})"
        )


class RequestOptions(msgspec.Struct, frozen=True):
    """Per-call overrides."""

    idempotency_key: str | None = None
    timeout: float | None = None  # seconds, overrides EngineConfig.timeout


class RequestAttempt(msgspec.Struct):
    """State of one ``execute()`` call, shared across its attempts."""

    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None
    timeout: float
    max_attempts: int
    attempt: int = 0

    @property
    def is_last(self) -> bool:
        return self.attempt >= self.max_attempts
