"""Request execution core for mailbreeze."""

from mailbreeze.core.engine import RequestEngine
from mailbreeze.core.http import USER_AGENT, build_headers, build_url
from mailbreeze.core.retry import calculate_retry_delay, is_retryable_error
from mailbreeze.core.types import (
    AuthStyle,
    EngineConfig,
    RequestAttempt,
    RequestOptions,
)

__all__ = [
    "RequestEngine",
    "EngineConfig",
    "AuthStyle",
    "RequestOptions",
    "RequestAttempt",
    "USER_AGENT",
    "build_url",
    "build_headers",
    "is_retryable_error",
    "calculate_retry_delay",
]
