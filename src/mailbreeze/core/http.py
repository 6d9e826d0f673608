"""Request construction helpers: URLs and headers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from mailbreeze import __version__
from mailbreeze.core.types import AuthStyle, EngineConfig
from mailbreeze.errors.types import invalid_idempotency_key_error

USER_AGENT = f"mailbreeze-python/{__version__}"

IDEMPOTENCY_KEY_HEADER = "X-Idempotency-Key"
API_KEY_HEADER = "X-API-Key"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(
    base_url: str,
    path: str,
    query: Mapping[str, Any] | None = None,
) -> str:
    """Join the base URL, path and query string.

    ``base_url`` must already have its trailing slash stripped. Query
    entries whose value is None are dropped; the rest keep their order.
    """
    normalized_path = path if path.startswith("/") else f"/{path}"
    url = f"{base_url}{normalized_path}"

    if query:
        pairs = [
            (key, _query_value(value))
            for key, value in query.items()
            if value is not None
        ]
        if pairs:
            url = f"{url}?{urlencode(pairs)}"

    return url


def build_headers(
    config: EngineConfig,
    idempotency_key: str | None = None,
) -> dict[str, str]:
    """Build the headers sent with every request.

    Raises:
        MailBreezeError: If the idempotency key contains CR or LF
    """
    headers = {
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }

    if config.auth_style is AuthStyle.BEARER:
        headers["Authorization"] = f"Bearer {config.api_key}"
    else:
        headers[API_KEY_HEADER] = config.api_key

    if idempotency_key:
        # Guard against header injection
        if "\r" in idempotency_key or "\n" in idempotency_key:
            raise invalid_idempotency_key_error()
        headers[IDEMPOTENCY_KEY_HEADER] = idempotency_key

    return headers
