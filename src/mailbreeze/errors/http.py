"""HTTP response helpers used when classifying API failures.

This module reads the pieces of a response that error classification
depends on: the correlation header, the retry advisory and the JSON
envelope.
"""

from __future__ import annotations

from typing import Any

import httpx
import msgspec

from mailbreeze.errors.types import ErrorBody

REQUEST_ID_HEADER = "X-Request-Id"
RETRY_AFTER_HEADER = "Retry-After"


def get_request_id(response: httpx.Response) -> str | None:
    """Get the request correlation id, if the server sent one."""
    return response.headers.get(REQUEST_ID_HEADER)


def get_retry_after(response: httpx.Response) -> int | None:
    """Get the Retry-After header as a whole number of seconds.

    Args:
        response: HTTP response

    Returns:
        Seconds to wait, or None if the header is missing or not an integer
    """
    retry_after = response.headers.get(RETRY_AFTER_HEADER)
    if not retry_after:
        return None

    # Whole value only: "60s" is rejected, not read as 60
    try:
        return int(retry_after.strip())
    except ValueError:
        # HTTP-date values are not used by the API
        return None


def decode_envelope(content: bytes) -> Any:
    """Decode a response body.

    Raises:
        msgspec.DecodeError: If the body is not valid JSON
    """
    return msgspec.json.decode(content)


def extract_error_body(envelope: Any) -> ErrorBody | None:
    """Extract the ``error`` member of an envelope.

    Returns None when it is missing or does not have the expected shape;
    classification then falls back to the status code alone.
    """
    if not isinstance(envelope, dict):
        return None

    raw = envelope.get("error")
    if not isinstance(raw, dict):
        return None

    try:
        return msgspec.convert(raw, type=ErrorBody)
    except msgspec.ValidationError:
        return None
