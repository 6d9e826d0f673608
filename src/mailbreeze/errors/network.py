"""Network error classification utilities.

This module turns transport-level exceptions into structured errors.
"""

from __future__ import annotations

import asyncio

import httpx

from mailbreeze.errors.types import MailBreezeError, network_error, timeout_error


def classify_network_error(error: BaseException) -> MailBreezeError:
    """Classify a transport exception into a structured error.

    Args:
        error: Exception raised while sending a request

    Returns:
        MailBreezeError with status code 0
    """
    # The deadline race and httpx's own timeouts mean the same thing
    if isinstance(error, (asyncio.TimeoutError, httpx.TimeoutException)):
        return timeout_error()

    return network_error(error)
