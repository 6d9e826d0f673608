"""Retry policy for API requests."""

from __future__ import annotations

from mailbreeze.errors.types import ErrorKind, MailBreezeError

BASE_DELAY = 1.0  # seconds
EXPONENTIAL_BASE = 2.0


def is_retryable_error(error: MailBreezeError) -> bool:
    """Determine if a failed attempt should be retried.

    Rate limits, 5xx responses and network failures are retryable.
    Timeouts and every other 4xx are terminal.
    """
    if error.is_timeout:
        return False

    status = error.status_code
    if status == 429:
        return True
    if status is not None and status >= 500:
        return True

    return error.is_network_error


def calculate_retry_delay(error: MailBreezeError, attempt: int) -> float:
    """Calculate delay before the next attempt.

    Args:
        error: Error from the attempt that just failed
        attempt: Which attempt just failed (1-indexed)

    Returns:
        Delay in seconds
    """
    # Server advisory wins over backoff
    if error.kind is ErrorKind.RATE_LIMIT and error.retry_after:
        return float(error.retry_after)

    # 1s, 2s, 4s, 8s, ...
    return BASE_DELAY * (EXPONENTIAL_BASE ** (attempt - 1))
