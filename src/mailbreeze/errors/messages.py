"""Remediation hints shown alongside terminal errors."""

from __future__ import annotations

from mailbreeze.errors.types import (
    INVALID_IDEMPOTENCY_KEY,
    NETWORK_ERROR,
    TIMEOUT_ERROR,
    ErrorKind,
    MailBreezeError,
)

KIND_REMEDIATION: dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: (
        "Your API key was rejected.\n"
        "Run: [cyan]mailbreeze key set[/cyan]"
    ),
    ErrorKind.VALIDATION: "Check the request parameters and try again.",
    ErrorKind.NOT_FOUND: "The requested resource does not exist or was deleted.",
    ErrorKind.RATE_LIMIT: "Rate limited. Wait before sending more requests.",
    ErrorKind.SERVER: (
        "The MailBreeze API is experiencing issues. Try again later."
    ),
}

CODE_REMEDIATION: dict[str, str] = {
    TIMEOUT_ERROR: (
        "The request timed out. Raise the timeout with "
        "[cyan]MAILBREEZE_TIMEOUT[/cyan] or try again."
    ),
    NETWORK_ERROR: "Check your internet connection and the configured base URL.",
    INVALID_IDEMPOTENCY_KEY: "Idempotency keys must not contain line breaks.",
}


def get_remediation(error: MailBreezeError) -> str | None:
    """Get a remediation hint for an error.

    Code-specific hints win over the generic hint for the error kind.

    Args:
        error: The terminal error

    Returns:
        Remediation message or None
    """
    if error.code in CODE_REMEDIATION:
        return CODE_REMEDIATION[error.code]

    if error.kind is ErrorKind.RATE_LIMIT and error.retry_after:
        return f"Rate limited. Retry in {error.retry_after} seconds."

    return KIND_REMEDIATION.get(error.kind)
