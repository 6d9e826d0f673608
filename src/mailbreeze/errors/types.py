"""Error types and classifications."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import msgspec


class ErrorKind(StrEnum):
    """Error kinds for handling decisions."""

    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"


# Codes synthesized by the client rather than sent by the API
TIMEOUT_ERROR = "TIMEOUT_ERROR"
NETWORK_ERROR = "NETWORK_ERROR"
UNKNOWN_ERROR = "UNKNOWN_ERROR"
INVALID_IDEMPOTENCY_KEY = "INVALID_IDEMPOTENCY_KEY"
INVALID_RESPONSE = "INVALID_RESPONSE"


class MailBreezeError(Exception):
    """Every failure surfaced by the client.

    A single exception type tagged with an ``ErrorKind``; match on ``kind``
    instead of subclassing per status code.
    """

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind = ErrorKind.GENERIC,
        status_code: int | None = None,
        request_id: str | None = None,
        details: dict[str, Any] | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.status_code = status_code
        self.request_id = request_id
        self.details = details
        # Only meaningful for rate limits
        self.retry_after = retry_after if kind is ErrorKind.RATE_LIMIT else None

    def __repr__(self) -> str:
        return (
            f"MailBreezeError(kind={self.kind.value!r}, code={self.code!r}, "
            f"status_code={self.status_code!r}, message={self.message!r})"
        )

    @property
    def is_timeout(self) -> bool:
        return self.status_code == 0 and self.code == TIMEOUT_ERROR

    @property
    def is_network_error(self) -> bool:
        return self.status_code == 0 and self.code == NETWORK_ERROR

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly mapping for logging and output."""
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "request_id": self.request_id,
            "details": self.details,
        }
        if self.kind is ErrorKind.RATE_LIMIT:
            data["retry_after"] = self.retry_after
        return data


class ErrorBody(msgspec.Struct, frozen=True):
    """The ``error`` member of a failed response envelope."""

    code: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


class HTTPErrorMapping(msgspec.Struct, frozen=True):
    """How to handle an HTTP status code."""

    kind: ErrorKind
    retry_after_header: bool = False


HTTP_ERROR_MAPPINGS: dict[int, HTTPErrorMapping] = {
    400: HTTPErrorMapping(kind=ErrorKind.VALIDATION),
    401: HTTPErrorMapping(kind=ErrorKind.AUTHENTICATION),
    404: HTTPErrorMapping(kind=ErrorKind.NOT_FOUND),
    429: HTTPErrorMapping(
        kind=ErrorKind.RATE_LIMIT,
        retry_after_header=True,
    ),
}

_SERVER_MAPPING = HTTPErrorMapping(kind=ErrorKind.SERVER)
_GENERIC_MAPPING = HTTPErrorMapping(kind=ErrorKind.GENERIC)


def classify_http_error(status_code: int) -> HTTPErrorMapping:
    """Classify an HTTP error by status code."""
    if status_code in HTTP_ERROR_MAPPINGS:
        return HTTP_ERROR_MAPPINGS[status_code]

    if status_code >= 500:
        return _SERVER_MAPPING

    # 402, 403, 409, 418, ... keep their status but have no dedicated kind
    return _GENERIC_MAPPING


def create_error_from_response(
    status_code: int,
    body: ErrorBody | None = None,
    request_id: str | None = None,
    retry_after: int | None = None,
) -> MailBreezeError:
    """Build the error for a failed HTTP exchange.

    Total over its inputs: any of ``body``, ``request_id`` and
    ``retry_after`` may be missing.
    """
    mapping = classify_http_error(status_code)

    message = "Unknown error"
    code = UNKNOWN_ERROR
    details = None
    if body is not None:
        message = body.message if body.message is not None else message
        code = body.code if body.code is not None else code
        details = body.details

    return MailBreezeError(
        message=message,
        code=code,
        kind=mapping.kind,
        status_code=status_code,
        request_id=request_id,
        details=details,
        retry_after=retry_after if mapping.retry_after_header else None,
    )


def timeout_error() -> MailBreezeError:
    """Error for a transport call that missed its deadline."""
    return MailBreezeError(
        message="Request timeout",
        code=TIMEOUT_ERROR,
        kind=ErrorKind.SERVER,
        status_code=0,
    )


def network_error(exc: BaseException) -> MailBreezeError:
    """Error for a request that never reached the server."""
    return MailBreezeError(
        message=f"Network error: {exc}",
        code=NETWORK_ERROR,
        kind=ErrorKind.SERVER,
        status_code=0,
    )


def invalid_idempotency_key_error() -> MailBreezeError:
    return MailBreezeError(
        message="Invalid idempotency key: contains invalid characters",
        code=INVALID_IDEMPOTENCY_KEY,
        kind=ErrorKind.VALIDATION,
    )
