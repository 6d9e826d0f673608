"""Error handling for mailbreeze."""

from mailbreeze.errors.http import (
    decode_envelope,
    extract_error_body,
    get_request_id,
    get_retry_after,
)
from mailbreeze.errors.messages import get_remediation
from mailbreeze.errors.network import classify_network_error
from mailbreeze.errors.types import (
    HTTP_ERROR_MAPPINGS,
    INVALID_IDEMPOTENCY_KEY,
    INVALID_RESPONSE,
    NETWORK_ERROR,
    TIMEOUT_ERROR,
    UNKNOWN_ERROR,
    ErrorBody,
    ErrorKind,
    HTTPErrorMapping,
    MailBreezeError,
    classify_http_error,
    create_error_from_response,
    invalid_idempotency_key_error,
    network_error,
    timeout_error,
)

__all__ = [
    # Core types
    "ErrorKind",
    "MailBreezeError",
    "ErrorBody",
    "HTTPErrorMapping",
    "HTTP_ERROR_MAPPINGS",
    # Codes
    "TIMEOUT_ERROR",
    "NETWORK_ERROR",
    "UNKNOWN_ERROR",
    "INVALID_IDEMPOTENCY_KEY",
    "INVALID_RESPONSE",
    # Classification functions
    "classify_http_error",
    "create_error_from_response",
    "timeout_error",
    "network_error",
    "invalid_idempotency_key_error",
    "classify_network_error",
    # HTTP utilities
    "get_request_id",
    "get_retry_after",
    "decode_envelope",
    "extract_error_body",
    # Messages
    "get_remediation",
]
