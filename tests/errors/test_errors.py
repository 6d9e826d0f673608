"""Tests for error classification and handling."""

import asyncio

import httpx
import pytest

from mailbreeze.errors.http import (
    extract_error_body,
    get_request_id,
    get_retry_after,
)
from mailbreeze.errors.network import classify_network_error
from mailbreeze.errors.types import (
    HTTP_ERROR_MAPPINGS,
    INVALID_IDEMPOTENCY_KEY,
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


class TestMailBreezeError:
    """Tests for MailBreezeError."""

    def test_create_error(self):
        """Defaults to the generic kind with no status."""
        error = MailBreezeError(message="Something went wrong", code="OOPS")

        assert str(error) == "Something went wrong"
        assert error.kind is ErrorKind.GENERIC
        assert error.status_code is None
        assert error.request_id is None
        assert error.details is None
        assert error.retry_after is None

    def test_retry_after_only_kept_for_rate_limit(self):
        """retry_after is dropped for non rate-limit kinds."""
        error = MailBreezeError("boom", "X", kind=ErrorKind.SERVER, retry_after=10)
        assert error.retry_after is None

        limited = MailBreezeError("slow", "X", kind=ErrorKind.RATE_LIMIT, retry_after=10)
        assert limited.retry_after == 10

    def test_to_dict(self):
        """Serializes every field, adding retry_after for rate limits."""
        error = MailBreezeError(
            "slow down",
            "RATE_LIMITED",
            kind=ErrorKind.RATE_LIMIT,
            status_code=429,
            request_id="req_1",
            retry_after=30,
        )

        assert error.to_dict() == {
            "kind": "rate_limit",
            "message": "slow down",
            "code": "RATE_LIMITED",
            "status_code": 429,
            "request_id": "req_1",
            "details": None,
            "retry_after": 30,
        }

    def test_to_dict_omits_retry_after_for_other_kinds(self):
        error = MailBreezeError("bad", "INVALID", kind=ErrorKind.VALIDATION)
        assert "retry_after" not in error.to_dict()

    def test_is_catchable_as_exception(self):
        with pytest.raises(Exception):
            raise MailBreezeError("bad", "X")


class TestClassifyHttpError:
    """Tests for classify_http_error."""

    @pytest.mark.parametrize(
        "status,kind",
        [
            (400, ErrorKind.VALIDATION),
            (401, ErrorKind.AUTHENTICATION),
            (404, ErrorKind.NOT_FOUND),
            (429, ErrorKind.RATE_LIMIT),
            (500, ErrorKind.SERVER),
            (502, ErrorKind.SERVER),
            (503, ErrorKind.SERVER),
            (599, ErrorKind.SERVER),
            (402, ErrorKind.GENERIC),
            (403, ErrorKind.GENERIC),
            (409, ErrorKind.GENERIC),
            (418, ErrorKind.GENERIC),
        ],
    )
    def test_status_maps_to_kind(self, status, kind):
        assert classify_http_error(status).kind is kind

    def test_only_rate_limit_reads_retry_after(self):
        """Only 429 honors the Retry-After header."""
        flagged = [s for s, m in HTTP_ERROR_MAPPINGS.items() if m.retry_after_header]
        assert flagged == [429]

    def test_mapping_carries_no_retry_policy(self):
        assert HTTPErrorMapping.__struct_fields__ == ("kind", "retry_after_header")


class TestCreateErrorFromResponse:
    """Tests for create_error_from_response."""

    def test_uses_body_code_and_message(self):
        body = ErrorBody(code="INVALID_EMAIL", message="Bad address", details={"f": 1})
        error = create_error_from_response(400, body, "req_9")

        assert error.kind is ErrorKind.VALIDATION
        assert error.code == "INVALID_EMAIL"
        assert error.message == "Bad address"
        assert error.status_code == 400
        assert error.request_id == "req_9"
        assert error.details == {"f": 1}

    def test_defaults_without_body(self):
        error = create_error_from_response(500)

        assert error.kind is ErrorKind.SERVER
        assert error.message == "Unknown error"
        assert error.code == UNKNOWN_ERROR
        assert error.request_id is None

    def test_partial_body_fills_defaults(self):
        error = create_error_from_response(404, ErrorBody(message="Gone"))

        assert error.message == "Gone"
        assert error.code == UNKNOWN_ERROR

    def test_rate_limit_keeps_retry_after(self):
        error = create_error_from_response(429, None, None, retry_after=60)
        assert error.retry_after == 60

    def test_other_status_drops_retry_after(self):
        error = create_error_from_response(503, None, None, retry_after=60)
        assert error.retry_after is None

    def test_unmapped_status_keeps_status_code(self):
        error = create_error_from_response(403)

        assert error.kind is ErrorKind.GENERIC
        assert error.status_code == 403


class TestSynthesizedErrors:
    """Tests for client-side error constructors."""

    def test_timeout_error(self):
        error = timeout_error()

        assert error.code == TIMEOUT_ERROR
        assert error.status_code == 0
        assert error.kind is ErrorKind.SERVER
        assert error.is_timeout
        assert not error.is_network_error

    def test_network_error(self):
        error = network_error(ConnectionError("refused"))

        assert error.code == NETWORK_ERROR
        assert error.status_code == 0
        assert error.message == "Network error: refused"
        assert error.is_network_error
        assert not error.is_timeout

    def test_invalid_idempotency_key_error(self):
        error = invalid_idempotency_key_error()

        assert error.code == INVALID_IDEMPOTENCY_KEY
        assert error.kind is ErrorKind.VALIDATION
        assert error.status_code is None


class TestNetworkClassification:
    """Tests for classify_network_error."""

    def test_asyncio_timeout_is_timeout(self):
        assert classify_network_error(asyncio.TimeoutError()).code == TIMEOUT_ERROR

    def test_httpx_timeout_is_timeout(self):
        error = classify_network_error(httpx.ReadTimeout("slow"))
        assert error.code == TIMEOUT_ERROR

    def test_connect_error_is_network_error(self):
        error = classify_network_error(httpx.ConnectError("refused"))
        assert error.code == NETWORK_ERROR

    def test_decoding_error_is_network_error(self):
        error = classify_network_error(httpx.DecodingError("bad gzip"))
        assert error.code == NETWORK_ERROR
        assert error.message == "Network error: bad gzip"


class TestHttpHelpers:
    """Tests for response header and body helpers."""

    def test_get_request_id(self):
        response = httpx.Response(200, headers={"X-Request-Id": "req_abc"})
        assert get_request_id(response) == "req_abc"

    def test_get_request_id_missing(self):
        assert get_request_id(httpx.Response(200)) is None

    @pytest.mark.parametrize(
        "value,expected",
        [("60", 60), (" 5 ", 5), ("60s", None), ("soon", None), ("", None)],
    )
    def test_get_retry_after(self, value, expected):
        response = httpx.Response(429, headers={"Retry-After": value})
        assert get_retry_after(response) == expected

    def test_get_retry_after_missing(self):
        assert get_retry_after(httpx.Response(429)) is None

    def test_extract_error_body(self):
        body = extract_error_body(
            {"success": False, "error": {"code": "X", "message": "m"}}
        )
        assert body == ErrorBody(code="X", message="m")

    @pytest.mark.parametrize(
        "envelope",
        [
            None,
            [],
            {"success": False},
            {"success": False, "error": "text"},
            {"success": False, "error": {"code": 12}},
        ],
    )
    def test_extract_error_body_tolerates_bad_shapes(self, envelope):
        assert extract_error_body(envelope) is None
