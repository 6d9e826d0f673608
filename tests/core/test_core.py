"""Tests for engine configuration and retry policy."""

from __future__ import annotations

import pytest

from mailbreeze.core.retry import calculate_retry_delay, is_retryable_error
from mailbreeze.core.types import AuthStyle, EngineConfig, RequestAttempt
from mailbreeze.errors.types import (
    ErrorKind,
    MailBreezeError,
    create_error_from_response,
    invalid_idempotency_key_error,
    network_error,
    timeout_error,
)


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_strips_one_trailing_slash(self):
        config = EngineConfig(
            api_key="k", base_url="https://api.test/", timeout=1.0, max_retries=0
        )
        assert config.base_url == "https://api.test"

    def test_defaults_to_header_auth(self):
        config = EngineConfig(api_key="k", base_url="u", timeout=1.0, max_retries=0)
        assert config.auth_style is AuthStyle.HEADER

    def test_max_attempts(self):
        config = EngineConfig(api_key="k", base_url="u", timeout=1.0, max_retries=3)
        assert config.max_attempts == 4

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"api_key": ""}, "API key is required"),
            ({"max_retries": -1}, "max_retries"),
            ({"timeout": 0}, "timeout"),
        ],
    )
    def test_rejects_invalid_values(self, overrides, message):
        values = {"api_key": "k", "base_url": "u", "timeout": 1.0, "max_retries": 0}
        values.update(overrides)
        with pytest.raises(ValueError, match=message):
            EngineConfig(**values)

    def test_repr_hides_api_key(self):
        config = EngineConfig(
            api_key="sk_live_secret", base_url="u", timeout=1.0, max_retries=0
        )
        assert "sk_live_secret" not in repr(config)


class TestRequestAttempt:
    def test_is_last(self):
        attempt = RequestAttempt(
            method="GET", url="u", headers={}, body=None, timeout=1.0, max_attempts=2
        )
        assert not attempt.is_last
        attempt.attempt = 2
        assert attempt.is_last


class TestIsRetryableError:
    """Tests for is_retryable_error."""

    @pytest.mark.parametrize("status", [429, 500, 502, 503, 504])
    def test_retryable_statuses(self, status):
        assert is_retryable_error(create_error_from_response(status))

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422])
    def test_terminal_statuses(self, status):
        assert not is_retryable_error(create_error_from_response(status))

    def test_network_error_is_retryable(self):
        assert is_retryable_error(network_error(OSError("reset")))

    def test_timeout_is_not_retryable(self):
        assert not is_retryable_error(timeout_error())

    def test_client_side_validation_is_not_retryable(self):
        assert not is_retryable_error(invalid_idempotency_key_error())

    def test_error_without_status_is_not_retryable(self):
        assert not is_retryable_error(MailBreezeError("x", "X"))


class TestCalculateRetryDelay:
    """Tests for calculate_retry_delay."""

    @pytest.mark.parametrize("attempt,expected", [(1, 1.0), (2, 2.0), (3, 4.0), (4, 8.0)])
    def test_exponential_backoff(self, attempt, expected):
        error = create_error_from_response(500)
        assert calculate_retry_delay(error, attempt) == expected

    def test_rate_limit_advisory_wins(self):
        error = create_error_from_response(429, retry_after=60)
        assert calculate_retry_delay(error, 3) == 60.0

    def test_zero_retry_after_falls_back_to_backoff(self):
        error = create_error_from_response(429, retry_after=0)
        assert calculate_retry_delay(error, 2) == 2.0

    def test_rate_limit_without_advisory(self):
        error = MailBreezeError("slow", "RL", kind=ErrorKind.RATE_LIMIT, status_code=429)
        assert calculate_retry_delay(error, 1) == 1.0
