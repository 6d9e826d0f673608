"""Request execution engine.

Turns a logical API operation into HTTP calls: builds the URL and headers,
bounds each attempt with a timeout, unwraps the response envelope and
retries transient failures with backoff.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx
import msgspec

from mailbreeze.core.http import build_headers, build_url
from mailbreeze.core.logging import get_logger
from mailbreeze.core.retry import calculate_retry_delay, is_retryable_error
from mailbreeze.core.types import EngineConfig, RequestAttempt, RequestOptions
from mailbreeze.errors.http import (
    decode_envelope,
    extract_error_body,
    get_request_id,
    get_retry_after,
)
from mailbreeze.errors.network import classify_network_error
from mailbreeze.errors.types import MailBreezeError, create_error_from_response

Sleep = Callable[[float], Awaitable[None]]

_BODYLESS_METHODS = frozenset({"GET", "HEAD"})


class RequestEngine:
    """Executes API requests with authentication, timeouts and retries.

    The engine keeps no per-request state on the instance, so one engine can
    serve any number of concurrent ``execute()`` calls.
    """

    def __init__(
        self,
        config: EngineConfig,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Immutable engine settings
            client: HTTP client to send requests with; one is created (and
                owned) by the engine when omitted
            sleep: Coroutine used to wait between attempts
        """
        self.config = config
        self._owns_client = client is None
        # The per-attempt deadline is enforced by execute(), not by httpx
        self._client = client or httpx.AsyncClient(timeout=None)
        self._sleep = sleep or asyncio.sleep
        self._logger = get_logger(__name__)

    async def __aenter__(self) -> RequestEngine:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the engine created it."""
        if self._owns_client:
            await self._client.aclose()

    async def execute(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Make an API request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: API path, appended to the base URL
            body: JSON body, ignored for GET and HEAD
            query: Query parameters; None values are skipped
            options: Idempotency key and timeout override

        Returns:
            The ``data`` member of the response envelope, or None

        Raises:
            MailBreezeError: The classified outcome of the last attempt
        """
        options = options or RequestOptions()
        method = method.upper()

        # Header validation fails before any network call
        headers = build_headers(self.config, options.idempotency_key)

        content = None
        if body is not None and method not in _BODYLESS_METHODS:
            content = msgspec.json.encode(body)

        attempt = RequestAttempt(
            method=method,
            url=build_url(self.config.base_url, path, query),
            headers=headers,
            body=content,
            timeout=options.timeout if options.timeout is not None else self.config.timeout,
            max_attempts=self.config.max_attempts,
        )
        log = self._logger.bind(method=method, url=attempt.url)

        while attempt.attempt < attempt.max_attempts:
            attempt.attempt += 1
            log.debug(
                "Sending request",
                attempt=attempt.attempt,
                max_attempts=attempt.max_attempts,
            )

            try:
                return await self._attempt(attempt)
            except MailBreezeError as error:
                if not is_retryable_error(error) or attempt.is_last:
                    log.debug(
                        "Request failed",
                        attempt=attempt.attempt,
                        status_code=error.status_code,
                        code=error.code,
                        request_id=error.request_id,
                    )
                    raise

                delay = calculate_retry_delay(error, attempt.attempt)
                log.info(
                    "Retrying request",
                    attempt=attempt.attempt,
                    max_attempts=attempt.max_attempts,
                    delay_s=delay,
                    status_code=error.status_code,
                    code=error.code,
                    request_id=error.request_id,
                )
                await self._sleep(delay)

        # Unreachable: max_attempts is always >= 1
        raise RuntimeError("Unexpected state in retry loop")

    async def _attempt(self, attempt: RequestAttempt) -> Any:
        """Perform one transport call bounded by the attempt's timeout."""
        try:
            # wait_for cancels the in-flight request when the deadline passes
            # and releases its timer on every exit path
            response = await asyncio.wait_for(
                self._client.request(
                    attempt.method,
                    attempt.url,
                    headers=attempt.headers,
                    content=attempt.body,
                ),
                timeout=attempt.timeout,
            )
        except (asyncio.TimeoutError, httpx.RequestError) as e:
            raise classify_network_error(e) from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Unwrap the response envelope or raise the classified error."""
        request_id = get_request_id(response)
        retry_after = get_retry_after(response)

        if response.status_code == 204:
            return None

        try:
            envelope = decode_envelope(response.content)
        except msgspec.DecodeError:
            if not response.is_success:
                raise create_error_from_response(
                    response.status_code, None, request_id, retry_after
                ) from None
            return None

        success = envelope.get("success") if isinstance(envelope, dict) else None

        if not success:
            # Failure reported inside a 2xx is treated as a validation error
            status_code = response.status_code if not response.is_success else 400
            raise create_error_from_response(
                status_code,
                extract_error_body(envelope),
                request_id,
                retry_after,
            )

        if not response.is_success:
            # The HTTP status wins over a stale success flag
            raise create_error_from_response(
                response.status_code, None, request_id, retry_after
            )

        return envelope.get("data")
