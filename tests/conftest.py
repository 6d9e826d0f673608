"""Pytest configuration and shared fixtures for mailbreeze tests."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

import mailbreeze.config.settings as settings_module
from mailbreeze.core.engine import RequestEngine
from mailbreeze.core.types import AuthStyle, EngineConfig

Handler = Callable[[httpx.Request], Any]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at an empty temp directory and clear env overrides."""
    for name in (
        "MAILBREEZE_API_KEY",
        "MAILBREEZE_BASE_URL",
        "MAILBREEZE_TIMEOUT",
        "MAILBREEZE_MAX_RETRIES",
        "MAILBREEZE_AUTH_STYLE",
        "MAILBREEZE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config_dir = tmp_path / "config"
    monkeypatch.setenv("MAILBREEZE_CONFIG_DIR", str(config_dir))
    monkeypatch.setattr(settings_module, "_config", None)
    return config_dir


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configuration bound to a previous test's streams."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class SleepRecorder:
    """Stands in for asyncio.sleep and records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class RequestLog:
    """Wraps a handler and keeps every request it saw."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if hasattr(response, "__await__"):
            response = await response
        return response

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def envelope(data: Any = None, status_code: int = 200, **kwargs: Any) -> httpx.Response:
    """Successful API envelope."""
    return httpx.Response(status_code, json={"success": True, "data": data}, **kwargs)


def error_envelope(
    status_code: int,
    code: str = "ERR",
    message: str = "failed",
    **kwargs: Any,
) -> httpx.Response:
    """Failed API envelope."""
    return httpx.Response(
        status_code,
        json={"success": False, "error": {"code": code, "message": message}},
        **kwargs,
    )


def responses(*items: httpx.Response) -> Handler:
    """Handler returning the given responses in order, repeating the last."""
    queue = list(items)

    def handler(request: httpx.Request) -> httpx.Response:
        return queue.pop(0) if len(queue) > 1 else queue[0]

    return handler


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_engine(sleep):
    """Factory for engines talking to a mock transport."""

    def factory(
        handler: Handler,
        *,
        api_key: str = "sk_test_123",
        base_url: str = "https://api.test",
        timeout: float = 30.0,
        max_retries: int = 3,
        auth_style: AuthStyle = AuthStyle.HEADER,
    ) -> tuple[RequestEngine, RequestLog]:
        log = RequestLog(handler)
        engine = RequestEngine(
            EngineConfig(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
                auth_style=auth_style,
            ),
            client=httpx.AsyncClient(transport=httpx.MockTransport(log)),
            sleep=sleep,
        )
        return engine, log

    return factory


@pytest.fixture
def api(monkeypatch):
    """Route CLI API calls to a handler; returns a factory giving the request log."""
    from mailbreeze.client import MailBreeze

    # The cli package re-exports the Typer app under the module's name
    app_module = importlib.import_module("mailbreeze.cli.app")

    def install(handler: Handler) -> RequestLog:
        log = RequestLog(handler)

        def factory() -> MailBreeze:
            return MailBreeze(
                "sk_cli",
                http_client=httpx.AsyncClient(transport=httpx.MockTransport(log)),
                sleep=SleepRecorder(),
            )

        monkeypatch.setattr(app_module, "MailBreeze", factory)
        return log

    return install
