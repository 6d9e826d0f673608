"""MailBreeze API client."""

from __future__ import annotations

import httpx

from mailbreeze.config import MissingApiKeyError, get_api_key, get_config
from mailbreeze.core.engine import RequestEngine, Sleep
from mailbreeze.core.types import AuthStyle, EngineConfig
from mailbreeze.resources import (
    Attachments,
    Automations,
    Contacts,
    Emails,
    Lists,
    Verification,
)


class MailBreeze:
    """Async client for the MailBreeze API.

    Arguments left as ``None`` fall back to the loaded configuration
    (config file and ``MAILBREEZE_*`` environment variables).

    Usage:
        async with MailBreeze("sk_live_xxx") as client:
            await client.emails.send(params)
            contacts = await client.contacts("list_123").list()
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        auth_style: AuthStyle | str | None = None,
        domain_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        api = get_config().api

        api_key = api_key or get_api_key()
        if not api_key:
            raise MissingApiKeyError()

        self._engine = RequestEngine(
            EngineConfig(
                api_key=api_key,
                base_url=base_url or api.base_url,
                timeout=timeout if timeout is not None else api.timeout,
                max_retries=max_retries if max_retries is not None else api.max_retries,
                auth_style=AuthStyle(auth_style or api.auth_style),
            ),
            client=http_client,
            sleep=sleep,
        )
        self._domain_id = domain_id or api.domain_id

        self.emails = Emails(self._engine, self._domain_id)
        self.attachments = Attachments(self._engine, self._domain_id)
        self.lists = Lists(self._engine, self._domain_id)
        self.verification = Verification(self._engine, self._domain_id)
        self.automations = Automations(self._engine, self._domain_id)

    @property
    def config(self) -> EngineConfig:
        return self._engine.config

    def contacts(self, list_id: str) -> Contacts:
        """Get the contacts resource for a specific list."""
        return Contacts(self._engine, list_id, self._domain_id)

    async def aclose(self) -> None:
        await self._engine.aclose()

    async def __aenter__(self) -> MailBreeze:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"MailBreeze(base_url={self.config.base_url!r})"
