"""Email sending and management."""

from __future__ import annotations

from mailbreeze.core.types import RequestOptions
from mailbreeze.models import (
    Email,
    EmailStats,
    EmailStatus,
    PaginatedList,
    SendEmailParams,
    SendEmailResult,
)
from mailbreeze.resources.base import BaseResource


def _as_list(value: str | list[str] | None) -> list[str] | None:
    if value is None:
        return None
    return value if isinstance(value, list) else [value]


class Emails(BaseResource):
    """Send emails and inspect sent messages.

    Usage:
        result = await client.emails.send(
            SendEmailParams(
                from_="hello@yourdomain.com",
                to="user@example.com",
                subject="Hello",
                html="<p>Hello World!</p>",
            )
        )
    """

    async def send(
        self,
        params: SendEmailParams,
        *,
        idempotency_key: str | None = None,
    ) -> SendEmailResult:
        """Send an email.

        Args:
            params: Email parameters; ``to``, ``cc`` and ``bcc`` may be a
                single address or a list
            idempotency_key: Key the API uses to deduplicate retried sends

        Returns:
            Send result with email ID and status
        """
        body = params.to_dict()
        body["to"] = _as_list(params.to)
        for field in ("cc", "bcc"):
            if body.get(field):
                body[field] = _as_list(body[field])

        options = (
            RequestOptions(idempotency_key=idempotency_key) if idempotency_key else None
        )
        data = await self._post("/emails", body, options=options)
        return self._convert(data, SendEmailResult)

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        status: EmailStatus | None = None,
        to: str | None = None,
        from_: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> PaginatedList[Email]:
        """List sent emails with optional filtering."""
        query = self._list_query(
            page,
            limit,
            status=status,
            to=to,
            startDate=start_date,
            endDate=end_date,
            **{"from": from_},
        )
        response = await self._get("/emails", query)
        return self._paginated(response, Email, key="emails")

    async def get(self, email_id: str) -> Email:
        """Get a single email by ID."""
        data = await self._get(f"/emails/{email_id}")
        return self._convert(data, Email)

    async def stats(self) -> EmailStats:
        """Get email statistics for the domain."""
        response = await self._get("/emails/stats")
        stats = response.get("stats") if isinstance(response, dict) else None
        return self._convert(stats or {}, EmailStats)
