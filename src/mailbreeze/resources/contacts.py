"""Contact management within a list."""

from __future__ import annotations

from mailbreeze.core.engine import RequestEngine
from mailbreeze.models import (
    Contact,
    ContactStatus,
    CreateContactParams,
    PaginatedList,
    SuppressReason,
    UpdateContactParams,
)
from mailbreeze.resources.base import BaseResource


class Contacts(BaseResource):
    """Contacts of one list.

    Obtain an instance with ``client.contacts(list_id)``.
    """

    def __init__(
        self,
        engine: RequestEngine,
        list_id: str,
        domain_id: str | None = None,
    ):
        super().__init__(engine, domain_id)
        self.list_id = list_id

    def _build_path(self, path: str) -> str:
        return f"/contact-lists/{self.list_id}/contacts{path}"

    async def create(self, params: CreateContactParams) -> Contact:
        data = await self._post("", params)
        return self._convert(data, Contact)

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        status: ContactStatus | None = None,
    ) -> PaginatedList[Contact]:
        response = await self._get("", self._list_query(page, limit, status=status))
        return self._paginated(response, Contact, key="contacts")

    async def get(self, contact_id: str) -> Contact:
        data = await self._get(f"/{contact_id}")
        return self._convert(data, Contact)

    async def update(self, contact_id: str, params: UpdateContactParams) -> Contact:
        data = await self._put(f"/{contact_id}", params)
        return self._convert(data, Contact)

    async def delete(self, contact_id: str) -> None:
        await self._delete(f"/{contact_id}")

    async def suppress(self, contact_id: str, reason: SuppressReason) -> None:
        """Suppress a contact so it receives no further email.

        Suppression differs from unsubscribing: it is used for bounces,
        complaints and manual removal.
        """
        await self._post(f"/{contact_id}/suppress", {"reason": reason})
