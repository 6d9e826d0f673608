"""Contact list management."""

from __future__ import annotations

from mailbreeze.models import (
    ContactList,
    CreateListParams,
    ListStats,
    PaginatedList,
    UpdateListParams,
)
from mailbreeze.resources.base import BaseResource


class Lists(BaseResource):
    async def create(self, params: CreateListParams) -> ContactList:
        """Create a new contact list."""
        data = await self._post("/contact-lists", params)
        return self._convert(data, ContactList)

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
    ) -> PaginatedList[ContactList]:
        """List all contact lists."""
        response = await self._get("/contact-lists", self._list_query(page, limit))
        return self._paginated(response, ContactList)

    async def get(self, list_id: str) -> ContactList:
        data = await self._get(f"/contact-lists/{list_id}")
        return self._convert(data, ContactList)

    async def update(self, list_id: str, params: UpdateListParams) -> ContactList:
        data = await self._patch(f"/contact-lists/{list_id}", params)
        return self._convert(data, ContactList)

    async def delete(self, list_id: str) -> None:
        """Delete a contact list and every contact in it."""
        await self._delete(f"/contact-lists/{list_id}")

    async def stats(self, list_id: str) -> ListStats:
        data = await self._get(f"/contact-lists/{list_id}/stats")
        return self._convert(data, ListStats)
