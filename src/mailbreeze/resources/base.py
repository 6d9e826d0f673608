"""Base class for API resources."""

from __future__ import annotations

from typing import Any, TypeVar

import msgspec

from mailbreeze.core.engine import RequestEngine
from mailbreeze.core.types import RequestOptions
from mailbreeze.errors.types import INVALID_RESPONSE, ErrorKind, MailBreezeError
from mailbreeze.models import Model, PaginatedList, Pagination

T = TypeVar("T")


class BaseResource:
    """Maps resource methods onto engine requests.

    Resources know paths and payload shapes only; retries, timeouts and
    headers belong to the engine.
    """

    def __init__(self, engine: RequestEngine, domain_id: str | None = None):
        self._engine = engine
        self._domain_id = domain_id

    def _build_path(self, path: str) -> str:
        """Build the full path for a resource-relative path."""
        return path

    def _with_domain(self, query: dict[str, Any] | None) -> dict[str, Any] | None:
        if not self._domain_id:
            return query
        return {**(query or {}), "domainId": self._domain_id}

    async def _request(
        self,
        method: str,
        path: str,
        body: Model | dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        if isinstance(body, Model):
            body = body.to_dict()
        return await self._engine.execute(
            method,
            self._build_path(path),
            body,
            self._with_domain(query),
            options,
        )

    async def _get(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._request("GET", path, None, query, options)

    async def _post(
        self,
        path: str,
        body: Model | dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._request("POST", path, body, query, options)

    async def _put(
        self,
        path: str,
        body: Model | dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._request("PUT", path, body, query, options)

    async def _patch(
        self,
        path: str,
        body: Model | dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._request("PATCH", path, body, query, options)

    async def _delete(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        return await self._request("DELETE", path, None, query, options)

    @staticmethod
    def _convert(data: Any, type: type[T]) -> T:
        """Convert a response payload into a typed record.

        Raises:
            MailBreezeError: If the payload does not match the record type
        """
        try:
            return msgspec.convert(data, type=type)
        except msgspec.ValidationError as e:
            raise MailBreezeError(
                message=f"Unexpected response format: {e}",
                code=INVALID_RESPONSE,
                kind=ErrorKind.GENERIC,
            ) from e

    @staticmethod
    def _list_query(
        page: int | None = None,
        limit: int | None = None,
        **filters: Any,
    ) -> dict[str, Any] | None:
        """Build list query parameters, dropping unset values."""
        query = {"page": page, "limit": limit, **filters}
        query = {key: value for key, value in query.items() if value is not None}
        return query or None

    @classmethod
    def _paginated(
        cls,
        response: Any,
        item_type: type[T],
        key: str = "data",
    ) -> PaginatedList[T]:
        """Extract a page from a list response.

        Accepts either a bare array, which becomes a single complete page,
        or an object holding the items under ``key`` plus ``pagination``.
        """
        if isinstance(response, list):
            items = cls._convert(response, list[item_type])
            return PaginatedList(data=items, pagination=_single_page(len(items)))

        if not isinstance(response, dict):
            raise MailBreezeError(
                message="Unexpected response format: expected a list response",
                code=INVALID_RESPONSE,
                kind=ErrorKind.GENERIC,
            )

        items = cls._convert(response.get(key) or [], list[item_type])
        pagination = response.get("pagination")
        return PaginatedList(
            data=items,
            pagination=(
                cls._convert(pagination, Pagination)
                if pagination is not None
                else _single_page(len(items))
            ),
        )


def _single_page(count: int) -> Pagination:
    return Pagination(
        page=1,
        limit=count,
        total=count,
        total_pages=1,
        has_next=False,
        has_prev=False,
    )
