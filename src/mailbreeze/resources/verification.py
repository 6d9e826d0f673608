"""Email verification services."""

from __future__ import annotations

from mailbreeze.models import (
    BatchVerifyResult,
    PaginatedList,
    VerificationBatchStatus,
    VerificationStats,
    VerificationStatus,
    VerifyEmailResult,
)
from mailbreeze.resources.base import BaseResource


class Verification(BaseResource):
    """Verify addresses before sending to reduce bounces."""

    async def verify(self, email: str) -> VerifyEmailResult:
        """Verify a single email address.

        The result is returned immediately; the API caches it for 24 hours.
        """
        data = await self._post("/email-verification/single", {"email": email})
        return self._convert(data, VerifyEmailResult)

    async def batch(self, emails: list[str]) -> BatchVerifyResult:
        """Start batch verification.

        Large batches are processed asynchronously; poll ``get()`` with the
        returned ``verification_id``. If every address was cached the
        results are included right away.
        """
        data = await self._post("/email-verification/batch", {"emails": emails})
        return self._convert(data, BatchVerifyResult)

    async def get(self, verification_id: str) -> VerificationStatus:
        """Get batch status, with results once complete."""
        data = await self._get(
            f"/email-verification/{verification_id}",
            {"includeResults": True},
        )
        return self._convert(data, VerificationStatus)

    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        status: VerificationBatchStatus | None = None,
    ) -> PaginatedList[VerificationStatus]:
        response = await self._get(
            "/email-verification", self._list_query(page, limit, status=status)
        )
        return self._paginated(response, VerificationStatus)

    async def stats(self) -> VerificationStats:
        data = await self._get("/email-verification/stats")
        return self._convert(data, VerificationStats)
