"""Automation enrollment management."""

from __future__ import annotations

from typing import Any

from mailbreeze.core.engine import RequestEngine
from mailbreeze.models import (
    CancelEnrollmentResult,
    Enrollment,
    EnrollmentStatus,
    EnrollResult,
    PaginatedList,
)
from mailbreeze.resources.base import BaseResource


class AutomationEnrollments(BaseResource):
    async def list(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        automation_id: str | None = None,
        status: EnrollmentStatus | None = None,
    ) -> PaginatedList[Enrollment]:
        query = self._list_query(
            page, limit, automationId=automation_id, status=status
        )
        response = await self._get("/automation-enrollments", query)
        return self._paginated(response, Enrollment)

    async def cancel(self, enrollment_id: str) -> CancelEnrollmentResult:
        """Cancel an enrollment; the contact stops receiving its emails."""
        data = await self._post(f"/automation-enrollments/{enrollment_id}/cancel", {})
        return self._convert(data, CancelEnrollmentResult)


class Automations(BaseResource):
    """Enroll contacts in automations and manage their enrollments."""

    def __init__(self, engine: RequestEngine, domain_id: str | None = None):
        super().__init__(engine, domain_id)
        self.enrollments = AutomationEnrollments(engine, domain_id)

    async def enroll(
        self,
        automation_id: str,
        contact_id: str,
        variables: dict[str, Any] | None = None,
    ) -> EnrollResult:
        """Enroll a contact in an automation."""
        body: dict[str, Any] = {"contactId": contact_id}
        if variables is not None:
            body["variables"] = variables
        data = await self._post(f"/automations/{automation_id}/enroll", body)
        return self._convert(data, EnrollResult)
