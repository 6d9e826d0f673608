"""Data models for mailbreeze.

Request parameters and response records for every API resource. Field
names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

import msgspec

T = TypeVar("T")

EmailStatus = Literal["queued", "sent", "delivered", "bounced", "failed"]
ContactStatus = Literal["active", "unsubscribed", "bounced", "complained", "suppressed"]
SuppressReason = Literal["manual", "unsubscribed", "bounced", "complained", "spam_trap"]
VerificationBatchStatus = Literal["pending", "processing", "completed", "failed"]
EnrollmentStatus = Literal["active", "paused", "completed", "cancelled"]
FieldType = Literal["text", "number", "date", "boolean", "select"]


class Model(msgspec.Struct, kw_only=True, rename="camel", omit_defaults=True):
    """Base for all API structures."""

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, without unset optional fields."""
        return msgspec.to_builtins(self)


# Common


class Pagination(Model):
    """Pagination information returned with list endpoints."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class PaginatedList(Model, Generic[T]):
    """One page of records."""

    data: list[T]
    pagination: Pagination


# Emails


class SendEmailParams(Model):
    """Parameters for sending an email."""

    from_: str = msgspec.field(name="from")
    to: str | list[str]
    subject: str | None = None
    html: str | None = None
    text: str | None = None
    template_id: str | None = None
    variables: dict[str, Any] | None = None
    attachment_ids: list[str] | None = None
    cc: str | list[str] | None = None
    bcc: str | list[str] | None = None
    reply_to: str | None = None
    headers: dict[str, str] | None = None


class SendEmailResult(Model):
    """Result of sending an email."""

    id: str
    status: str
    message_id: str | None = None
    created_at: str | None = None


class Email(Model):
    """Email record returned from list/get."""

    id: str
    from_: str = msgspec.field(name="from")
    to: list[str]
    subject: str
    status: str
    created_at: str
    cc: list[str] | None = None
    bcc: list[str] | None = None
    message_id: str | None = None
    template_id: str | None = None
    sent_at: str | None = None
    delivered_at: str | None = None
    opened_at: str | None = None
    clicked_at: str | None = None


class EmailStats(Model):
    """Email statistics for the domain."""

    sent: int = 0
    delivered: int = 0
    bounced: int = 0
    opened: int = 0
    clicked: int = 0
    complained: int = 0
    delivery_rate: float = 0.0
    open_rate: float = 0.0
    click_rate: float = 0.0
    bounce_rate: float = 0.0


# Attachments


class CreateAttachmentUploadParams(Model):
    """Metadata for a new attachment upload."""

    file_name: str
    content_type: str
    file_size: int
    inline: bool | None = None


class CreateAttachmentUploadResult(Model):
    """Presigned upload target for an attachment."""

    attachment_id: str
    upload_url: str
    upload_token: str
    expires_at: str


class Attachment(Model):
    """Attachment record."""

    id: str
    file_name: str
    content_type: str
    file_size: int
    status: str
    created_at: str
    expires_at: str | None = None


# Contact lists


class CustomFieldDefinition(Model):
    """Custom field definition for a contact list."""

    key: str
    label: str
    type: FieldType
    required: bool | None = None
    default_value: Any = None
    options: list[str] | None = None


class CreateListParams(Model):
    name: str
    description: str | None = None
    custom_fields: list[CustomFieldDefinition] | None = None


class UpdateListParams(Model):
    name: str | None = None
    description: str | None = None
    custom_fields: list[CustomFieldDefinition] | None = None


class ContactList(Model):
    """Contact list record."""

    id: str
    name: str
    created_at: str
    updated_at: str
    description: str | None = None
    custom_fields: list[CustomFieldDefinition] = []
    contact_count: int = 0


class ListStats(Model):
    total_contacts: int = 0
    active_contacts: int = 0
    unsubscribed_contacts: int = 0
    bounced_contacts: int = 0
    complained_contacts: int = 0
    suppressed_contacts: int = 0


# Contacts


class CreateContactParams(Model):
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    custom_fields: dict[str, Any] | None = None
    source: str | None = None


class UpdateContactParams(Model):
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    custom_fields: dict[str, Any] | None = None


class Contact(Model):
    """Contact record."""

    id: str
    email: str
    status: str
    created_at: str
    updated_at: str
    source: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    custom_fields: dict[str, Any] | None = None
    subscribed_at: str | None = None
    unsubscribed_at: str | None = None


# Verification


class VerificationDetails(Model):
    is_free_provider: bool | None = None
    is_disposable: bool | None = None
    is_role_account: bool | None = None
    has_mx_records: bool | None = None
    is_spam_trap: bool | None = None


class VerifyEmailResult(Model):
    """Result of verifying a single address."""

    email: str
    is_valid: bool
    result: str
    reason: str | None = None
    cached: bool = False
    risk_score: float | None = None
    details: VerificationDetails | None = None


class BatchVerifyResult(Model):
    """Result of starting a batch verification.

    ``results`` is only populated when every address was already cached.
    """

    verification_id: str
    total_emails: int
    status: str
    credits_deducted: int = 0
    results: list[VerifyEmailResult] | None = None


class VerificationAnalytics(Model):
    valid: int = 0
    invalid: int = 0
    risky: int = 0
    unknown: int = 0


class VerificationStatus(Model):
    """Status of a verification batch."""

    id: str
    status: str
    total_emails: int
    processed_emails: int = 0
    credits_deducted: int = 0
    created_at: str | None = None
    completed_at: str | None = None
    results: list[VerifyEmailResult] | None = None
    analytics: VerificationAnalytics | None = None


class VerificationStats(Model):
    total_verified: int = 0
    valid: int = 0
    invalid: int = 0
    risky: int = 0
    unknown: int = 0
    cached: int = 0
    credits_used: int = 0


# Automations


class EnrollResult(Model):
    enrollment_id: str
    status: str
    enrolled_at: str | None = None


class Enrollment(Model):
    """Automation enrollment record."""

    id: str
    automation_id: str
    contact_id: str
    status: str
    enrolled_at: str
    automation_name: str | None = None
    contact_email: str | None = None
    current_step: int = 0
    total_steps: int = 0
    variables: dict[str, Any] | None = None
    completed_at: str | None = None
    cancelled_at: str | None = None


class CancelEnrollmentResult(Model):
    cancelled: bool
    cancelled_at: str | None = None
