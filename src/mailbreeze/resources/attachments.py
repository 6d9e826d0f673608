"""Email attachment handling.

Attachments are uploaded in steps:

1. ``create_upload()`` returns a presigned URL
2. The file is PUT directly to that URL
3. ``confirm()`` marks the upload complete
4. The attachment ID is passed to ``emails.send()``
"""

from __future__ import annotations

from mailbreeze.models import (
    Attachment,
    CreateAttachmentUploadParams,
    CreateAttachmentUploadResult,
)
from mailbreeze.resources.base import BaseResource


class Attachments(BaseResource):
    async def create_upload(
        self, params: CreateAttachmentUploadParams
    ) -> CreateAttachmentUploadResult:
        """Create a presigned URL for uploading an attachment."""
        body = {
            "filename": params.file_name,
            "contentType": params.content_type,
            "size": params.file_size,
        }
        if params.inline is not None:
            body["inline"] = params.inline
        data = await self._post("/attachments/presigned-url", body)
        return self._convert(data, CreateAttachmentUploadResult)

    async def confirm(self, upload_token: str) -> Attachment:
        """Confirm that an attachment has been uploaded.

        The attachment can only be used after confirmation.
        """
        data = await self._post(f"/attachments/{upload_token}/confirm", {})
        return self._convert(data, Attachment)
