"""mailbreeze: Python client for the MailBreeze email platform."""

from __future__ import annotations

__version__ = "0.1.0"

from mailbreeze.client import MailBreeze
from mailbreeze.core.types import AuthStyle
from mailbreeze.errors.types import ErrorKind
from mailbreeze.errors.types import MailBreezeError
from mailbreeze.models import CreateAttachmentUploadParams
from mailbreeze.models import CreateContactParams
from mailbreeze.models import CreateListParams
from mailbreeze.models import PaginatedList
from mailbreeze.models import SendEmailParams
from mailbreeze.models import UpdateContactParams
from mailbreeze.models import UpdateListParams

__all__ = [
    "__version__",
    "MailBreeze",
    "AuthStyle",
    "ErrorKind",
    "MailBreezeError",
    "PaginatedList",
    "SendEmailParams",
    "CreateAttachmentUploadParams",
    "CreateListParams",
    "UpdateListParams",
    "CreateContactParams",
    "UpdateContactParams",
]


def main() -> None:
    """Entry point for the mailbreeze CLI."""
    from mailbreeze.cli.app import run_app

    run_app()
