"""API resources for mailbreeze."""

from mailbreeze.resources.attachments import Attachments
from mailbreeze.resources.automations import AutomationEnrollments, Automations
from mailbreeze.resources.base import BaseResource
from mailbreeze.resources.contacts import Contacts
from mailbreeze.resources.emails import Emails
from mailbreeze.resources.lists import Lists
from mailbreeze.resources.verification import Verification

__all__ = [
    "BaseResource",
    "Emails",
    "Attachments",
    "Lists",
    "Contacts",
    "Verification",
    "Automations",
    "AutomationEnrollments",
]
