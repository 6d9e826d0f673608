"""Output utilities for mailbreeze."""
from __future__ import annotations

from mailbreeze.display.json import error_document
from mailbreeze.display.json import output_json
from mailbreeze.display.json import output_json_error
from mailbreeze.display.json import output_json_pretty

__all__ = [
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "error_document",
]
