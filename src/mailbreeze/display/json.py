"""JSON output utilities for mailbreeze."""

from __future__ import annotations

import json
import sys
from datetime import datetime

import msgspec

from mailbreeze.errors.messages import get_remediation
from mailbreeze.errors.types import MailBreezeError

__all__ = [
    "output_json",
    "output_json_pretty",
    "output_json_error",
    "error_document",
]


def output_json(data: object) -> None:
    """Output data as compact JSON to stdout.

    Args:
        data: Any msgspec-serializable object (Struct, dict, list, etc.)
    """
    sys.stdout.buffer.write(msgspec.json.encode(data))
    sys.stdout.buffer.write(b"\n")


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout."""
    # Round-trip through builtins so Structs keep their wire names
    python_obj = msgspec.to_builtins(data)
    sys.stdout.write(json.dumps(python_obj, indent=indent))
    sys.stdout.write("\n")


def error_document(error: MailBreezeError) -> dict:
    """Build the JSON error document for a terminal error."""
    document = error.to_dict()
    if remediation := get_remediation(error):
        document["remediation"] = remediation
    document["timestamp"] = datetime.now().astimezone().isoformat()
    return {"error": document}


def output_json_error(error: MailBreezeError, indent: int = 2) -> None:
    """Output an error in standardized JSON format."""
    output_json_pretty(error_document(error), indent=indent)
