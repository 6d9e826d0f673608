"""CLI framework for mailbreeze."""
from __future__ import annotations

from mailbreeze.cli.app import ExitCode
from mailbreeze.cli.app import app
from mailbreeze.cli.app import run_app

__all__ = ["app", "run_app", "ExitCode"]
