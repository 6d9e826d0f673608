"""Structured logging for mailbreeze.

Uses structlog with a level filter; output goes to stderr so it never mixes
with command output on stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog

DEFAULT_LEVEL = "warning"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def configure_logging(level: str = DEFAULT_LEVEL, json: bool = False) -> None:
    """Configure structlog processors and the minimum level.

    Args:
        level: One of debug, info, warning, error, critical
        json: Render JSON lines instead of console output
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _LEVELS.get(level.lower(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a logger, applying the default configuration on first use."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
