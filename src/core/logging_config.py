"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Events are forwarded to stdlib logging so callers choose the handlers.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def enable_console_logging(level: int = logging.INFO) -> None:
    """Print structured events to stderr.

    Args:
        level: Minimum stdlib level to emit.
    """
    logging.basicConfig(level=level, format="%(message)s")
