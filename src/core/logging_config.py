"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Events go to stderr so command output on stdout stays parseable.
"""

from __future__ import annotations

import sys
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
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Build a print logger bound to the current stderr stream.

    The stream is resolved per call because test runners and the CLI may
    swap ``sys.stderr`` after the first logger is requested.
    """
    return structlog.PrintLogger(file=sys.stderr)
