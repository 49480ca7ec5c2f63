"""Logging configuration.

structlog on top of stdlib logging. Library code only calls get_logger();
applications (the CLI) call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    *,
    json_format: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Render JSON lines instead of human-readable output
        stream: Destination stream (default: sys.stderr)

    Raises:
        ValueError: If level is not a logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"unknown log level: {level!r}")

    logging.basicConfig(
        level=log_level,
        stream=stream if stream is not None else sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger (typically get_logger(__name__))."""
    return structlog.get_logger(name)
