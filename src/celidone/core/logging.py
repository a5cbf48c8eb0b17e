"""Structured logging setup."""

import logging
import sys
from typing import Any, Optional

import structlog

from celidone.core.config import get_settings


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Log level name (defaults to settings.log_level)
        log_format: "console" for human readable output, "json" for JSON lines
            (defaults to settings.log_format)
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    log_format = log_format or settings.log_format
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_default_logging() -> None:
    """Route events through stdlib logging at WARNING and above.

    Used when the package is imported as a library and nothing has called
    configure_logging() yet, so debug events are not printed to stdout.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger bound to a module name."""
    return structlog.get_logger(name)


if not structlog.is_configured():
    configure_default_logging()
