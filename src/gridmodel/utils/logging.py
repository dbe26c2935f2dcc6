"""Structured logging configuration using structlog.

Provides context binding for tagging log events with the grid being
worked on, and configurable output formats (JSON for machine consumption,
colored console for interactive use).
"""

import logging
import sys
from typing import Any, TextIO, cast

import structlog
from structlog.types import Processor

from gridmodel.config import settings


def bind_grid_context(**values: Any) -> None:
    """Bind key/value pairs onto every subsequent log event in this context.

    Args:
        **values: Context values, e.g. ``grid="hero"`` or ``command="walk"``.
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_grid_context() -> None:
    """Clear all values bound with bind_grid_context."""
    structlog.contextvars.clear_contextvars()


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_default_logging() -> None:
    """Route structlog through stdlib logging without installing handlers.

    Applied at import. Events follow the stdlib root logger, which drops
    anything below WARNING until configure_logging() or the host
    application sets up logging.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
        stream: Where log lines are written. Defaults to stdout.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors = _shared_processors()

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


if not structlog.is_configured():
    configure_default_logging()
