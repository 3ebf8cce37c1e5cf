"""Structured logging setup.

structlog renders to the console in development and to JSON lines
elsewhere. Standard library loggers (psycopg, alembic) share the level.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def configure_logging(settings: Any | None = None) -> None:
    """Configure structlog and the standard logging root.

    Args:
        settings: Settings instance. Loaded from environment when omitted.
    """
    if settings is None:
        from rolegraph.config import get_settings

        settings = get_settings()

    level = getattr(logging, settings.log_level)
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development or settings.log_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    else:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=not settings.is_development,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name. Defaults to 'rolegraph'.
    """
    return structlog.get_logger(name or "rolegraph")
