"""
Structured logging configuration using structlog.

Console output in development, JSON lines in production. Exception objects
passed as log fields are rendered as "Kind: message" summaries so captured
failures can be logged without a traceback.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

from core.failures import FailureHandle

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor, WrappedLogger

    from core.config import LoggingSettings


def render_failures(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Replace exception-valued fields (other than exc_info) with a summary string."""
    for key, value in event_dict.items():
        if key != "exc_info" and isinstance(value, BaseException):
            event_dict[key] = str(FailureHandle.capture(value))
    return event_dict


def configure_logging(
    *,
    json_format: bool = False,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_format: Use JSON format (for production) instead of console format.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        render_failures,
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    level = logging.getLevelName(log_level.upper())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Django and other stdlib loggers share the same stream and level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """
    Configure logging from the ``LOG_*`` settings section.

    Args:
        settings: Logging settings loaded from the environment.
    """
    configure_logging(json_format=settings.json_format, log_level=settings.level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_context(**kwargs: object) -> None:
    """
    Bind context variables to the current context.

    Bound variables are included in every subsequent log line emitted from
    the same context (thread or task).

    Args:
        **kwargs: Key-value pairs to bind to the context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()
