"""Structured logging infrastructure.

Usage:
    from tabular_schema.core.logging import get_logger, configure_logging

    # Configure at startup
    configure_logging(log_level="INFO", log_format="console")

    # Get logger in any module
    logger = get_logger(__name__)

    # Log with structured context
    logger.info("schema_loaded", path="schema.json")

    # Use context managers for automatic context propagation
    with log_context(source="schema.json"):
        logger.debug("tabular_schema_compiled", columns=3, problems=0)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

_log_context: ContextVar[dict[str, Any] | None] = ContextVar("log_context", default=None)


def _add_log_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor to add scoped context to log events."""
    context = _log_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def configure_logging(log_level: str = "WARNING", log_format: str = "console") -> None:
    """Configure structured logging for the CLI and library use.

    Events go to stderr so stdout stays clean for command output. JSON events
    carry a UTC timestamp; console events are colored only on a terminal.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format ("console" or "json")
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_log_context,
        structlog.processors.add_log_level,
    ]

    if log_format == "json":
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Also configure stdlib logging for libraries
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return cast(FilteringBoundLogger, structlog.get_logger(name))


@contextmanager
def log_context(**context: Any) -> Iterator[None]:
    """Add key-value pairs to every log event emitted inside the block.

    Usage:
        with log_context(source="schema.json"):
            logger.info("processing")  # Will include source
    """
    token = _log_context.set({**(_log_context.get() or {}), **context})
    try:
        yield
    finally:
        _log_context.reset(token)


# Initialize with default configuration
configure_logging()
