"""Structured logging for the Witcher Tracker interpreter.

structlog builds the event dictionaries and hands them to the standard
library ``logging`` module, whose handlers render them with a shared
:class:`structlog.stdlib.ProcessorFormatter`. One handler always writes
to standard error; a second one appends to ``log_file`` when configured.
Standard output belongs to the interpreter responses and is never used.

Example:
    >>> from witcher_tracker.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Potion brewed", potion="Swallow", stock=2)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


HANDLER_PREFIX = "witcher_tracker."


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = "witcher_tracker"
    return event_dict


def _remove_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()


def _build_formatter(
    shared_processors: list[Processor],
    json_format: bool,
) -> structlog.stdlib.ProcessorFormatter:
    renderer: Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
        processors: list[Processor] = [structlog.processors.format_exc_info]
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )
        processors = []
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *processors,
            renderer,
        ],
    )


def configure_logging(
    *,
    level: str = "WARNING",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    Calling it again replaces the handlers installed by the previous
    call, so the stderr handler always writes to the current
    ``sys.stderr``.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, render log events as JSON lines.
        log_file: Optional path of a file that receives the same events.

    Example:
        >>> configure_logging(level="DEBUG", log_file="tracker.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = _build_formatter(shared_processors, json_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].set_name(HANDLER_PREFIX + "stderr")
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        handlers.append(file_handler)

    root = logging.getLogger()
    _remove_handlers(root)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in every later event.

    Example:
        >>> bind_context(line_number=3)
        >>> logger.debug("Sentence classified")  # includes line_number
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
