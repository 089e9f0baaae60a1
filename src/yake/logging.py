"""Structured logging configuration for Yake.

This module provides structlog-based logging with:
- JSON output for machines (when env var YAKE_LOG_FORMAT=json)
- Pretty console output for humans (default)
- Automatic context binding (target_name, command)

Log records always go to stderr so they never interleave with the
command output yake relays on stdout.

Usage:
    from yake.logging import get_logger, configure_logging

    # Configure logging once at application startup
    configure_logging()

    log = get_logger(__name__)
    log = log.bind(target_name="group.sub")
    log.info("target_started", dependencies=1)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
    "bind_context",
    "clear_context",
]

# Environment variable for log format
LOG_FORMAT_ENV_VAR = "YAKE_LOG_FORMAT"

# Environment variable for log level
LOG_LEVEL_ENV_VAR = "YAKE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level() -> int:
    """Get the log level from environment or default.

    Returns:
        Logging level constant (e.g., logging.WARNING).
    """
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def _is_json_output() -> bool:
    """Check if JSON output is enabled."""
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _get_shared_processors() -> list[Processor]:
    """Get processors shared between stdlib and structlog."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_structlog_processors() -> list[Processor]:
    """Get the structlog chain that hands events over to stdlib logging."""
    return [
        *_get_shared_processors(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer_chain(use_json: bool) -> list[Processor]:
    """Get the final rendering processors for the stderr handler.

    Returns:
        JSON rendering with dict tracebacks, or the pretty console renderer.
    """
    if use_json:
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Configure structlog for the application.

    This should be called once at application startup. Subsequent calls
    will reconfigure logging.

    Args:
        force_json: Force JSON output regardless of environment variable.
        level: Override log level. If None, reads from YAKE_LOG_LEVEL env var.

    Example:
        # Default configuration (reads from environment)
        configure_logging()

        # Set specific log level
        configure_logging(level=logging.DEBUG)
    """
    use_json = force_json or _is_json_output()
    log_level = level if level is not None else _get_log_level()

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_get_renderer_chain(use_json),
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )

    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A bound structlog logger.

    Example:
        log = get_logger(__name__)
        log.info("document_loaded", targets=4)
    """
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log


def bind_context(**context: Any) -> None:
    """Bind context variables that will be included in all log messages.

    Args:
        **context: Key-value pairs to bind to log context.

    Example:
        bind_context(target_name="test")
        log.info("event")  # Includes target_name
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Clear all bound context variables.

    Call this at the end of a run to prevent context leakage.
    """
    structlog.contextvars.clear_contextvars()
