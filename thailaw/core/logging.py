"""Structured logging configuration using structlog.

- Development (THAILAW_DEBUG=true): pretty console output with colors
- Otherwise: JSON output, one event per line
"""

from __future__ import annotations

import logging
import sys

import structlog

from thailaw.core.config import get_settings

_configured = False


def configure_logging(force: bool = False) -> None:
    """Configure structured logging for the application.

    Safe to call repeatedly; only the first call (or a forced call)
    reconfigures structlog.
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()

    log_level = logging.DEBUG if settings.debug else logging.INFO

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # Shared processors for both dev and prod
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.debug or not settings.log_json:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=settings.debug),
        ]
    else:
        # JSONRenderer must be last
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        Configured structlog logger.
    """
    configure_logging()
    return structlog.get_logger(name)
