"""
Structured logging configuration for pdf2img using structlog.

Diagnostics are written to stderr so that stdout stays reserved for the
conversion summary and the ``--json`` document.
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(log_level: str = "WARNING", log_format: str = "text"):
    """
    Configure structured logging for pdf2img.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Format ("json" or "text")
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # Route third-party stdlib logging to the same stream and level.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    logging.captureWarnings(True)


def get_logger(name: Optional[str] = None):
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)
