"""Structured logging setup.

All modules log through ``get_logger(__name__)`` and pass context as
keyword arguments, e.g. ``logger.info("Gap detection complete", total_gaps=3)``.
"""

import logging
from typing import Any

import structlog

_CONFIGURED: bool = False


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Standard logging level name (DEBUG, INFO, WARNING, ...).
        log_format: ``json`` for machine-readable output, ``console`` for
            human-readable development output.
    """
    global _CONFIGURED

    renderer: Any
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def is_configured() -> bool:
    """Return True once configure_logging() has been called."""
    return _CONFIGURED


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the given module name.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
