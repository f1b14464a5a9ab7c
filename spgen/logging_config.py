"""
Structured logging setup for spgen.

Engine modules call get_logger(__name__) at import time; the CLI calls
setup_logging() once before doing any work.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import structlog


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level name. Falls back to $LOG_LEVEL, then WARNING so the
            CLI output stays clean unless asked otherwise.
    """
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    use_json = os.getenv("STRUCTURED_LOGGING", "false").lower() == "true"
    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.WARNING),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    # qiskit is chatty at INFO while transpiling.
    logging.getLogger("qiskit").setLevel(logging.WARNING)


def _configure_library_default() -> None:
    # Until setup_logging() runs, route events through stdlib logging so
    # library callers get nothing on stdout and only WARNING+ on stderr.
    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to `name` (usually the module name)."""
    _configure_library_default()
    return structlog.get_logger(name)
