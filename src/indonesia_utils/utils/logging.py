"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from ..config import get_settings


def setup_logging(log_level: str | None = None):
    """Configure structlog with JSON output to stdout.

    Library code only obtains loggers; applications embedding the
    library call this once at startup. Without *log_level* the
    ``INDONESIA_UTILS_LOG_LEVEL`` setting is used.
    """
    if log_level is None:
        log_level = get_settings().log_level

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
