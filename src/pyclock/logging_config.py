from __future__ import annotations

import logging
import os

import structlog

_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    name = (level if level is not None else os.getenv("PYCLOCK_LOG_LEVEL", "INFO")).strip().upper()
    name = _LEVEL_ALIASES.get(name, name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def configure_structlog(level: int | str | None = None, json_logs: bool | None = None) -> None:
    """Set up structlog for pyclock and the code around it.

    Arguments win over the ``PYCLOCK_LOG_LEVEL`` / ``PYCLOCK_LOG_JSON``
    environment variables, which win over INFO and console output.
    """
    if json_logs is None:
        json_logs = os.getenv("PYCLOCK_LOG_JSON", "0").strip().lower() in {"1", "true", "yes"}
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
