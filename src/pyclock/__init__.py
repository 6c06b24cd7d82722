"""Swappable clocks: real wall-clock time in production, controllable time in tests."""

from pyclock.domain import Duration, Instant
from pyclock.infra import Clock, FakeClock, SystemClock, default, new_fake
from pyclock.logging_config import configure_structlog

__all__ = [
    "Clock",
    "Duration",
    "FakeClock",
    "Instant",
    "SystemClock",
    "configure_structlog",
    "default",
    "new_fake",
]
