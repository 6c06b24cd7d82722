"""Clock abstraction for testable time-dependent logic.

Where code would call ``time.time_ns()`` or ``datetime.now()``, take a
``Clock`` and call ``clock.now()`` instead. Wire in ``default()`` in
production and ``new_fake()`` in tests.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC

from pyclock.domain.types import Instant


class Clock:
    """A source of the current time."""

    __slots__ = ()

    def now(self) -> Instant:
        """Return this clock's view of the current time.

        The result is an immutable value, so nothing done with it can move
        the clock.
        """
        raise NotImplementedError

    def now_ns(self) -> int:
        return self.now().ns


@dataclass(frozen=True, slots=True)
class SystemClock(Clock):
    def now(self) -> Instant:
        return Instant(time.time_ns(), UTC)


_SYSTEM_CLOCK = SystemClock()


def default() -> Clock:
    """Return the shared clock backed by the host's wall clock."""
    return _SYSTEM_CLOCK
