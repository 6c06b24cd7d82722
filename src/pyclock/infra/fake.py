from __future__ import annotations

from datetime import datetime, timedelta

import structlog

from pyclock.domain.types import Duration, Instant, as_duration, as_instant
from pyclock.infra.clock import Clock
from pyclock.infra.rwlock import RWLock

logger = structlog.get_logger()

_FACTORY_TOKEN = object()


def _debug(event: str, **kw: object) -> None:
    # unconfigured structlog prints every level to stdout
    if structlog.is_configured():
        logger.debug(event, **kw)


class FakeClock(Clock):
    """A ``Clock`` whose time only moves when told to.

    Get one from ``new_fake()``; it starts at the Unix epoch in UTC and is
    safe to share between threads.
    """

    __slots__ = ()

    def advance(self, delta: Duration | timedelta | int) -> None:
        """Move the clock by ``delta``, which may be negative."""
        raise NotImplementedError

    def set_to(self, instant: Instant | datetime) -> None:
        """Make ``now()`` return exactly ``instant`` from here on."""
        raise NotImplementedError


class _Fake(FakeClock):
    # Only new_fake() builds these. Copies hand back the same object so the
    # lock and the stored instant always travel together.
    __slots__ = ("_lock", "_t")

    def __init__(self, token: object, start: Instant) -> None:
        if token is not _FACTORY_TOKEN:
            raise TypeError("use pyclock.new_fake() to create a FakeClock")
        self._lock = RWLock()
        self._t = start

    def now(self) -> Instant:
        with self._lock.read():
            return self._t

    def advance(self, delta: Duration | timedelta | int) -> None:
        d = as_duration(delta)
        with self._lock.write():
            self._t = self._t + d
            t = self._t
        _debug("fake_clock_advanced", delta_ns=d.ns, now_ns=t.ns)

    def set_to(self, instant: Instant | datetime) -> None:
        t = as_instant(instant)
        with self._lock.write():
            self._t = t
        _debug("fake_clock_set", now_ns=t.ns)

    def __copy__(self) -> _Fake:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _Fake:
        return self

    def __reduce__(self) -> tuple[object, ...]:
        raise TypeError("FakeClock cannot be pickled")

    def __repr__(self) -> str:
        return f"FakeClock(now={self.now()})"


def new_fake() -> FakeClock:
    """Return a fresh ``FakeClock`` set to the Unix epoch in UTC."""
    clock = _Fake(_FACTORY_TOKEN, Instant.epoch())
    _debug("fake_clock_created", now_ns=clock.now_ns())
    return clock
