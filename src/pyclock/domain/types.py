from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, tzinfo
from functools import singledispatch, total_ordering

_NS_PER_US = 1_000
_NS_PER_S = 1_000_000_000
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """Signed span of time in integer nanoseconds."""

    ns: int

    @classmethod
    def of(
        cls,
        *,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        total = ((hours * 60 + minutes) * 60 + seconds) * _NS_PER_S
        total += milliseconds * 1_000_000 + microseconds * _NS_PER_US + nanoseconds
        return cls(total)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        return cls((delta // timedelta(microseconds=1)) * _NS_PER_US)

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.ns // _NS_PER_US)

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.ns + other.ns)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.ns - other.ns)

    def __neg__(self) -> Duration:
        return Duration(-self.ns)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Instant:
    """Point in time as nanoseconds since the Unix epoch.

    ``tz`` only affects presentation; equality, hashing and ordering use
    ``ns`` alone, so the same moment in two zones compares equal.
    """

    ns: int
    tz: tzinfo = field(default=UTC)

    @classmethod
    def epoch(cls) -> Instant:
        return cls(0, UTC)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        # naive datetimes are read as UTC, not host-local time
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        micros = (dt - _EPOCH) // timedelta(microseconds=1)
        return cls(micros * _NS_PER_US, dt.tzinfo)

    def to_datetime(self) -> datetime:
        """Convert to an aware ``datetime``, dropping sub-microsecond digits."""
        utc = _EPOCH + timedelta(microseconds=self.ns // _NS_PER_US)
        return utc.astimezone(self.tz)

    def in_tz(self, tz: tzinfo) -> Instant:
        return Instant(self.ns, tz)

    def isoformat(self) -> str:
        """ISO 8601 text with nine fractional digits and the UTC offset.

        Years outside 1..9999 are written with an explicit sign, e.g.
        ``+10000-01-01T00:00:00.000000000+00:00``.
        """
        secs, frac = divmod(self.ns, _NS_PER_S)
        try:
            text = (_EPOCH + timedelta(seconds=secs)).astimezone(self.tz).isoformat()
        except OverflowError:
            return self._wide_isoformat(secs, frac)
        return f"{text[:19]}.{frac:09d}{text[19:]}"

    def _wide_isoformat(self, secs: int, frac: int) -> str:
        # zones without a fixed offset have no datetime to ask out here; use UTC
        offset = self.tz.utcoffset(None) or timedelta(0)
        off_s = offset // timedelta(seconds=1)
        days, rem = divmod(secs + off_s, 86_400)
        year, month, day = _civil_from_days(days)
        hh, rem = divmod(rem, 3_600)
        mm, ss = divmod(rem, 60)
        oh, om = divmod(abs(off_s) // 60, 60)
        sign = "-" if off_s < 0 else "+"
        y = f"{year:04d}" if 0 <= year <= 9999 else f"{year:+05d}"
        return f"{y}-{month:02d}-{day:02d}T{hh:02d}:{mm:02d}:{ss:02d}.{frac:09d}{sign}{oh:02d}:{om:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.ns == other.ns

    def __lt__(self, other: Instant) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.ns < other.ns

    def __hash__(self) -> int:
        return hash(self.ns)

    def __add__(self, other: Duration) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return Instant(self.ns + other.ns, self.tz)

    def __sub__(self, other: Duration | Instant) -> Instant | Duration:
        if isinstance(other, Instant):
            return Duration(self.ns - other.ns)
        if isinstance(other, Duration):
            return Instant(self.ns - other.ns, self.tz)
        return NotImplemented


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for days since 1970-01-01."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1_460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return yoe + era * 400 + (month <= 2), month, day


@singledispatch
def as_duration(value: object) -> Duration:
    raise TypeError(f"Unsupported duration {type(value)!r}")


@as_duration.register
def _(value: Duration) -> Duration:
    return value


@as_duration.register
def _(value: timedelta) -> Duration:
    return Duration.from_timedelta(value)


@as_duration.register
def _(value: int) -> Duration:
    if isinstance(value, bool):
        raise TypeError(f"Unsupported duration {type(value)!r}")
    return Duration(value)


@singledispatch
def as_instant(value: object) -> Instant:
    raise TypeError(f"Unsupported instant {type(value)!r}")


@as_instant.register
def _(value: Instant) -> Instant:
    return value


@as_instant.register
def _(value: datetime) -> Instant:
    return Instant.from_datetime(value)
