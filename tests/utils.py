from __future__ import annotations

from dataclasses import dataclass, field

from pyclock import Clock, Duration, Instant


@dataclass(slots=True)
class Lease:
    """Consumer written only against ``Clock``."""

    clock: Clock
    ttl: Duration
    granted_at: Instant = field(init=False)

    def __post_init__(self) -> None:
        self.granted_at = self.clock.now()

    def expired(self) -> bool:
        return self.clock.now() - self.granted_at >= self.ttl

    def renew(self) -> None:
        self.granted_at = self.clock.now()
