from pyclock.domain.types import Duration, Instant, as_duration, as_instant

__all__ = ["Duration", "Instant", "as_duration", "as_instant"]
