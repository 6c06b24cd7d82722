from pyclock.infra.clock import Clock, SystemClock, default
from pyclock.infra.fake import FakeClock, new_fake
from pyclock.infra.rwlock import RWLock

__all__ = ["Clock", "FakeClock", "RWLock", "SystemClock", "default", "new_fake"]
