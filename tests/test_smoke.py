from __future__ import annotations

from pyclock import Clock, Duration, FakeClock, default, new_fake
from utils import Lease


def test_import_and_construct_clocks():
    assert isinstance(default(), Clock)
    assert isinstance(new_fake(), FakeClock)


def test_consumer_accepts_either_clock():
    Lease(clock=default(), ttl=Duration.of(seconds=1))
    Lease(clock=new_fake(), ttl=Duration.of(seconds=1))
