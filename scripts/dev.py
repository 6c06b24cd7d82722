from __future__ import annotations

import structlog

from pyclock import Clock, Duration, configure_structlog, default, new_fake

logger = structlog.get_logger()


def report(name: str, clock: Clock) -> None:
    logger.info("clock_now", clock=name, now=str(clock.now()))


def main() -> None:
    configure_structlog()
    report("system", default())

    fake = new_fake()
    report("fake", fake)
    fake.advance(Duration.of(hours=1, nanoseconds=5))
    report("fake", fake)
    fake.advance(-Duration.of(minutes=30))
    report("fake", fake)


if __name__ == "__main__":
    main()
