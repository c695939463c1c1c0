"""Real clock using time.monotonic()."""

import time

from typings_worker.integrations.clock.abc import Clock


class RealClock(Clock):
    """Production implementation using time.monotonic()."""

    def monotonic_ms(self) -> int:
        return int(time.monotonic() * 1000)
