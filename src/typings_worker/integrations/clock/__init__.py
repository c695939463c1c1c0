"""Clock integration."""

from typings_worker.integrations.clock.abc import Clock
from typings_worker.integrations.clock.fake import FakeClock
from typings_worker.integrations.clock.real import RealClock

__all__ = ["Clock", "FakeClock", "RealClock"]
