"""Fake clock for testing."""

from typings_worker.integrations.clock.abc import Clock


class FakeClock(Clock):
    """Clock that advances by a fixed step on every read.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, start_ms: int = 0, step_ms: int = 0) -> None:
        """Create FakeClock.

        Args:
            start_ms: Value returned by the first read
            step_ms: Amount added after each read
        """
        self._now_ms = start_ms
        self._step_ms = step_ms

    def monotonic_ms(self) -> int:
        now = self._now_ms
        self._now_ms += self._step_ms
        return now
