"""Clock abstraction for testing.

Install durations are measured through this interface so tests can assert
on logged timings without depending on wall-clock time.
"""

from abc import ABC, abstractmethod


class Clock(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def monotonic_ms(self) -> int:
        """Return a monotonic timestamp in milliseconds."""
        ...
