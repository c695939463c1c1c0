"""Abstract diagnostic log."""

from abc import ABC, abstractmethod


class Log(ABC):
    """Append-only diagnostic sink.

    Implementations must never raise from write_line: diagnostic logging is
    not allowed to abort an install. Callers should check is_enabled() before
    building expensive messages.
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """Return True if write_line will record anything."""
        ...

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Record a single line of diagnostic text.

        Args:
            text: Line to record (without trailing newline)
        """
        ...
