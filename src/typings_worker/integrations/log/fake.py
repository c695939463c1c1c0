"""In-memory fake log for testing."""

from typings_worker.integrations.log.abc import Log


class FakeLog(Log):
    """Records lines in memory.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Lines written so far (for test assertions)."""
        return self._lines.copy()

    def is_enabled(self) -> bool:
        return self._enabled

    def write_line(self, text: str) -> None:
        if self._enabled:
            self._lines.append(text)

    def contains(self, fragment: str) -> bool:
        """Return True if any recorded line contains the fragment."""
        return any(fragment in line for line in self._lines)
