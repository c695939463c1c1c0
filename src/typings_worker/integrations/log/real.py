"""File-backed diagnostic log."""

from datetime import datetime
from pathlib import Path

from typings_worker.integrations.log.abc import Log


def now_string() -> str:
    """Format the current local time as HH:MM:SS.mmm."""
    now = datetime.now()
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


class FileLog(Log):
    """Appends timestamped lines to a log file.

    A log created without a path is permanently disabled. The first failed
    write disables the log for the rest of the process lifetime.
    """

    def __init__(self, log_file: Path | None) -> None:
        self._log_file = log_file

    def is_enabled(self) -> bool:
        return self._log_file is not None

    def write_line(self, text: str) -> None:
        if self._log_file is None:
            return

        try:
            with self._log_file.open("a", encoding="utf-8") as f:
                f.write(f"[{now_string()}] {text}\n")
        except OSError:
            self._log_file = None
