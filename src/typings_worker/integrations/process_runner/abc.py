"""Abstract process launch primitive."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured output of a finished process."""

    returncode: int
    stdout: str
    stderr: str


class ProcessRunner(ABC):
    """Runs an executable synchronously and captures its output.

    This abstraction enables testing without mock.patch by making process
    execution an injectable dependency.
    """

    @abstractmethod
    def run(self, executable: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        """Run executable with args in cwd and wait for it to finish.

        A non-zero exit code is reported through ProcessResult, not raised.

        Args:
            executable: Path or name of the executable. May be wrapped in
                double quotes if it contains spaces.
            args: Arguments passed to the executable
            cwd: Working directory for the process

        Returns:
            ProcessResult with exit code and captured stdout/stderr

        Raises:
            OSError: If the process cannot be spawned
            ValueError: If an argument cannot be passed to the OS, e.g. it
                contains a NUL byte or cannot be encoded
        """
        ...
