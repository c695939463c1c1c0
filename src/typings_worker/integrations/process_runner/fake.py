"""Fake process runner for testing.

This fake enables testing command execution without spawning processes or
using subprocess mocks.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from typings_worker.integrations.process_runner.abc import ProcessResult, ProcessRunner


@dataclass(frozen=True)
class RunCall:
    """Record of a call to FakeProcessRunner.run()."""

    executable: str
    args: tuple[str, ...]
    cwd: Path


class FakeProcessRunner(ProcessRunner):
    """In-memory fake implementation of process execution.

    Examples:
        # Every call succeeds with empty output
        >>> runner = FakeProcessRunner()

        # Calls mentioning "left-pad" fail, the rest succeed
        >>> runner = FakeProcessRunner(
        ...     failing_args={"left-pad"},
        ...     failure_result=ProcessResult(returncode=1, stdout="", stderr="E404"),
        ... )

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        default_result: ProcessResult | None = None,
        failing_args: set[str] | None = None,
        failure_result: ProcessResult | None = None,
        spawn_error: Exception | None = None,
    ) -> None:
        """Create FakeProcessRunner with predetermined behavior.

        Args:
            default_result: Result for calls that don't match failing_args
            failing_args: Calls containing any of these arguments return failure_result
            failure_result: Result returned for failing calls
            spawn_error: If set, every run() raises this error
        """
        self._default_result = default_result or ProcessResult(returncode=0, stdout="", stderr="")
        self._failing_args = failing_args or set()
        self._failure_result = failure_result or ProcessResult(
            returncode=1, stdout="", stderr="npm ERR! simulated failure"
        )
        self._spawn_error = spawn_error
        self._calls: list[RunCall] = []

    @property
    def calls(self) -> list[RunCall]:
        """Read-only access to recorded calls for test assertions."""
        return self._calls.copy()

    def run(self, executable: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        self._calls.append(RunCall(executable=executable, args=tuple(args), cwd=cwd))
        if self._spawn_error is not None:
            raise self._spawn_error
        if self._failing_args.intersection(args):
            return self._failure_result
        return self._default_result
