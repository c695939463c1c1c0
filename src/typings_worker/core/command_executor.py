"""Synchronous external command execution with output logging."""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from typings_worker.integrations.log.abc import Log
from typings_worker.integrations.process_runner.abc import ProcessRunner

_NEWLINE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class CommandOutcome:
    """Captured output of one external command.

    Attributes:
        stdout: Captured standard output
        stderr: Captured standard error
        failed: True on non-zero exit or if the process could not be spawned
    """

    stdout: str
    stderr: str
    failed: bool


def indent(text: str) -> str:
    """Prefix text with a newline and indent every line by four spaces."""
    return "\n    " + _NEWLINE.sub("\n    ", text)


class CommandExecutor:
    """Runs external commands and converts every failure into a CommandOutcome.

    Nothing raised by the underlying process launch escapes run(). Spawn
    errors, arguments the OS rejects (such as embedded NUL bytes) and non-zero
    exits all come back as failed=True with the captured output written to
    the log.
    """

    def __init__(self, process_runner: ProcessRunner, log: Log) -> None:
        self._process_runner = process_runner
        self._log = log

    def run(self, executable: str, args: Sequence[str], cwd: Path) -> CommandOutcome:
        """Run executable with args in cwd and wait for it to finish.

        Args:
            executable: Executable path, already quoted if it contains spaces
            args: Command arguments
            cwd: Working directory

        Returns:
            CommandOutcome with captured output and failure flag
        """
        if self._log.is_enabled():
            self._log.write_line(f"Exec: {executable} {' '.join(args)}")

        try:
            result = self._process_runner.run(executable, args, cwd)
        except (OSError, ValueError) as e:
            outcome = CommandOutcome(stdout="", stderr=str(e), failed=True)
        else:
            outcome = CommandOutcome(
                stdout=result.stdout,
                stderr=result.stderr,
                failed=result.returncode != 0,
            )

        if outcome.failed:
            self._log.write_line(
                f"    Failed. stdout:{indent(outcome.stdout)}\n    stderr:{indent(outcome.stderr)}"
            )
        elif self._log.is_enabled():
            self._log.write_line(f"    Succeeded. stdout:{indent(outcome.stdout)}")
        return outcome
