"""Production process runner using subprocess."""

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from typings_worker.integrations.process_runner.abc import ProcessResult, ProcessRunner


def _is_quoted(executable: str) -> bool:
    return len(executable) >= 2 and executable.startswith('"') and executable.endswith('"')


def build_command(executable: str, args: Sequence[str]) -> str | list[str]:
    """Build the value handed to subprocess.run for executable and args.

    A quoted executable is a command-line token. On Windows it is kept as-is
    in front of the rest of the command line; elsewhere the quotes are removed
    since argv entries are passed to the OS verbatim.
    """
    if os.name == "nt":
        if _is_quoted(executable):
            return f"{executable} {subprocess.list2cmdline(list(args))}".rstrip()
        return [executable, *args]

    if _is_quoted(executable):
        executable = executable[1:-1]
    return [executable, *args]


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.run()."""

    def run(self, executable: str, args: Sequence[str], cwd: Path) -> ProcessResult:
        result = subprocess.run(
            build_command(executable, args),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        return ProcessResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
