"""Tests for CommandExecutor."""

import sys
from pathlib import Path

from typings_worker.core.command_executor import CommandExecutor, indent
from typings_worker.integrations.log.fake import FakeLog
from typings_worker.integrations.process_runner.abc import ProcessResult
from typings_worker.integrations.process_runner.fake import FakeProcessRunner
from typings_worker.integrations.process_runner.real import RealProcessRunner


def test_successful_command_returns_not_failed() -> None:
    """Exit code 0 is reported as failed=False with the captured output."""
    runner = FakeProcessRunner(
        default_result=ProcessResult(returncode=0, stdout="added 1 package", stderr="")
    )
    log = FakeLog()
    executor = CommandExecutor(runner, log)

    outcome = executor.run("npm", ["install", "lodash"], Path("/repo"))

    assert outcome.failed is False
    assert outcome.stdout == "added 1 package"
    assert log.lines == [
        "Exec: npm install lodash",
        "    Succeeded. stdout:\n    added 1 package",
    ]


def test_command_runs_in_given_directory() -> None:
    runner = FakeProcessRunner()
    executor = CommandExecutor(runner, FakeLog())

    executor.run('"C:\\Program Files\\npm"', ["install"], Path("/repo"))

    assert len(runner.calls) == 1
    call = runner.calls[0]
    assert call.executable == '"C:\\Program Files\\npm"'
    assert call.args == ("install",)
    assert call.cwd == Path("/repo")


def test_non_zero_exit_returns_failed_and_logs_both_streams() -> None:
    """Non-zero exit is reported as failed=True; stdout and stderr are logged."""
    runner = FakeProcessRunner(
        default_result=ProcessResult(
            returncode=1, stdout="partial", stderr="npm ERR! 404\nnot found"
        )
    )
    log = FakeLog()
    executor = CommandExecutor(runner, log)

    outcome = executor.run("npm", ["install", "nope"], Path("/repo"))

    assert outcome.failed is True
    assert outcome.stderr == "npm ERR! 404\nnot found"
    assert log.lines[-1] == (
        "    Failed. stdout:\n    partial\n    stderr:\n    npm ERR! 404\n    not found"
    )


def test_spawn_error_is_converted_to_failed_outcome() -> None:
    """An executable that cannot be started does not raise."""
    runner = FakeProcessRunner(spawn_error=FileNotFoundError("No such file or directory: 'npm'"))
    log = FakeLog()
    executor = CommandExecutor(runner, log)

    outcome = executor.run("npm", ["install"], Path("/repo"))

    assert outcome.failed is True
    assert outcome.stdout == ""
    assert "No such file or directory" in outcome.stderr
    assert log.contains("Failed. stdout:")


def test_argument_rejected_by_os_is_converted_to_failed_outcome() -> None:
    runner = FakeProcessRunner(spawn_error=ValueError("embedded null byte"))
    log = FakeLog()
    executor = CommandExecutor(runner, log)

    outcome = executor.run("npm", ["install", "bad\x00name"], Path("/repo"))

    assert outcome.failed is True
    assert outcome.stderr == "embedded null byte"
    assert log.contains("Failed. stdout:")


def test_nul_byte_argument_with_real_runner_does_not_raise(tmp_path: Path) -> None:
    """The OS refuses NUL bytes in argv; the executor reports it as a failure."""
    executor = CommandExecutor(RealProcessRunner(), FakeLog())

    outcome = executor.run(sys.executable, ["-c", "pass", "bad\x00name"], tmp_path)

    assert outcome.failed is True
    assert "null" in outcome.stderr


def test_disabled_log_records_nothing() -> None:
    runner = FakeProcessRunner(default_result=ProcessResult(returncode=2, stdout="", stderr="x"))
    log = FakeLog(enabled=False)
    executor = CommandExecutor(runner, log)

    outcome = executor.run("npm", ["install"], Path("/repo"))

    assert outcome.failed is True
    assert log.lines == []


def test_indent_handles_crlf_and_lf() -> None:
    assert indent("a\r\nb\nc") == "\n    a\n    b\n    c"
    assert indent("") == "\n    "
