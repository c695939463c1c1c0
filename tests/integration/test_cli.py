"""Tests for the typings-worker command."""

import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from typings_worker.cli import main
from typings_worker.config import WorkerConfig
from typings_worker.context import WorkerContext
from typings_worker.integrations.channel.real import StdioChannel
from typings_worker.integrations.log.real import FileLog


@pytest.fixture
def recorded_runs(monkeypatch: pytest.MonkeyPatch) -> list[tuple[WorkerConfig, WorkerContext]]:
    """Replace run_worker so the command can be invoked without npm."""
    runs: list[tuple[WorkerConfig, WorkerContext]] = []
    monkeypatch.setattr(
        "typings_worker.cli.run_worker", lambda config, ctx: runs.append((config, ctx))
    )
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    return runs


def test_options_build_config(
    tmp_path: Path, recorded_runs: list[tuple[WorkerConfig, WorkerContext]]
) -> None:
    log_file = tmp_path / "worker.log"
    result = CliRunner().invoke(
        main,
        [
            "--globalTypingsCacheLocation",
            str(tmp_path / "cache"),
            "--logFile",
            str(log_file),
            "--npmLocation",
            "/opt/node/bin/npm",
        ],
    )

    assert result.exit_code == 0, result.output
    config, ctx = recorded_runs[0]
    assert config == WorkerConfig(
        global_cache_location=tmp_path / "cache",
        log_file=log_file,
        npm_location="/opt/node/bin/npm",
    )
    assert isinstance(ctx.log, FileLog)
    assert ctx.log.is_enabled()
    assert isinstance(ctx.channel, StdioChannel)


def test_options_from_environment(
    tmp_path: Path, recorded_runs: list[tuple[WorkerConfig, WorkerContext]]
) -> None:
    result = CliRunner().invoke(main, [], env={"TYPINGS_WORKER_CACHE": str(tmp_path)})

    assert result.exit_code == 0, result.output
    config, ctx = recorded_runs[0]
    assert config.global_cache_location == tmp_path
    assert config.log_file is None
    assert config.npm_location is None
    assert not ctx.log.is_enabled()


def test_cache_location_is_required(
    recorded_runs: list[tuple[WorkerConfig, WorkerContext]],
) -> None:
    result = CliRunner().invoke(main, [], env={"TYPINGS_WORKER_CACHE": ""})

    assert result.exit_code == 2
    assert "globalTypingsCacheLocation" in result.output
    assert recorded_runs == []
