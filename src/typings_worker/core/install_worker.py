"""Batched npm package installation."""

import json
from collections.abc import Callable, Sequence
from pathlib import Path

from typings_worker.core.command_executor import CommandExecutor
from typings_worker.core.npm import install_packages_args
from typings_worker.integrations.clock.abc import Clock
from typings_worker.integrations.log.abc import Log

RequestCompletedAction = Callable[[bool], None]

# Request id used for installs that did not originate from a discover request.
AD_HOC_REQUEST_ID = -1


class InstallWorker:
    """Installs packages with one synchronous npm invocation per request.

    All package names of a request go into the same command line, so a single
    bad package fails the whole batch. There is no retry.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        clock: Clock,
        log: Log,
        npm_path: str,
        version: str,
    ) -> None:
        self._executor = executor
        self._clock = clock
        self._log = log
        self._npm_path = npm_path
        self._version = version

    def install(
        self,
        request_id: int,
        package_names: Sequence[str],
        cwd: Path,
        on_complete: RequestCompletedAction,
    ) -> None:
        """Install package_names into cwd and report the aggregate result.

        Args:
            request_id: Identifier used in log lines
            package_names: Package specifiers, installed in one batch
            cwd: Directory npm runs in (its node_modules receives the packages)
            on_complete: Called once with True on success, False on failure
        """
        if self._log.is_enabled():
            names = json.dumps(list(package_names))
            self._log.write_line(f"#{request_id} with arguments'{names}'.")
        start = self._clock.monotonic_ms()
        outcome = self._executor.run(
            self._npm_path, install_packages_args(package_names, self._version), cwd
        )
        if self._log.is_enabled():
            elapsed = self._clock.monotonic_ms() - start
            self._log.write_line(f"npm install #{request_id} took: {elapsed} ms")
        on_complete(not outcome.failed)
