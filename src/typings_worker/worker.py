"""Worker assembly and lifecycle."""

import logging
import sys
import traceback
from importlib.metadata import PackageNotFoundError, version
from types import TracebackType

from typings_worker.config import WorkerConfig
from typings_worker.context import WorkerContext
from typings_worker.core.command_executor import CommandExecutor
from typings_worker.core.dispatcher import RequestDispatcher
from typings_worker.core.install_worker import InstallWorker
from typings_worker.core.setup import initialize
from typings_worker.errors import ChannelClosedError
from typings_worker.integrations.log.abc import Log
from typings_worker.integrations.project_typings.real import CacheProjectTypings

logger = logging.getLogger(__name__)


def worker_version() -> str:
    """Installed version of the worker, used in the npm user agent."""
    try:
        return version("typings-worker")
    except PackageNotFoundError:
        return "0.0.0"


def install_unhandled_exception_logging(log: Log) -> None:
    """Write uncaught exceptions to log before the default hook reports them."""
    if not log.is_enabled():
        return

    previous_hook = sys.excepthook

    def hook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        stack = "".join(traceback.format_tb(tb))
        log.write_line(f"Unhandled exception: {exc_type.__name__}: {exc} at {stack}")
        previous_hook(exc_type, exc, tb)

    sys.excepthook = hook


def create_dispatcher(config: WorkerConfig, ctx: WorkerContext) -> RequestDispatcher:
    """Run one-time setup and build the dispatcher for the request loop."""
    executor = CommandExecutor(ctx.process_runner, ctx.log)
    setup = initialize(config, ctx, executor)
    logger.debug(
        "Setup finished: registry_size=%d, failed=%s",
        len(setup.registry),
        setup.pending_failure is not None,
    )
    install_worker = InstallWorker(
        executor, ctx.clock, ctx.log, config.npm_path, worker_version()
    )
    return RequestDispatcher(
        ctx,
        setup.registry,
        install_worker,
        CacheProjectTypings(config.global_cache_location, setup.registry, ctx.log),
        pending_failure=setup.pending_failure,
    )


def run_worker(config: WorkerConfig, ctx: WorkerContext) -> None:
    """Set up the worker and serve requests until the parent disconnects.

    Returns normally when the parent goes away. Protocol violations propagate
    and terminate the process.
    """
    dispatcher = create_dispatcher(config, ctx)
    try:
        dispatcher.listen()
    except ChannelClosedError:
        logger.debug("Response channel closed by parent")
    if ctx.log.is_enabled():
        ctx.log.write_line("Parent process has exited, shutting down...")
