"""Worker context with dependency injection."""

from dataclasses import dataclass

from typings_worker.config import WorkerConfig
from typings_worker.integrations.channel.abc import Channel
from typings_worker.integrations.channel.fake import FakeChannel
from typings_worker.integrations.channel.real import StdioChannel
from typings_worker.integrations.clock.abc import Clock
from typings_worker.integrations.clock.fake import FakeClock
from typings_worker.integrations.clock.real import RealClock
from typings_worker.integrations.filesystem.abc import Filesystem
from typings_worker.integrations.filesystem.fake import FakeFilesystem
from typings_worker.integrations.filesystem.real import RealFilesystem
from typings_worker.integrations.log.abc import Log
from typings_worker.integrations.log.fake import FakeLog
from typings_worker.integrations.log.real import FileLog
from typings_worker.integrations.module_inspector.abc import ModuleInspector
from typings_worker.integrations.module_inspector.fake import FakeModuleInspector
from typings_worker.integrations.module_inspector.real import ImportlibModuleInspector
from typings_worker.integrations.process_runner.abc import ProcessRunner
from typings_worker.integrations.process_runner.fake import FakeProcessRunner
from typings_worker.integrations.process_runner.real import RealProcessRunner


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context holding all dependencies of the worker.

    Created at the CLI entry point and threaded through the application.
    Use for_test() to build a context from in-memory fakes.
    """

    log: Log
    filesystem: Filesystem
    process_runner: ProcessRunner
    clock: Clock
    channel: Channel
    module_inspector: ModuleInspector

    @classmethod
    def for_test(
        cls,
        *,
        log: Log | None = None,
        filesystem: Filesystem | None = None,
        process_runner: ProcessRunner | None = None,
        clock: Clock | None = None,
        channel: Channel | None = None,
        module_inspector: ModuleInspector | None = None,
    ) -> "WorkerContext":
        """Create a context with fake implementations for anything not provided."""
        return cls(
            log=log if log is not None else FakeLog(),
            filesystem=filesystem if filesystem is not None else FakeFilesystem(),
            process_runner=process_runner if process_runner is not None else FakeProcessRunner(),
            clock=clock if clock is not None else FakeClock(),
            channel=channel if channel is not None else FakeChannel(),
            module_inspector=(
                module_inspector if module_inspector is not None else FakeModuleInspector()
            ),
        )


def create_context(config: WorkerConfig) -> WorkerContext:
    """Create the production context for config."""
    return WorkerContext(
        log=FileLog(config.log_file),
        filesystem=RealFilesystem(),
        process_runner=RealProcessRunner(),
        clock=RealClock(),
        channel=StdioChannel(),
        module_inspector=ImportlibModuleInspector(),
    )
