"""External process launch integration."""

from typings_worker.integrations.process_runner.abc import ProcessResult, ProcessRunner
from typings_worker.integrations.process_runner.fake import FakeProcessRunner, RunCall
from typings_worker.integrations.process_runner.real import RealProcessRunner

__all__ = ["FakeProcessRunner", "ProcessResult", "ProcessRunner", "RealProcessRunner", "RunCall"]
