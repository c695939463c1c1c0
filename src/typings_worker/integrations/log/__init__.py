"""Diagnostic log integration."""

from typings_worker.integrations.log.abc import Log
from typings_worker.integrations.log.fake import FakeLog
from typings_worker.integrations.log.real import FileLog

__all__ = ["FakeLog", "FileLog", "Log"]
