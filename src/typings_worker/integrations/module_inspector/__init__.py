"""Module inspection collaborator."""

from typings_worker.integrations.module_inspector.abc import ModuleInspector
from typings_worker.integrations.module_inspector.fake import FakeModuleInspector
from typings_worker.integrations.module_inspector.real import ImportlibModuleInspector

__all__ = ["FakeModuleInspector", "ImportlibModuleInspector", "ModuleInspector"]
