"""Fake module inspector for testing."""

from typing import Any

from typings_worker.integrations.module_inspector.abc import ModuleInspector


class FakeModuleInspector(ModuleInspector):
    """Returns canned inspection results.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, results: dict[str, dict[str, Any]] | None = None) -> None:
        self._results = results or {}
        self._inspected: list[str] = []

    @property
    def inspected(self) -> list[str]:
        return self._inspected.copy()

    def inspect(self, file_name: str) -> dict[str, Any]:
        self._inspected.append(file_name)
        return self._results.get(file_name, {"name": file_name, "kind": "module", "members": []})
