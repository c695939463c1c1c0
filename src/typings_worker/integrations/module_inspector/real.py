"""Module inspection through importlib."""

import contextlib
import importlib.util
import inspect
import sys
from pathlib import Path
from typing import Any

from typings_worker.integrations.module_inspector.abc import ModuleInspector


def _member_kind(value: Any) -> str:
    if inspect.isclass(value):
        return "class"
    if inspect.isroutine(value):
        return "function"
    if inspect.ismodule(value):
        return "module"
    return "constant"


class ImportlibModuleInspector(ModuleInspector):
    """Executes a Python source file as a module and lists its public names."""

    def inspect(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        name = path.stem
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None or spec.loader is None:
            message = f"Cannot load module from {file_name}"
            return {"name": name, "kind": "error", "message": message}

        module = importlib.util.module_from_spec(spec)
        # stdout carries the response stream, so module output goes to stderr
        try:
            with contextlib.redirect_stdout(sys.stderr):
                spec.loader.exec_module(module)
        except (Exception, SystemExit) as e:
            return {"name": name, "kind": "error", "message": f"{type(e).__name__}: {e}"}

        members = [
            {"name": member_name, "kind": _member_kind(value)}
            for member_name, value in sorted(vars(module).items())
            if not member_name.startswith("_")
        ]
        return {"name": name, "kind": "module", "members": members}
