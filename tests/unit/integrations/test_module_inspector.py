"""Tests for ImportlibModuleInspector."""

import io
import json
from pathlib import Path

import pytest

from typings_worker.integrations.channel.real import StdioChannel
from typings_worker.integrations.module_inspector.real import ImportlibModuleInspector
from typings_worker.models.messages import InspectValueResponse


def test_lists_public_members(tmp_path: Path) -> None:
    module_file = tmp_path / "shapes.py"
    module_file.write_text(
        "import os\n"
        "LIMIT = 3\n"
        "_hidden = 1\n"
        "class Square:\n"
        "    pass\n"
        "def area(side):\n"
        "    return side * side\n",
        encoding="utf-8",
    )

    result = ImportlibModuleInspector().inspect(str(module_file))

    assert result == {
        "name": "shapes",
        "kind": "module",
        "members": [
            {"name": "LIMIT", "kind": "constant"},
            {"name": "Square", "kind": "class"},
            {"name": "area", "kind": "function"},
            {"name": "os", "kind": "module"},
        ],
    }


def test_module_raising_on_import_is_reported(tmp_path: Path) -> None:
    module_file = tmp_path / "broken.py"
    module_file.write_text("raise ValueError('bad config')\n", encoding="utf-8")

    result = ImportlibModuleInspector().inspect(str(module_file))

    assert result == {"name": "broken", "kind": "error", "message": "ValueError: bad config"}


def test_missing_module_is_reported(tmp_path: Path) -> None:
    result = ImportlibModuleInspector().inspect(str(tmp_path / "missing.py"))

    assert result["kind"] == "error"
    assert result["name"] == "missing"


def test_non_python_file_cannot_be_loaded(tmp_path: Path) -> None:
    data_file = tmp_path / "data.txt"
    data_file.write_text("hello", encoding="utf-8")

    result = ImportlibModuleInspector().inspect(str(data_file))

    assert result == {
        "name": "data",
        "kind": "error",
        "message": f"Cannot load module from {data_file}",
    }


def test_module_output_does_not_reach_stdout(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Only JSON responses may appear on stdout while a module is inspected."""
    module_file = tmp_path / "chatty.py"
    module_file.write_text("print('hello from module')\nGREETING = 'hi'\n", encoding="utf-8")
    channel = StdioChannel(reader=io.StringIO(""))

    result = ImportlibModuleInspector().inspect(str(module_file))
    channel.send(InspectValueResponse(result=result))

    captured = capsys.readouterr()
    assert "hello from module" in captured.err
    lines = captured.out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["kind"] == "action::valueInspected"
    assert result["members"] == [{"name": "GREETING", "kind": "constant"}]


def test_module_calling_sys_exit_is_reported(tmp_path: Path) -> None:
    module_file = tmp_path / "quitter.py"
    module_file.write_text("import sys\nsys.exit(3)\n", encoding="utf-8")

    result = ImportlibModuleInspector().inspect(str(module_file))

    assert result == {"name": "quitter", "kind": "error", "message": "SystemExit: 3"}
