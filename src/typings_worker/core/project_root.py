"""Project root discovery for ad-hoc package installs."""

from pathlib import Path

from typings_worker.integrations.filesystem.abc import Filesystem

PROJECT_MANIFEST = "package.json"


def find_project_root(file_path: Path, filesystem: Filesystem) -> Path | None:
    """Walk up from the directory of file_path to find a directory with package.json.

    Args:
        file_path: File whose enclosing project is wanted
        filesystem: Filesystem used for existence checks

    Returns:
        Nearest ancestor directory containing package.json, or None
    """
    start = file_path.parent
    for directory in [start, *start.parents]:
        if filesystem.path_exists(directory / PROJECT_MANIFEST):
            return directory
    return None
