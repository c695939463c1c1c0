"""Loading of the cached types-registry index.

The registry maps every package that has a published @types declaration
package to its dist-tags, e.g. {"lodash": {"latest": "4.14.202"}}.
"""

import json
import traceback
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from typings_worker.core.npm import TYPES_REGISTRY_PACKAGE_NAME
from typings_worker.integrations.filesystem.abc import Filesystem
from typings_worker.integrations.log.abc import Log

TypesRegistry = Mapping[str, Mapping[str, str]]

EMPTY_REGISTRY: TypesRegistry = MappingProxyType({})


def types_registry_file_location(global_cache_location: Path) -> Path:
    """Path of index.json inside the installed types-registry package."""
    return global_cache_location / "node_modules" / TYPES_REGISTRY_PACKAGE_NAME / "index.json"


def _parse_entries(content: str) -> dict[str, dict[str, str]]:
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("registry root is not a JSON object")
    entries = data.get("entries")
    if not isinstance(entries, dict):
        raise ValueError("registry has no 'entries' object")

    result: dict[str, dict[str, str]] = {}
    for name, tags in entries.items():
        if not isinstance(tags, dict):
            raise ValueError(f"entry '{name}' is not a JSON object")
        if not all(isinstance(value, str) for value in tags.values()):
            raise ValueError(f"entry '{name}' has a non-string dist-tag")
        result[name] = dict(tags)
    return result


def load_types_registry(path: Path, filesystem: Filesystem, log: Log) -> TypesRegistry:
    """Load the registry at path.

    A missing or unreadable registry is not an error: it degrades to an empty
    mapping and the reason is written to the log.

    Args:
        path: Location of the registry index.json
        filesystem: Filesystem used to check for and read the file
        log: Diagnostic log

    Returns:
        Read-only mapping of package name -> dist-tags
    """
    if not filesystem.path_exists(path):
        if log.is_enabled():
            log.write_line(f"Types registry file '{path}' does not exist")
        return EMPTY_REGISTRY

    try:
        entries = _parse_entries(filesystem.read_text(path))
    except (OSError, ValueError, RecursionError) as e:
        if log.is_enabled():
            log.write_line(
                f"Error when loading types registry file '{path}': {e}, {traceback.format_exc()}"
            )
        return EMPTY_REGISTRY

    return MappingProxyType({name: MappingProxyType(tags) for name, tags in entries.items()})
