"""npm executable location and command-line construction."""

import shutil
from collections.abc import Sequence

TYPES_REGISTRY_PACKAGE_NAME = "types-registry"
LATEST_DIST_TAG = "latest"
NPM_LOCATION_ARGUMENT = "--npmLocation"


def quote_executable_path(path: str) -> str:
    """Wrap path in double quotes if it contains a space and isn't quoted yet.

    Examples:
        >>> quote_executable_path("C:\\\\Program Files\\\\npm")
        '"C:\\\\Program Files\\\\npm"'
        >>> quote_executable_path("/usr/bin/npm")
        '/usr/bin/npm'
    """
    if " " in path and not path.startswith('"'):
        return f'"{path}"'
    return path


def default_npm_location() -> str:
    """Locate npm on PATH, falling back to the bare command name."""
    found = shutil.which("npm")
    if found is None:
        return "npm"
    return found


def resolve_npm_path(npm_location: str | None) -> str:
    """Return the npm executable to invoke, quoted when necessary.

    Args:
        npm_location: Explicit location from configuration, or None to search PATH
    """
    location = npm_location if npm_location is not None else default_npm_location()
    return quote_executable_path(location)


def install_packages_args(package_names: Sequence[str], version: str) -> list[str]:
    """Arguments for a single `npm install` of all package_names.

    Install-time scripts are never run.
    """
    return [
        "install",
        "--ignore-scripts",
        *package_names,
        "--save-dev",
        f"--user-agent=typesInstaller/{version}",
    ]


def refresh_registry_args() -> list[str]:
    """Arguments for updating the types-registry package to its latest tag."""
    return ["install", "--ignore-scripts", f"{TYPES_REGISTRY_PACKAGE_NAME}@{LATEST_DIST_TAG}"]
