"""One-time worker setup performed before any request is accepted."""

import os
from dataclasses import dataclass
from pathlib import Path

from typings_worker.config import WorkerConfig
from typings_worker.context import WorkerContext
from typings_worker.core.command_executor import CommandExecutor
from typings_worker.core.npm import (
    LATEST_DIST_TAG,
    NPM_LOCATION_ARGUMENT,
    TYPES_REGISTRY_PACKAGE_NAME,
    refresh_registry_args,
)
from typings_worker.core.types_registry import (
    TypesRegistry,
    load_types_registry,
    types_registry_file_location,
)
from typings_worker.integrations.filesystem.abc import Filesystem
from typings_worker.integrations.log.abc import Log
from typings_worker.models.messages import InitializationFailedResponse

NPM_CONFIG_CONTENT = '{ "private": true }'


@dataclass(frozen=True)
class SetupResult:
    """Outcome of worker setup.

    Attributes:
        registry: Loaded types registry (empty if unavailable)
        pending_failure: Failure notice to deliver to the parent once the
            channel is live, or None if setup succeeded
    """

    registry: TypesRegistry
    pending_failure: InitializationFailedResponse | None


def ensure_package_directory_exists(directory: Path, filesystem: Filesystem, log: Log) -> None:
    """Make sure directory exists and holds a package.json for npm to install into.

    Raises:
        OSError: If the directory or package.json cannot be created
    """
    npm_config = directory / "package.json"
    if log.is_enabled():
        log.write_line(f"Npm config file: {npm_config}")
    if not filesystem.path_exists(npm_config):
        if log.is_enabled():
            log.write_line(f"Npm config file: '{npm_config}' is missing, creating new one...")
        filesystem.ensure_directory(directory)
        filesystem.write_text(npm_config, NPM_CONFIG_CONTENT)


def _refresh_types_registry(
    config: WorkerConfig, ctx: WorkerContext, executor: CommandExecutor
) -> str | None:
    """Update the types-registry package; return an error message on failure."""
    log = ctx.log
    try:
        ensure_package_directory_exists(config.global_cache_location, ctx.filesystem, log)
    except OSError as e:
        if log.is_enabled():
            log.write_line(f"Error creating typings cache directory: {e}")
        return str(e)

    if log.is_enabled():
        log.write_line(f"Updating {TYPES_REGISTRY_PACKAGE_NAME} npm package...")
    outcome = executor.run(config.npm_path, refresh_registry_args(), config.global_cache_location)
    if not outcome.failed:
        if log.is_enabled():
            log.write_line(f"Updated {TYPES_REGISTRY_PACKAGE_NAME} npm package")
        return None

    message = (
        outcome.stderr.strip()
        or f"npm install {TYPES_REGISTRY_PACKAGE_NAME}@{LATEST_DIST_TAG} failed"
    )
    if log.is_enabled():
        log.write_line(f"Error updating {TYPES_REGISTRY_PACKAGE_NAME} package: {message}")
    return message


def initialize(config: WorkerConfig, ctx: WorkerContext, executor: CommandExecutor) -> SetupResult:
    """Prepare the typings cache and load the types registry.

    Failures are never raised. A failed registry refresh is returned as a
    pending InitializationFailedResponse, and the registry is still loaded
    from whatever copy is already cached.

    Args:
        config: Worker configuration
        ctx: Worker context
        executor: Command executor used to run npm

    Returns:
        SetupResult with the registry and an optional pending failure
    """
    log = ctx.log
    if log.is_enabled():
        log.write_line(f"Process id: {os.getpid()}")
        explicit = "" if config.npm_location is not None else "not "
        log.write_line(
            f"NPM location: {config.npm_path} "
            f"(explicit '{NPM_LOCATION_ARGUMENT}' {explicit}provided)"
        )

    error_message = _refresh_types_registry(config, ctx, executor)
    pending_failure = (
        InitializationFailedResponse(message=error_message) if error_message is not None else None
    )

    registry = load_types_registry(
        types_registry_file_location(config.global_cache_location), ctx.filesystem, log
    )
    return SetupResult(registry=registry, pending_failure=pending_failure)
