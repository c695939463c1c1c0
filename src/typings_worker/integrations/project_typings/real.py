"""Typings acquisition limited to explicitly included packages."""

from pathlib import Path

from typings_worker.core.npm import LATEST_DIST_TAG
from typings_worker.core.types_registry import TypesRegistry
from typings_worker.integrations.log.abc import Log
from typings_worker.integrations.project_typings.abc import InstallAction, ProjectTypings
from typings_worker.models.messages import (
    CloseProjectRequest,
    DiscoverTypingsRequest,
    SetTypingsResponse,
)


def typings_file_location(cache_location: Path, package_name: str) -> Path:
    """Location of the main declaration file of @types/<package_name>."""
    return cache_location / "node_modules" / "@types" / package_name / "index.d.ts"


class CacheProjectTypings(ProjectTypings):
    """Installs the typings a project explicitly asks for into the shared cache.

    Only names listed in typeAcquisition.include are considered; nothing is
    inferred from file names or imports. Names unknown to the types registry
    are skipped.
    """

    def __init__(self, global_cache_location: Path, registry: TypesRegistry, log: Log) -> None:
        self._global_cache_location = global_cache_location
        self._registry = registry
        self._log = log
        self._next_request_id = 0
        self._project_typings: dict[str, list[str]] = {}

    @property
    def known_projects(self) -> list[str]:
        return sorted(self._project_typings)

    def _empty_response(self, request: DiscoverTypingsRequest) -> SetTypingsResponse:
        return SetTypingsResponse(
            project_name=request.project_name,
            typings=[],
            unresolved_imports=request.unresolved_imports,
            type_acquisition=request.type_acquisition,
        )

    def discover(
        self, request: DiscoverTypingsRequest, install: InstallAction
    ) -> SetTypingsResponse:
        acquisition = request.type_acquisition
        if acquisition.enable is False or not acquisition.include:
            if self._log.is_enabled():
                self._log.write_line(
                    f"No typings requested for project '{request.project_name}'"
                )
            return self._empty_response(request)

        excluded = set(acquisition.exclude)
        names: list[str] = []
        for name in acquisition.include:
            if name in excluded or name in names:
                continue
            if name not in self._registry:
                if self._log.is_enabled():
                    self._log.write_line(f"Package '{name}' is not in the types registry, skipping")
                continue
            names.append(name)

        if not names:
            return self._empty_response(request)

        cache_location = (
            Path(request.cache_path) if request.cache_path else self._global_cache_location
        )
        request_id = self._next_request_id
        self._next_request_id += 1

        results: list[bool] = []
        install(
            request_id,
            [f"@types/{name}@{LATEST_DIST_TAG}" for name in names],
            cache_location,
            results.append,
        )

        if not results or not results[0]:
            if self._log.is_enabled():
                self._log.write_line(
                    f"Failed to install typings for project '{request.project_name}'"
                )
            return self._empty_response(request)

        typings = [str(typings_file_location(cache_location, name)) for name in names]
        self._project_typings[request.project_name] = typings
        return SetTypingsResponse(
            project_name=request.project_name,
            typings=typings,
            unresolved_imports=request.unresolved_imports,
            type_acquisition=acquisition,
        )

    def close_project(self, request: CloseProjectRequest) -> None:
        removed = self._project_typings.pop(request.project_name, None)
        if self._log.is_enabled():
            state = "closed" if removed is not None else "was not tracked"
            self._log.write_line(f"Project '{request.project_name}' {state}")
