"""Fake typings collaborator for testing."""

from typings_worker.integrations.project_typings.abc import InstallAction, ProjectTypings
from typings_worker.models.messages import (
    CloseProjectRequest,
    DiscoverTypingsRequest,
    SetTypingsResponse,
)


class FakeProjectTypings(ProjectTypings):
    """Returns pre-configured typings and records every call.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, typings: dict[str, list[str]] | None = None) -> None:
        """Create FakeProjectTypings.

        Args:
            typings: Mapping of project name -> typings to report on discover
        """
        self._typings = typings or {}
        self._discovered: list[str] = []
        self._closed: list[str] = []

    @property
    def discovered_projects(self) -> list[str]:
        return self._discovered.copy()

    @property
    def closed_projects(self) -> list[str]:
        return self._closed.copy()

    def discover(
        self, request: DiscoverTypingsRequest, install: InstallAction
    ) -> SetTypingsResponse:
        self._discovered.append(request.project_name)
        return SetTypingsResponse(
            project_name=request.project_name,
            typings=self._typings.get(request.project_name, []),
            unresolved_imports=request.unresolved_imports,
            type_acquisition=request.type_acquisition,
        )

    def close_project(self, request: CloseProjectRequest) -> None:
        self._closed.append(request.project_name)
