"""Abstract typings resolution collaborator.

Deciding which typings a project needs lives behind this interface. The
dispatcher only forwards discover/closeProject requests and relays the result.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

from typings_worker.models.messages import (
    CloseProjectRequest,
    DiscoverTypingsRequest,
    SetTypingsResponse,
)

# (request_id, package_names, cwd, on_complete) -> None
InstallAction = Callable[[int, Sequence[str], Path, Callable[[bool], None]], None]


class ProjectTypings(ABC):
    """Resolves and installs typings for whole projects."""

    @abstractmethod
    def discover(
        self, request: DiscoverTypingsRequest, install: InstallAction
    ) -> SetTypingsResponse:
        """Acquire typings for a project.

        Args:
            request: Discover request from the parent
            install: Installation primitive to run npm with

        Returns:
            Typings now available for the project
        """
        ...

    @abstractmethod
    def close_project(self, request: CloseProjectRequest) -> None:
        """Forget any state kept for a project."""
        ...
