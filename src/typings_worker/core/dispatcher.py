"""Top-level request loop of the worker.

The dispatcher reads one request at a time from the channel, runs its handler
to completion and sends exactly one response before reading the next one.
A setup failure recorded before the channel was live is sent once, ahead of
the response to the first request.
"""

import json
import logging
from pathlib import Path
from typing import assert_never

from typings_worker.context import WorkerContext
from typings_worker.core.install_worker import AD_HOC_REQUEST_ID, InstallWorker
from typings_worker.core.project_root import find_project_root
from typings_worker.core.types_registry import TypesRegistry
from typings_worker.integrations.project_typings.abc import ProjectTypings
from typings_worker.models.messages import (
    CloseProjectRequest,
    DiscoverTypingsRequest,
    InitializationFailedResponse,
    InspectValueRequest,
    InspectValueResponse,
    InstallPackageRequest,
    PackageInstalledResponse,
    ProjectClosedResponse,
    Request,
    Response,
    TypesRegistryRequest,
    TypesRegistryResponse,
)

logger = logging.getLogger(__name__)

NO_PROJECT_ROOT_MESSAGE = "Could not determine a project root path."


class RequestDispatcher:
    """Routes requests to their handlers and sends the responses."""

    def __init__(
        self,
        ctx: WorkerContext,
        registry: TypesRegistry,
        install_worker: InstallWorker,
        project_typings: ProjectTypings,
        pending_failure: InitializationFailedResponse | None = None,
    ) -> None:
        """Create RequestDispatcher.

        Args:
            ctx: Worker context
            registry: Types registry loaded at startup
            install_worker: Installation primitive
            project_typings: Collaborator for discover/closeProject requests
            pending_failure: Setup failure to report before the first response
        """
        self._ctx = ctx
        self._registry = registry
        self._install_worker = install_worker
        self._project_typings = project_typings
        self._pending_failure = pending_failure

    @property
    def has_pending_initialization_failure(self) -> bool:
        return self._pending_failure is not None

    def listen(self) -> None:
        """Handle requests until the parent disconnects.

        Raises:
            ProtocolError: If the parent sends an unrecognized message
            ChannelClosedError: If the parent goes away while a response is sent
        """
        while True:
            request = self._ctx.channel.receive()
            if request is None:
                return
            self.handle(request)

    def handle(self, request: Request) -> None:
        """Handle a single request, sending exactly one response for it."""
        logger.debug("Handling %s", type(request).__name__)
        self._deliver_pending_failure()

        if isinstance(request, DiscoverTypingsRequest):
            response = self._project_typings.discover(request, self._install_worker.install)
            self.send_response(response)
        elif isinstance(request, CloseProjectRequest):
            self._project_typings.close_project(request)
            self.send_response(ProjectClosedResponse(project_name=request.project_name))
        elif isinstance(request, TypesRegistryRequest):
            self._handle_types_registry()
        elif isinstance(request, InstallPackageRequest):
            self._handle_install_package(request)
        elif isinstance(request, InspectValueRequest):
            result = self._ctx.module_inspector.inspect(request.options.file_name_to_require)
            self.send_response(InspectValueResponse(result=result))
        else:
            assert_never(request)

    def send_response(self, response: Response) -> None:
        log = self._ctx.log
        if log.is_enabled():
            log.write_line(f"Sending response:\n    {json.dumps(response.to_wire())}")
        self._ctx.channel.send(response)
        if log.is_enabled():
            log.write_line("Response has been sent.")

    def _deliver_pending_failure(self) -> None:
        if self._pending_failure is None:
            return
        failure = self._pending_failure
        self._pending_failure = None
        self.send_response(failure)

    def _handle_types_registry(self) -> None:
        types_registry = {name: dict(tags) for name, tags in self._registry.items()}
        self.send_response(TypesRegistryResponse(types_registry=types_registry))

    def _handle_install_package(self, request: InstallPackageRequest) -> None:
        cwd = find_project_root(Path(request.file_name), self._ctx.filesystem)
        if cwd is None and request.project_root_path:
            cwd = Path(request.project_root_path)

        if cwd is None:
            self.send_response(
                PackageInstalledResponse(
                    project_name=request.project_name,
                    success=False,
                    message=NO_PROJECT_ROOT_MESSAGE,
                )
            )
            return

        def on_complete(success: bool) -> None:
            if success:
                message = f"Package {request.package_name} installed."
            else:
                message = f"There was an error installing {request.package_name}."
            self.send_response(
                PackageInstalledResponse(
                    project_name=request.project_name,
                    success=success,
                    message=message,
                )
            )

        self._install_worker.install(AD_HOC_REQUEST_ID, [request.package_name], cwd, on_complete)
