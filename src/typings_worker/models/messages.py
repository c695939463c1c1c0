"""Pydantic models for the parent <-> worker message protocol.

Every message is a JSON object tagged by its "kind" field. Field names are
camelCase on the wire and snake_case in Python.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from typings_worker.errors import ProtocolError


class WireModel(BaseModel):
    """Base for all protocol messages."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible dict sent over the channel."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TypeAcquisition(WireModel):
    """Typings acquisition settings of a project."""

    enable: bool | None = None
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


# Requests


class DiscoverTypingsRequest(WireModel):
    kind: Literal["discover"] = "discover"
    project_name: str
    project_root_path: str
    file_names: list[str] = Field(default_factory=list)
    type_acquisition: TypeAcquisition = Field(default_factory=TypeAcquisition)
    unresolved_imports: list[str] = Field(default_factory=list)
    cache_path: str | None = None


class CloseProjectRequest(WireModel):
    kind: Literal["closeProject"] = "closeProject"
    project_name: str


class TypesRegistryRequest(WireModel):
    kind: Literal["typesRegistry"] = "typesRegistry"


class InstallPackageRequest(WireModel):
    """Request to install a single package next to the given file."""

    kind: Literal["installPackage"] = "installPackage"
    file_name: str
    package_name: str
    project_name: str
    project_root_path: str | None = None


class InspectValueOptions(WireModel):
    file_name_to_require: str


class InspectValueRequest(WireModel):
    kind: Literal["inspectValue"] = "inspectValue"
    options: InspectValueOptions


Request = Annotated[
    DiscoverTypingsRequest
    | CloseProjectRequest
    | TypesRegistryRequest
    | InstallPackageRequest
    | InspectValueRequest,
    Field(discriminator="kind"),
]

_REQUEST_ADAPTER: TypeAdapter[Request] = TypeAdapter(Request)


def parse_request(line: str) -> Request:
    """Decode one JSON message into a request.

    Args:
        line: Raw JSON text of a single message

    Returns:
        The matching request variant

    Raises:
        ProtocolError: If the text is not valid JSON or its kind is unknown
    """
    try:
        return _REQUEST_ADAPTER.validate_json(line)
    except ValidationError as e:
        raise ProtocolError(f"Unrecognized request from parent: {e}") from e


# Responses


class SetTypingsResponse(WireModel):
    """Typings acquired for a project in answer to a discover request."""

    kind: Literal["action::set"] = "action::set"
    project_name: str
    typings: list[str]
    unresolved_imports: list[str] = Field(default_factory=list)
    type_acquisition: TypeAcquisition = Field(default_factory=TypeAcquisition)


class ProjectClosedResponse(WireModel):
    kind: Literal["action::projectClosed"] = "action::projectClosed"
    project_name: str


class TypesRegistryResponse(WireModel):
    kind: Literal["event::typesRegistry"] = "event::typesRegistry"
    types_registry: dict[str, dict[str, str]]


class PackageInstalledResponse(WireModel):
    kind: Literal["action::packageInstalled"] = "action::packageInstalled"
    project_name: str
    success: bool
    message: str


class InspectValueResponse(WireModel):
    kind: Literal["action::valueInspected"] = "action::valueInspected"
    result: dict[str, Any]


class InitializationFailedResponse(WireModel):
    """Out-of-band notice that startup setup failed.

    Not a reply to any request; sent at most once, before the first reply.
    """

    kind: Literal["event::initializationFailed"] = "event::initializationFailed"
    message: str


Response = (
    SetTypingsResponse
    | ProjectClosedResponse
    | TypesRegistryResponse
    | PackageInstalledResponse
    | InspectValueResponse
    | InitializationFailedResponse
)
