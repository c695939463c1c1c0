"""Tests for protocol message models."""

import pytest
from pydantic import ValidationError

from typings_worker.errors import ProtocolError
from typings_worker.models.messages import (
    CloseProjectRequest,
    DiscoverTypingsRequest,
    InitializationFailedResponse,
    InspectValueRequest,
    InstallPackageRequest,
    PackageInstalledResponse,
    TypesRegistryRequest,
    TypesRegistryResponse,
    parse_request,
)


class TestParseRequest:
    """Tests for decoding requests from the parent."""

    def test_install_package_uses_camel_case_fields(self) -> None:
        request = parse_request(
            '{"kind": "installPackage", "fileName": "/repo/a.ts", '
            '"packageName": "@types/lodash", "projectName": "p", "projectRootPath": "/repo"}'
        )

        assert request == InstallPackageRequest(
            file_name="/repo/a.ts",
            package_name="@types/lodash",
            project_name="p",
            project_root_path="/repo",
        )

    def test_install_package_root_path_is_optional(self) -> None:
        request = parse_request(
            '{"kind": "installPackage", "fileName": "/a.ts", "packageName": "x", "projectName": "p"}'
        )

        assert isinstance(request, InstallPackageRequest)
        assert request.project_root_path is None

    def test_discover_defaults(self) -> None:
        request = parse_request(
            '{"kind": "discover", "projectName": "p", "projectRootPath": "/repo"}'
        )

        assert isinstance(request, DiscoverTypingsRequest)
        assert request.file_names == []
        assert request.type_acquisition.enable is None
        assert request.type_acquisition.include == []
        assert request.cache_path is None

    def test_discover_type_acquisition(self) -> None:
        request = parse_request(
            '{"kind": "discover", "projectName": "p", "projectRootPath": "/repo", '
            '"typeAcquisition": {"enable": true, "include": ["jquery"], "exclude": []}}'
        )

        assert isinstance(request, DiscoverTypingsRequest)
        assert request.type_acquisition.enable is True
        assert request.type_acquisition.include == ["jquery"]

    def test_other_kinds(self) -> None:
        assert parse_request('{"kind": "typesRegistry"}') == TypesRegistryRequest()
        assert parse_request('{"kind": "closeProject", "projectName": "p"}') == (
            CloseProjectRequest(project_name="p")
        )
        inspect = parse_request(
            '{"kind": "inspectValue", "options": {"fileNameToRequire": "/m.py"}}'
        )
        assert isinstance(inspect, InspectValueRequest)
        assert inspect.options.file_name_to_require == "/m.py"

    @pytest.mark.parametrize(
        "line",
        [
            '{"kind": "bogus"}',
            '{"projectName": "p"}',
            '{"kind": "closeProject"}',
            "not json",
        ],
    )
    def test_unrecognized_messages_raise_protocol_error(self, line: str) -> None:
        with pytest.raises(ProtocolError):
            parse_request(line)


class TestResponses:
    """Tests for encoding responses to the parent."""

    def test_package_installed_wire_format(self) -> None:
        response = PackageInstalledResponse(project_name="p", success=True, message="ok")

        assert response.to_wire() == {
            "kind": "action::packageInstalled",
            "projectName": "p",
            "success": True,
            "message": "ok",
        }

    def test_types_registry_wire_format(self) -> None:
        response = TypesRegistryResponse(types_registry={"lodash": {"latest": "4.0"}})

        assert response.to_wire() == {
            "kind": "event::typesRegistry",
            "typesRegistry": {"lodash": {"latest": "4.0"}},
        }

    def test_initialization_failed_wire_format(self) -> None:
        response = InitializationFailedResponse(message="npm ERR!")

        assert response.to_wire() == {"kind": "event::initializationFailed", "message": "npm ERR!"}

    def test_messages_are_immutable(self) -> None:
        response = InitializationFailedResponse(message="npm ERR!")

        with pytest.raises(ValidationError):
            response.message = "changed"  # type: ignore[misc]
