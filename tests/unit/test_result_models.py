"""Unit tests for FileValidationError and FileValidationResult."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError


class TestFileValidationError:
    """Test FileValidationError model."""

    def test_create_by_field_name_and_alias(self) -> None:
        """Errors can be built from snake_case names or wire aliases."""
        from gbfs_validator.validation.models import FileValidationError

        by_name = FileValidationError(
            schema_path="#/properties/data",
            violation_path="#/data",
            message="'bikes' is a required property",
            keyword="required",
        )
        by_alias = FileValidationError(
            schemaPath="#/properties/data",
            violationPath="#/data",
            message="'bikes' is a required property",
            keyword="required",
        )
        assert by_name == by_alias

    def test_empty_schema_path_rejected(self) -> None:
        """schema_path may never be empty."""
        from gbfs_validator.validation.models import FileValidationError

        with pytest.raises(PydanticValidationError):
            FileValidationError(schema_path="", violation_path="#", message="m", keyword="type")

    def test_is_immutable(self) -> None:
        """Errors are frozen values."""
        from gbfs_validator.validation.models import FileValidationError

        err = FileValidationError(schema_path="#", violation_path="#", message="m", keyword="type")
        with pytest.raises(PydanticValidationError):
            err.message = "changed"  # type: ignore[misc]

    def test_str(self) -> None:
        """String form shows the document pointer and the message."""
        from gbfs_validator.validation.models import FileValidationError

        err = FileValidationError(
            schema_path="#/properties/ttl",
            violation_path="#/ttl",
            message="-1 is less than the minimum of 0",
            keyword="minimum",
        )
        assert str(err) == "#/ttl: -1 is less than the minimum of 0"

        root = FileValidationError(schema_path="#", violation_path="", message="boom", keyword="type")
        assert str(root) == "boom"


class TestFileValidationResult:
    """Test FileValidationResult model."""

    def _error(self, message: str = "m"):
        from gbfs_validator.validation.models import FileValidationError

        return FileValidationError(schema_path="#", violation_path="#", message=message, keyword="type")

    def test_errors_count_derived_when_omitted(self) -> None:
        """errors_count defaults to the number of errors."""
        from gbfs_validator.validation.models import FileValidationResult

        result = FileValidationResult(errors=[self._error("a"), self._error("b")])
        assert result.errors_count == 2
        assert result.valid is False

    def test_mismatching_count_rejected(self) -> None:
        """An explicit count that disagrees with the errors is invalid."""
        from gbfs_validator.validation.models import FileValidationResult

        with pytest.raises(PydanticValidationError, match="errorsCount"):
            FileValidationResult(errors=[self._error()], errors_count=3)

    def test_wire_shape(self) -> None:
        """to_json_dict() exposes camelCase keys and the count."""
        from gbfs_validator.validation.models import FileValidationResult

        result = FileValidationResult(errors=[self._error("x")], version="2.3", file="gbfs")
        payload = result.to_json_dict()

        assert payload["errorsCount"] == 1
        assert payload["errors"] == [
            {"schemaPath": "#", "violationPath": "#", "message": "x", "keyword": "type"},
        ]
        assert payload["version"] == "2.3"
        assert payload["file"] == "gbfs"

    def test_round_trip_from_wire_shape(self) -> None:
        """A serialized result validates back into an equal result."""
        from gbfs_validator.validation.models import FileValidationResult

        result = FileValidationResult(errors=[self._error("x")], version="2.3")
        assert FileValidationResult.model_validate(result.to_json_dict()) == result
