"""Feed file validation entry points.

Usage::

    from gbfs_validator import validate_file

    with open("free_bike_status.json", "rb") as fh:
        result = validate_file("2.3", fh, file_name="free_bike_status")
    for error in result.errors:
        print(f"{error.schema_path} {error}")
"""

from __future__ import annotations

import logging

from gbfs_validator.schema.registry import CompiledSchema, SchemaRegistry
from gbfs_validator.settings import get_settings
from gbfs_validator.validation import engine
from gbfs_validator.validation.engine import Document
from gbfs_validator.validation.mapping import assemble_result, flatten_violation
from gbfs_validator.validation.models import FileValidationError, FileValidationResult, RawViolation

logger = logging.getLogger(__name__)


class FileValidator:
    """Validates feed files against the schemas of one GBFS version."""

    def __init__(self, schema: CompiledSchema) -> None:
        self._schema = schema

    @classmethod
    def get_file_validator(cls, version: str, registry: SchemaRegistry | None = None) -> FileValidator:
        """Create a validator for a version.

        Raises:
            UnsupportedVersionError: If the version has no schemas.
        """
        reg = registry or _get_default_registry()
        return cls(reg.resolve(version))

    @property
    def version(self) -> str:
        return self._schema.version

    def file_names(self) -> list[str]:
        """Return the feed files this validator knows schemas for."""
        return self._schema.file_names()

    def validate_file(self, file_name: str, document: Document) -> FileValidationResult:
        """Validate one feed file.

        Args:
            file_name: Feed file name without extension (e.g. "station_status").
            document: Raw bytes, text, or a stream of the file.

        Returns:
            FileValidationResult; errors_count > 0 when the file does not conform.

        Raises:
            UnsupportedFileError: If the version has no schema for the file.
            DocumentDecodeError: If the document is not JSON.
        """
        validator = self._schema.validator_for(file_name)
        data = engine.decode_document(document)

        violation = engine.validate(validator, data)
        errors = self.map_to_validation_errors(violation) if violation is not None else []

        logger.debug(
            "Validated %s against GBFS %s: %d error(s)",
            file_name,
            self.version,
            len(errors),
        )
        return assemble_result(errors, version=self.version, file=file_name)

    def map_to_validation_errors(self, violation: RawViolation) -> list[FileValidationError]:
        """Flatten a violation tree into validation errors."""
        return flatten_violation(violation)


# Module-level default registry
registry = SchemaRegistry()


def _get_default_registry() -> SchemaRegistry:
    """Return the module-level default registry."""
    return registry


def validate_file(
    version: str,
    document: Document,
    *,
    file_name: str | None = None,
    registry: SchemaRegistry | None = None,
) -> FileValidationResult:
    """Validate a feed file against the schema of a GBFS version.

    A document that parses but does not conform is a successful call whose
    result lists the violations.

    Args:
        version: GBFS version identifier (e.g. "2.3").
        document: Raw bytes, text, or a stream of the file.
        file_name: Feed file name (defaults to settings.default_file_name).
        registry: Optional SchemaRegistry (defaults to the module-level registry).

    Raises:
        UnsupportedVersionError: If the version (or the file within it) is unknown.
        DocumentDecodeError: If the document cannot be decoded.
    """
    validator = FileValidator.get_file_validator(version, registry=registry)
    return validator.validate_file(file_name or get_settings().default_file_name, document)
