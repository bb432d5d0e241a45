"""GBFS feed file validator.

Validates feed files against versioned JSON Schemas and reports every
violation with a schema pointer and a document pointer.

Usage::

    from gbfs_validator import validate_file

    result = validate_file("2.3", payload, file_name="free_bike_status")
    if not result.valid:
        for error in result.errors:
            print(f"{error.violation_path}: {error.message}")
"""

from gbfs_validator.exceptions import (
    DocumentDecodeError,
    GbfsValidatorError,
    SchemaLoadError,
    UnsupportedFileError,
    UnsupportedVersionError,
)
from gbfs_validator.schema import CompiledSchema, SchemaRegistry
from gbfs_validator.validation import (
    FileValidationError,
    FileValidationResult,
    FileValidator,
    validate_file,
)

__all__ = [
    "CompiledSchema",
    "DocumentDecodeError",
    "FileValidationError",
    "FileValidationResult",
    "FileValidator",
    "GbfsValidatorError",
    "SchemaLoadError",
    "SchemaRegistry",
    "UnsupportedFileError",
    "UnsupportedVersionError",
    "validate_file",
]
