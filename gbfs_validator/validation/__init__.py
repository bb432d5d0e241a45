"""Validation of feed files and mapping of schema violations."""

from gbfs_validator.validation.mapping import assemble_result, flatten_violation, resolve_schema_path
from gbfs_validator.validation.models import (
    FileValidationError,
    FileValidationResult,
    RawViolation,
    ViolatedSchema,
)
from gbfs_validator.validation.validator import FileValidator, validate_file

__all__ = [
    "FileValidationError",
    "FileValidationResult",
    "FileValidator",
    "RawViolation",
    "ViolatedSchema",
    "assemble_result",
    "flatten_violation",
    "resolve_schema_path",
    "validate_file",
]
