"""Violation tree and result models.

RawViolation is the read-only view of the schema engine's report: leaves
are atomic failures, nodes with causing violations are combinator failures
(oneOf/anyOf/allOf) or the synthetic root of a multi-error report.

FileValidationError and FileValidationResult are the caller-facing,
immutable output. Serialized with by_alias=True they use the GBFS
validator wire names (schemaPath, violationPath, errorsCount).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

ROOT_POINTER = "#"

# =============================================================================
# VIOLATION TREE
# =============================================================================


@dataclass(frozen=True)
class ViolatedSchema:
    """Reference to the sub-schema a violation failed against."""

    schema_location: str | None = None


@dataclass(frozen=True)
class RawViolation:
    """One node of the schema engine's violation tree.

    Attributes:
        schema_location: Pointer to the schema object holding the failing keyword.
        violated_schema: The sub-schema that was violated, if known.
        pointer_to_violation: Pointer into the data document ("#" for the root).
        message: Human-readable description.
        keyword: Schema keyword that failed (e.g. "required", "oneOf").
        causing_violations: Nested violations, in engine order.
    """

    pointer_to_violation: str
    message: str
    keyword: str | None = None
    schema_location: str | None = None
    violated_schema: ViolatedSchema | None = None
    causing_violations: tuple[RawViolation, ...] = field(default_factory=tuple)


# =============================================================================
# RESULT MODELS
# =============================================================================


class FileValidationError(BaseModel):
    """A single schema violation in a feed file.

    Attributes:
        schema_path: Pointer into the schema ("#" when unknown, never empty).
        violation_path: Pointer into the validated document.
        message: Human-readable error description.
        keyword: Schema keyword that failed.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_path: str = Field(alias="schemaPath", min_length=1)
    violation_path: str = Field(alias="violationPath")
    message: str
    keyword: str

    def __str__(self) -> str:
        """Human-readable representation."""
        if self.violation_path:
            return f"{self.violation_path}: {self.message}"
        return self.message


class FileValidationResult(BaseModel):
    """Result of validating one feed file.

    Attributes:
        errors: Violations in traversal order (empty when valid).
        errors_count: Number of errors, always len(errors).
        version: Schema version the file was validated against.
        file: Feed file name, when known.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    errors: tuple[FileValidationError, ...] = ()
    errors_count: int = Field(default=0, alias="errorsCount", ge=0)
    version: str | None = None
    file: str | None = None

    @model_validator(mode="before")
    @classmethod
    def derive_errors_count(cls, data: Any) -> Any:
        if isinstance(data, dict) and "errors_count" not in data and "errorsCount" not in data:
            data = {**data, "errors_count": len(data.get("errors") or ())}
        return data

    @model_validator(mode="after")
    def check_errors_count(self) -> FileValidationResult:
        if self.errors_count != len(self.errors):
            raise ValueError(f"errorsCount ({self.errors_count}) does not match number of errors ({len(self.errors)})")
        return self

    @property
    def valid(self) -> bool:
        """Whether the file conforms to its schema."""
        return self.errors_count == 0

    def to_json_dict(self) -> dict[str, Any]:
        """Return the wire representation (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)
