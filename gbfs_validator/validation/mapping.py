"""Mapping of violation trees to caller-facing validation errors.

Provides resolve_schema_path(), flatten_violation() and assemble_result().

Combinator violations (oneOf/anyOf/allOf, or the synthetic root of a
multi-error report) are never emitted themselves: only the leaves of the
tree become FileValidationError entries, in depth-first order.
"""

from __future__ import annotations

from collections.abc import Sequence

from gbfs_validator.validation.models import (
    ROOT_POINTER,
    FileValidationError,
    FileValidationResult,
    RawViolation,
)


def resolve_schema_path(violation: RawViolation) -> str:
    """Return the schema pointer for a violation, never empty.

    Lookup order:
    1. the violation's own schema location;
    2. the location of the violated sub-schema (one level only);
    3. the root pointer "#".
    """
    if violation.schema_location:
        return violation.schema_location

    violated_schema = violation.violated_schema
    if violated_schema is not None and violated_schema.schema_location:
        return violated_schema.schema_location

    return ROOT_POINTER


def flatten_violation(violation: RawViolation) -> list[FileValidationError]:
    """Expand a violation tree into its atomic errors, depth-first.

    A node with causing violations contributes only its children's errors;
    a node without any (whatever its keyword) is itself one error.
    """
    if not violation.causing_violations:
        return [
            FileValidationError(
                schema_path=resolve_schema_path(violation),
                violation_path=violation.pointer_to_violation,
                message=violation.message,
                keyword=violation.keyword or "",
            )
        ]

    errors: list[FileValidationError] = []
    for cause in violation.causing_violations:
        errors.extend(flatten_violation(cause))
    return errors


def assemble_result(
    errors: Sequence[FileValidationError],
    *,
    version: str | None = None,
    file: str | None = None,
) -> FileValidationResult:
    """Package flattened errors into an immutable result."""
    return FileValidationResult(
        errors=tuple(errors),
        errors_count=len(errors),
        version=version,
        file=file,
    )
