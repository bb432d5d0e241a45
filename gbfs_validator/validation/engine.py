"""Schema engine wrapper.

Runs a jsonschema validator over a decoded document and converts the
reported errors into a single RawViolation tree.

jsonschema yields any number of top-level errors, each carrying the
errors of combinator branches in ``error.context``. The wrapper returns
the only error as-is, or wraps several of them in a synthetic root node,
so callers always get zero or one root violation.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import IO, Any, Union

from jsonschema.exceptions import ValidationError as JsonSchemaError

from gbfs_validator.exceptions import DocumentDecodeError
from gbfs_validator.validation.models import ROOT_POINTER, RawViolation, ViolatedSchema

logger = logging.getLogger(__name__)

Document = Union[bytes, bytearray, str, IO[bytes], IO[str]]


def decode_document(document: Document) -> Any:
    """Decode a feed file into JSON data.

    Args:
        document: Raw bytes, text, or a binary/text stream.

    Raises:
        DocumentDecodeError: If the content is not UTF-8 encoded JSON, or
            is too large or too deeply nested for the JSON decoder.
    """
    try:
        if hasattr(document, "read"):
            document = document.read()
        if isinstance(document, bytes | bytearray):
            document = bytes(document).decode("utf-8-sig")
        return json.loads(document)
    except OSError as exc:
        raise DocumentDecodeError(f"Cannot read document: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DocumentDecodeError(f"Document is not valid UTF-8: {exc}") from exc
    except ValueError as exc:
        # JSONDecodeError, or an integer literal past the int conversion limit
        raise DocumentDecodeError(f"Document is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentDecodeError("Document is nested too deeply") from exc
    except TypeError as exc:
        raise DocumentDecodeError(f"Unsupported document type {type(document).__name__}") from exc


def validate(validator: Any, data: Any) -> RawViolation | None:
    """Validate decoded data and return the root violation, if any.

    Args:
        validator: Compiled jsonschema validator.
        data: Decoded JSON document.

    Returns:
        None when the document conforms, otherwise the root violation.
    """
    root_schema = validator.schema
    violations = [to_raw_violation(error, root_schema) for error in validator.iter_errors(data)]

    if not violations:
        return None
    if len(violations) == 1:
        return violations[0]

    return RawViolation(
        pointer_to_violation=ROOT_POINTER,
        message=f"{ROOT_POINTER}: {len(violations)} schema violations found",
        keyword=None,
        schema_location=ROOT_POINTER,
        causing_violations=tuple(violations),
    )


def to_raw_violation(error: JsonSchemaError, root_schema: Any) -> RawViolation:
    """Convert a jsonschema error (and its branch errors) into a RawViolation."""
    violated_schema = None
    if isinstance(error.schema, Mapping):
        schema_id = error.schema.get("$id")
        violated_schema = ViolatedSchema(schema_location=schema_id if isinstance(schema_id, str) else None)

    return RawViolation(
        pointer_to_violation=to_pointer(error.absolute_path),
        message=error.message,
        keyword=error.validator if isinstance(error.validator, str) else None,
        schema_location=locate_in_schema(root_schema, list(error.absolute_schema_path)),
        violated_schema=violated_schema,
        causing_violations=tuple(to_raw_violation(cause, root_schema) for cause in error.context or ()),
    )


# =============================================================================
# POINTERS
# =============================================================================


def to_pointer(segments: Iterable[Any]) -> str:
    """Format path segments as a "#"-prefixed JSON pointer.

    Examples:
        [] -> "#"
        ["data", "bikes", 0] -> "#/data/bikes/0"
    """
    return ROOT_POINTER + "".join(f"/{_escape(segment)}" for segment in segments)


def locate_in_schema(root_schema: Any, schema_path: Sequence[Any]) -> str | None:
    """Return the pointer of the schema object that owns the failing keyword.

    jsonschema leaves "$ref" out of schema paths, so the walk follows a
    local "$ref" whenever the next segment is not found in the current
    object. After a followed reference the pointer restarts at the target.

    Returns:
        The pointer, or None when the walk hits a remote "$ref" or a
        segment that is not in the schema.
    """
    if not schema_path:
        return None

    pointer: list[Any] = []
    node = root_schema
    *parents, keyword = schema_path

    for segment in parents:
        located = _step(root_schema, node, segment)
        if located is None:
            return None
        node, base = located
        if base is not None:
            pointer = base
        pointer = [*pointer, segment]

    # The keyword itself may live behind a trailing "$ref"
    while isinstance(node, Mapping) and keyword not in node and "$ref" in node:
        target = _resolve_local_ref(root_schema, node["$ref"])
        if target is None:
            return None
        node, pointer = target
    return to_pointer(pointer)


def _step(root_schema: Any, node: Any, segment: Any) -> tuple[Any, list[Any] | None] | None:
    """Descend one segment, following local "$ref"s on the way.

    Returns (child, base) where base is the pointer of the last followed
    reference, or None when no reference was followed.
    """
    base: list[Any] | None = None
    while True:
        if isinstance(node, Mapping) and segment in node:
            return node[segment], base
        if isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            return node[segment], base
        if isinstance(node, Mapping) and "$ref" in node:
            target = _resolve_local_ref(root_schema, node["$ref"])
            if target is None:
                return None
            node, base = target
            continue
        return None


def _resolve_local_ref(root_schema: Any, ref: Any) -> tuple[Any, list[Any]] | None:
    if not isinstance(ref, str) or not ref.startswith(ROOT_POINTER):
        return None

    fragment = ref[len(ROOT_POINTER) :]
    if fragment and not fragment.startswith("/"):
        return None  # anchors are not supported

    node = root_schema
    segments: list[Any] = []
    for raw in fragment.split("/")[1:]:
        token = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(node, list):
            if not token.isdigit() or int(token) >= len(node):
                return None
            node = node[int(token)]
            segments.append(int(token))
        elif isinstance(node, Mapping) and token in node:
            node = node[token]
            segments.append(token)
        else:
            return None
    return node, segments


def _escape(segment: Any) -> str:
    return str(segment).replace("~", "~0").replace("/", "~1")
