"""Registry of compiled GBFS schemas, keyed by version.

A version compiles to one jsonschema validator per feed file. Compilation
happens on first use and at most once per version, also when several
threads resolve the same version concurrently.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import jsonschema  # type: ignore[import-untyped,unused-ignore]
from jsonschema.exceptions import SchemaError

from gbfs_validator.exceptions import SchemaLoadError, UnsupportedFileError
from gbfs_validator.schema.loader import SchemaLoader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledSchema:
    """All compiled feed-file schemas of one version.

    Attributes:
        version: Version identifier the schemas were resolved for.
        schemas: Raw schema documents by feed file name.
        validators: jsonschema validators by feed file name.
    """

    version: str
    schemas: Mapping[str, dict[str, Any]] = field(repr=False)
    validators: Mapping[str, Any] = field(repr=False)

    def file_names(self) -> list[str]:
        """Return the feed files this version has schemas for."""
        return sorted(self.validators)

    def validator_for(self, file_name: str) -> Any:
        """Return the validator of one feed file.

        Raises:
            UnsupportedFileError: If the version has no schema for the file.
        """
        try:
            return self.validators[file_name]
        except KeyError:
            raise UnsupportedFileError(
                f"GBFS version '{self.version}' has no schema for file '{file_name}'",
                version=self.version,
                file_name=file_name,
            ) from None


class SchemaRegistry:
    """Resolves version identifiers to compiled schemas.

    Versions come from the SchemaLoader (schema folders on disk) or from
    register() for in-memory schema sets. Registered sets take precedence.
    """

    def __init__(self, loader: SchemaLoader | None = None) -> None:
        self._loader = loader or SchemaLoader()
        self._sources: dict[str, dict[str, dict[str, Any]]] = {}
        self._compiled: dict[str, CompiledSchema] = {}
        self._lock = threading.Lock()
        self._version_locks: dict[str, threading.Lock] = {}

    def register(self, version: str, schemas: Mapping[str, dict[str, Any]]) -> None:
        """Register an in-memory schema set under a version.

        Args:
            version: Version identifier (e.g. "3.0-RC").
            schemas: Schema documents by feed file name.

        Raises:
            ValueError: If the version is already registered.
        """
        with self._lock:
            if version in self._sources:
                raise ValueError(f"Schema version '{version}' is already registered")
            self._sources[version] = dict(schemas)
            # Invalidate cached compilation
            self._compiled.pop(version, None)

    def list_versions(self) -> list[str]:
        """Return every version that can be resolved."""
        with self._lock:
            registered = set(self._sources)
        return sorted(registered | set(self._loader.available_versions()))

    def is_supported(self, version: str) -> bool:
        """Return True when resolve() would find schemas for the version."""
        return version in self.list_versions()

    def resolve(self, version: str) -> CompiledSchema:
        """Get the compiled schemas of a version, compiling on first use.

        Thread-safe: double-checked locking on a per-version lock, so
        concurrent callers wait for an in-flight compilation instead of
        starting their own.

        Raises:
            UnsupportedVersionError: If no schema exists for the version.
            SchemaLoadError: If a schema of the version is unusable.
        """
        compiled = self._compiled.get(version)
        if compiled is not None:
            return compiled

        with self._lock:
            version_lock = self._version_locks.setdefault(version, threading.Lock())

        with version_lock:
            compiled = self._compiled.get(version)
            if compiled is None:
                try:
                    compiled = self._compile(version)
                except Exception:
                    # Failed versions keep no lock entry
                    with self._lock:
                        self._version_locks.pop(version, None)
                    raise
                with self._lock:
                    self._compiled[version] = compiled
        return compiled

    def _compile(self, version: str) -> CompiledSchema:
        with self._lock:
            sources = self._sources.get(version)
        if sources is None:
            sources = self._loader.load(version)

        validators = {file_name: _build_validator(version, file_name, schema) for file_name, schema in sources.items()}
        logger.info("Compiled %d schema(s) for GBFS version %s", len(validators), version)
        return CompiledSchema(version=version, schemas=sources, validators=validators)


def _build_validator(version: str, file_name: str, schema: dict[str, Any]) -> Any:
    validator_cls = jsonschema.validators.validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as exc:
        raise SchemaLoadError(
            f"Schema '{file_name}' of GBFS version '{version}' is invalid: {exc.message}",
            path=f"v{version}/{file_name}",
        ) from exc
    return validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)
