"""Loading of versioned GBFS JSON Schema documents.

Schemas live in one directory per version (``v2.3/free_bike_status.json``).
The bundled set ships inside the package; ``GBFS_VALIDATOR_SCHEMA_DIR``
points the loader at another tree with the same layout.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from gbfs_validator.exceptions import SchemaLoadError, UnsupportedVersionError
from gbfs_validator.settings import get_settings

logger = logging.getLogger(__name__)

BUNDLED_SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"

VERSION_DIR_PREFIX = "v"


class SchemaLoader:
    """Reads the raw schema documents of one GBFS version from disk."""

    def __init__(self, schema_dir: Path | None = None) -> None:
        self._schema_dir = schema_dir

    @property
    def schema_dir(self) -> Path:
        """Directory holding one ``v<version>`` folder per version."""
        if self._schema_dir is not None:
            return self._schema_dir
        return get_settings().schema_dir or BUNDLED_SCHEMA_DIR

    def available_versions(self) -> list[str]:
        """Return the versions that have a schema folder, sorted."""
        root = self.schema_dir
        if not root.is_dir():
            return []
        return sorted(
            entry.name[len(VERSION_DIR_PREFIX) :]
            for entry in root.iterdir()
            if entry.is_dir() and entry.name.startswith(VERSION_DIR_PREFIX)
        )

    def load(self, version: str) -> dict[str, dict[str, Any]]:
        """Load every schema document of a version.

        Args:
            version: GBFS version identifier (e.g. "2.3").

        Returns:
            Mapping of feed file name (file stem) to parsed schema.

        Raises:
            UnsupportedVersionError: If there is no folder for the version.
            SchemaLoadError: If a schema file cannot be read or parsed.
        """
        # Versions must name an existing folder under schema_dir
        if version not in self.available_versions():
            raise UnsupportedVersionError(
                f"Unsupported GBFS version '{version}'",
                version=version,
            )

        version_dir = self.schema_dir / f"{VERSION_DIR_PREFIX}{version}"
        schemas: dict[str, dict[str, Any]] = {}
        for path in sorted(version_dir.glob("*.json")):
            schemas[path.stem] = _read_schema(path)

        if not schemas:
            raise UnsupportedVersionError(
                f"No schemas found for GBFS version '{version}' in {version_dir}",
                version=version,
            )

        logger.debug("Loaded %d schema(s) for version %s from %s", len(schemas), version, version_dir)
        return schemas


def _read_schema(path: Path) -> dict[str, Any]:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SchemaLoadError(f"Cannot load schema {path}: {exc}", path=str(path)) from exc

    if not isinstance(document, dict):
        raise SchemaLoadError(
            f"Schema {path} must be a JSON object, got {type(document).__name__}",
            path=str(path),
        )
    return document
