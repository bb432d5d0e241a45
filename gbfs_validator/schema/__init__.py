"""Versioned GBFS schema loading and compilation."""

from gbfs_validator.schema.loader import BUNDLED_SCHEMA_DIR, SchemaLoader
from gbfs_validator.schema.registry import CompiledSchema, SchemaRegistry

__all__ = [
    "BUNDLED_SCHEMA_DIR",
    "CompiledSchema",
    "SchemaLoader",
    "SchemaRegistry",
]
