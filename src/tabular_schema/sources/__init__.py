"""Schema sources - load schema documents from files."""

from tabular_schema.sources.loader import SchemaLoadError, load_schema

__all__ = [
    "SchemaLoadError",
    "load_schema",
]
