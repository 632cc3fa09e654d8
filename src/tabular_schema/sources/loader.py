"""Schema document loader.

Reads JSON or YAML files holding a tabular schema, optionally picking the
schema out of a larger document (for example a dataset's structure).
Documents are only loaded here - compilation happens in tabular.compiler.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from tabular_schema.core.logging import get_logger

logger = get_logger(__name__)

JSON_SUFFIXES = frozenset({".json"})
YAML_SUFFIXES = frozenset({".yaml", ".yml"})

_JSON_SCALARS = (str, int, float, bool, type(None))


class SchemaLoadError(Exception):
    """Error loading a schema document."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def load_schema(path: Path | str, key: str | None = None) -> dict[str, Any]:
    """Load a schema document from a JSON or YAML file.

    Args:
        path: Path to the schema file
        key: Dotted path of a nested object to use as the schema,
             e.g. "structure.schema"

    Returns:
        The decoded schema object

    Raises:
        SchemaLoadError: If the file is missing, can't be decoded or parsed,
            holds values JSON can't represent, or the selected value is not
            an object
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(path, "file not found")

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES | YAML_SUFFIXES:
        raise SchemaLoadError(path, f"unsupported file type '{suffix}'")

    try:
        with open(path, encoding="utf-8") as f:
            if suffix in JSON_SUFFIXES:
                document = json.load(f)
            else:
                document = yaml.safe_load(f)
    except UnicodeDecodeError as e:
        raise SchemaLoadError(path, f"invalid encoding: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(path, f"invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaLoadError(path, f"invalid YAML: {e}") from e
    except OSError as e:
        raise SchemaLoadError(path, f"cannot read file: {e.strerror or e}") from e

    schema = select_key(document, key) if key else document
    if not isinstance(schema, dict):
        where = f"'{key}'" if key else "document"
        raise SchemaLoadError(path, f"{where} must be an object")

    # YAML can produce keys and values that JSON has no spelling for
    problem = json_incompatibility(schema, key or "$")
    if problem:
        raise SchemaLoadError(path, f"not JSON-compatible: {problem}")

    logger.info("schema_loaded", path=str(path), key=key)
    return schema


def select_key(document: Any, key: str) -> Any:
    """Walk a dotted key path through nested objects.

    Returns None when any step is missing or is not an object.
    """
    value = document
    for part in key.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def json_incompatibility(value: Any, where: str = "$") -> str | None:
    """Describe the first key or value that has no JSON equivalent.

    YAML 1.1 reads ``1:`` or ``on:`` as non-string keys and ``2020-01-01`` as
    a date; schemas must stay within the types JSON decodes to.

    Returns:
        None when the whole document is JSON-compatible
    """
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                return f"non-string key {key!r} at {where}"
            problem = json_incompatibility(item, f"{where}.{key}")
            if problem:
                return problem
        return None

    if isinstance(value, list):
        for i, item in enumerate(value):
            problem = json_incompatibility(item, f"{where}[{i}]")
            if problem:
                return problem
        return None

    if isinstance(value, _JSON_SCALARS):
        return None
    return f"{type(value).__name__} value at {where}"
