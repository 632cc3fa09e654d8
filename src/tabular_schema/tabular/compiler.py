"""Compile JSON schemas into tabular column models.

Tabular data is a special shape of data that comes with additional
constraints. A schema describing it must be an "array wrapper": a top-level
array whose items are positional arrays, with one column schema per position:

    {
        "type": "array",
        "items": {
            "type": "array",
            "items": [
                {"title": "id", "type": "integer"},
                {"title": "rating", "type": ["number", "null"], "max": 5}
            ]
        }
    }

Structural problems (wrong container types) are fatal and raise a
CompileError. Missing per-column metadata is common in schemas written by
other tools, so it only produces problem strings next to the compiled columns.

The schema must be a decoding of JSON into default Python types (dict, list,
str, int, float, bool, None).
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from tabular_schema.core.logging import get_logger
from tabular_schema.core.models.base import Result
from tabular_schema.tabular.columns import Column, Columns
from tabular_schema.tabular.errors import (
    InvalidSchemaError,
    InvalidTabularSchemaError,
    UnimplementedSchemaError,
)
from tabular_schema.tabular.types import ColType

logger = get_logger(__name__)

DEFAULT_COLUMN_TYPE = "string"

BASE_TABULAR_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {
        "type": "array",
        "items": [],
    },
}


def base_tabular_schema() -> dict[str, Any]:
    """Get a fresh copy of the empty array-wrapper schema."""
    return copy.deepcopy(BASE_TABULAR_SCHEMA)


def columns_from_json_schema(schema: Mapping[str, Any]) -> tuple[Columns, list[str]]:
    """Extract column data from a JSON schema object.

    Args:
        schema: Decoded JSON schema document

    Returns:
        Tuple of (columns, problems). Problems describe non-breaking issues
        that should be addressed, like missing column titles or types.

    Raises:
        InvalidSchemaError: If the schema cannot be used to describe a table
        UnimplementedSchemaError: If the schema uses the object-wrapper shape
    """
    top_level_type = schema.get("type") if isinstance(schema, Mapping) else None
    if not isinstance(top_level_type, str):
        raise InvalidSchemaError("top-level 'type' field is required")

    if top_level_type == "array":
        return _array_wrapper_columns(schema)
    if top_level_type == "object":
        return _object_wrapper_columns(schema)

    raise InvalidSchemaError(
        f"'{top_level_type}' is not a valid type to describe the top level of a tabular schema"
    )


def compile_schema(schema: Mapping[str, Any]) -> Result[Columns]:
    """Compile a schema into columns, reporting failure as a Result.

    Problems are carried in ``Result.warnings``.

    Args:
        schema: Decoded JSON schema document

    Returns:
        Result containing Columns
    """
    try:
        columns, problems = columns_from_json_schema(schema)
    except InvalidTabularSchemaError as e:
        logger.info("tabular_schema_rejected", error=e.message)
        return Result.fail(e)

    return Result.ok(columns, warnings=problems)


def _array_wrapper_columns(schema: Mapping[str, Any]) -> tuple[Columns, list[str]]:
    item_obj = schema.get("items")
    if not isinstance(item_obj, Mapping):
        raise InvalidSchemaError("top level 'items' property must be an object")

    item_arr = item_obj.get("items")
    if not isinstance(item_arr, list):
        raise InvalidSchemaError("items.items must be an array")

    problems: list[str] = []
    cols = [_compile_column(i, col_schema, problems) for i, col_schema in enumerate(item_arr)]

    logger.debug("tabular_schema_compiled", columns=len(cols), problems=len(problems))
    return Columns(cols), problems


def _compile_column(index: int, col_schema: Any, problems: list[str]) -> Column:
    """Compile one positional column schema, appending any problems.

    Defaults are kept whenever metadata can't be read, so every position
    always yields a column.
    """
    title = f"col_{index}"
    col_type = ColType((DEFAULT_COLUMN_TYPE,))
    description = ""
    validation: dict[str, Any] | None = None

    if not isinstance(col_schema, Mapping):
        problems.append(f"col. {index} schema should be an object")
        return Column.from_parts(title, col_type)

    set_title = set_type = False
    for key, val in col_schema.items():
        if key == "title":
            if isinstance(val, str):
                set_title = True
                title = val
        elif key == "type":
            set_type = True
            if isinstance(val, str):
                col_type = ColType((val,))
            elif isinstance(val, list):
                col_type = ColType(t for t in val if isinstance(t, str))
        elif key == "description":
            if isinstance(val, str):
                description = val
        else:
            if validation is None:
                validation = {}
            validation[key] = val

    if not set_title:
        problems.append(f"col. {index} title is not set")
    if not set_type:
        problems.append(f"col, {index} type is not set, defaulting to string")

    return Column.from_parts(title, col_type, description, validation)


def _object_wrapper_columns(schema: Mapping[str, Any]) -> tuple[Columns, list[str]]:
    # TODO: map "properties" entries onto columns once keyed rows are supported
    raise UnimplementedSchemaError("object-wrapper tabular schemas are not implemented")
