"""Tabular schemas: compile JSON schemas into ordered column models.

Usage:
    from tabular_schema.tabular import columns_from_json_schema

    columns, problems = columns_from_json_schema(schema)
    columns.valid_machine_titles()
"""

from tabular_schema.tabular.columns import Column, Columns
from tabular_schema.tabular.compiler import (
    BASE_TABULAR_SCHEMA,
    base_tabular_schema,
    columns_from_json_schema,
    compile_schema,
)
from tabular_schema.tabular.errors import (
    ColTypeDecodeError,
    CompileError,
    InvalidSchemaError,
    InvalidTabularSchemaError,
    TitleValidationError,
    UnimplementedSchemaError,
)
from tabular_schema.tabular.types import ColType
from tabular_schema.tabular.validator import (
    is_valid_machine_title,
    title_problems,
    validate_machine_titles,
)

__all__ = [
    # Models
    "ColType",
    "Column",
    "Columns",
    # Compiler
    "BASE_TABULAR_SCHEMA",
    "base_tabular_schema",
    "columns_from_json_schema",
    "compile_schema",
    # Validator
    "is_valid_machine_title",
    "title_problems",
    "validate_machine_titles",
    # Errors
    "ColTypeDecodeError",
    "CompileError",
    "InvalidSchemaError",
    "InvalidTabularSchemaError",
    "TitleValidationError",
    "UnimplementedSchemaError",
]
