"""Tabular schema compiler.

Turns JSON-Schema documents describing rectangular data into ordered,
typed column models.

Example:
    from tabular_schema import columns_from_json_schema

    columns, problems = columns_from_json_schema(schema)
    columns.titles()
"""

__version__ = "0.1.0"

from tabular_schema.core.models.base import Result
from tabular_schema.tabular import (
    ColType,
    Column,
    Columns,
    InvalidTabularSchemaError,
    columns_from_json_schema,
    compile_schema,
    validate_machine_titles,
)

__all__ = [
    "ColType",
    "Column",
    "Columns",
    "InvalidTabularSchemaError",
    "Result",
    "columns_from_json_schema",
    "compile_schema",
    "validate_machine_titles",
    "__version__",
]
