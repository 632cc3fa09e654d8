"""Core models: ONLY truly shared base types.

Domain models live in their respective packages:
- tabular/columns.py → Column, Columns
- tabular/types.py   → ColType

Import domain models directly from their packages:
    from tabular_schema.tabular.columns import Column, Columns
"""

from tabular_schema.core.models.base import Result

__all__ = [
    "Result",
]
