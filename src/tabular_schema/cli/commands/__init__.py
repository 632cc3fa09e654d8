"""CLI command implementations."""

from tabular_schema.cli.commands import compile, validate

__all__ = [
    "compile",
    "validate",
]
