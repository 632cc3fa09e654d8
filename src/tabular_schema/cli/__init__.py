"""CLI for the tabular schema compiler.

Usage:
    tabular-schema compile schema.json
    tabular-schema validate schema.json --json

Environment:
    TABULAR_SCHEMA_LOG_LEVEL, TABULAR_SCHEMA_LOG_FORMAT and
    TABULAR_SCHEMA_FAIL_ON_PROBLEMS, also read from a .env file.
"""

from tabular_schema.cli.main import app, main

__all__ = ["app", "main"]
