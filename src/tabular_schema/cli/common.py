"""Shared CLI utilities and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

from tabular_schema.core.config import get_settings
from tabular_schema.core.logging import configure_logging
from tabular_schema.sources import SchemaLoadError, load_schema

# Shared console instance
console = Console()

# Common type aliases for typer options
SchemaPathArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON or YAML schema document",
        exists=True,
        dir_okay=False,
        file_okay=True,
        resolve_path=True,
    ),
]

KeyOption = Annotated[
    str | None,
    typer.Option(
        "--key",
        "-k",
        help="Dotted path to the schema inside the document (e.g. structure.schema)",
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=configured level, 1=INFO, 2+=DEBUG
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    configure_logging(log_level=level, log_format=settings.log_format)


def read_schema(path: Path, key: str | None) -> dict[str, Any]:
    """Load a schema document, exiting with status 1 on failure."""
    try:
        return load_schema(path, key=key)
    except SchemaLoadError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
