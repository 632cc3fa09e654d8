"""Compile command - show the columns a schema describes."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table as RichTable

from tabular_schema.cli.common import (
    JsonFlag,
    KeyOption,
    SchemaPathArg,
    VerboseOption,
    console,
    read_schema,
    setup_logging,
)
from tabular_schema.core.config import get_settings
from tabular_schema.core.logging import log_context
from tabular_schema.tabular import Columns, compile_schema


def compile(
    schema_path: SchemaPathArg,
    key: KeyOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Compile a tabular schema into its columns.

    Fatal schema errors exit with status 1. Column problems are listed but
    only fail the command when TABULAR_SCHEMA_FAIL_ON_PROBLEMS is set.

    Examples:

        tabular-schema compile schema.json

        tabular-schema compile dataset.yaml --key structure.schema

        tabular-schema compile schema.json --json
    """
    setup_logging(verbosity=verbose)
    schema = read_schema(schema_path, key)

    with log_context(source=str(schema_path)):
        result = compile_schema(schema)

    if not result.success:
        if json_output:
            console.print_json(data={"error": result.error})
        else:
            console.print(f"[red]{escape(result.error or 'compilation failed')}[/red]")
        raise typer.Exit(1)

    columns = result.unwrap()
    problems = result.warnings

    if json_output:
        console.print_json(data={"columns": columns.model_dump(), "problems": problems})
    else:
        _print_columns(schema_path, columns, problems)

    if problems and get_settings().fail_on_problems:
        raise typer.Exit(1)


def _print_columns(schema_path: Path, columns: Columns, problems: list[str]) -> None:
    """Print columns and problems as rich tables."""
    console.print(f"\n[bold]Columns in {escape(schema_path.name)}[/bold]\n")

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Validation")

    for i, col in enumerate(columns):
        col_type = " | ".join(col.type) if col.type else ""
        validation = ", ".join(sorted(col.validation)) if col.validation else ""
        table.add_row(
            str(i),
            escape(col.title),
            escape(col_type),
            escape(col.description),
            escape(validation),
        )

    console.print(table)

    if problems:
        console.print(f"\n[yellow]Problems ({len(problems)}):[/yellow]")
        for problem in problems:
            console.print(f"  - {escape(problem)}")
    else:
        console.print("\n[green]No problems found[/green]")
