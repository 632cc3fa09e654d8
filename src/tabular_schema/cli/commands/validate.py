"""Validate command - check column titles are machine-readable."""

from __future__ import annotations

import typer
from rich.markup import escape

from tabular_schema.cli.common import (
    JsonFlag,
    KeyOption,
    SchemaPathArg,
    VerboseOption,
    console,
    read_schema,
    setup_logging,
)
from tabular_schema.tabular import TitleValidationError, compile_schema, validate_machine_titles


def validate(
    schema_path: SchemaPathArg,
    key: KeyOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Check that every column title is a unique, valid identifier.

    Examples:

        tabular-schema validate schema.json

        tabular-schema validate schema.json --json
    """
    setup_logging(verbosity=verbose)
    schema = read_schema(schema_path, key)

    result = compile_schema(schema)
    if not result.success:
        if json_output:
            console.print_json(data={"error": result.error})
        else:
            console.print(f"[red]{escape(result.error or 'compilation failed')}[/red]")
        raise typer.Exit(1)

    columns = result.unwrap()
    try:
        validate_machine_titles(columns)
    except TitleValidationError as e:
        if json_output:
            console.print_json(
                data={"valid": False, "titles": columns.titles(), "problems": e.problems}
            )
        else:
            console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if json_output:
        console.print_json(data={"valid": True, "titles": columns.titles(), "problems": []})
    else:
        console.print(f"[green]All {len(columns)} column titles are valid[/green]")
