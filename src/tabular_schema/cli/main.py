"""Main CLI application entry point."""

from __future__ import annotations

from typing import Annotated

import typer

from tabular_schema import __version__
from tabular_schema.cli.commands import compile, validate

app = typer.Typer(
    name="tabular-schema",
    help="Compile JSON schemas describing rectangular data into column models.",
    no_args_is_help=True,
)

# Register commands
app.command()(compile.compile)
app.command()(validate.validate)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Tabular schema compiler."""


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
