"""Typer CLI for the vehicle configurator."""

import logging
from typing import Annotated

import typer

from configurator.cli.commands import (
    init_command,
    options_command,
    rules_command,
    summary_command,
    validate_command,
)

app = typer.Typer(
    name="configurator",
    help="Validate BMW M5 configurations against the configurator rule set.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Validate BMW M5 configurations against the configurator rule set."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


app.command(name="validate")(validate_command)
app.command(name="options")(options_command)
app.command(name="rules")(rules_command)
app.command(name="init")(init_command)
app.command(name="summary")(summary_command)


if __name__ == "__main__":
    app()
