"""Commands for creating and summarizing configuration documents."""

import json
from pathlib import Path
from typing import Annotated

import typer

from configurator.application.config import configuration_to_document
from configurator.cli.commands.validate import load_configuration
from configurator.domain.entities import default_configuration
from configurator.infrastructure.formatters import ConfigurationSummaryFormatter


def init_command(
    output: Annotated[
        Path,
        typer.Argument(help="Output file path for the new configuration"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Write the default configuration as a JSON document.

    Examples:
        configurator init my-m5.json
        configurator init my-m5.json --force
    """
    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    document = configuration_to_document(default_configuration())
    try:
        output.write_text(json.dumps(document.model_dump(mode="json"), indent=2) + "\n")
        typer.echo(f"Created: {output}")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)


def summary_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
) -> None:
    """Print a labelled summary of a configuration file."""
    config = load_configuration(config_file)
    typer.echo(ConfigurationSummaryFormatter().format(config))
