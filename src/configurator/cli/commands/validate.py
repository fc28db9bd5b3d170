"""Validate command for checking configuration files.

This module provides the `validate` command that loads a JSON configuration
document, runs it through the rule set and explains the verdict.
"""

from pathlib import Path
from typing import Annotated

import typer

from configurator.application.config import (
    ConfigError,
    document_to_configuration,
    load_config,
)
from configurator.domain.entities import Configuration
from configurator.domain.services.validation import ValidationResult, validate_configuration
from configurator.infrastructure.formatters import (
    get_validation_explanation,
    suggest_fixes,
)


def load_configuration(config_file: Path) -> Configuration:
    """Load a document and resolve it, exiting with code 1 on any ConfigError."""
    try:
        return document_to_configuration(load_config(config_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
    suggest: Annotated[
        bool,
        typer.Option("--suggest/--no-suggest", help="Print suggested fixes"),
    ] = True,
) -> None:
    """Validate a vehicle configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema errors (unknown fields, values outside a closed set, ...)
    - Unknown option identifiers
    - Violated configuration rules (blockers and warnings)

    Exit codes:
        0 - Configuration is orderable with no warnings
        1 - Configuration has errors or blockers (cannot be ordered)
        2 - Configuration is orderable but has warnings

    Example:
        configurator validate my-m5.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    config = load_configuration(config_file)
    result = validate_configuration(config)

    _display_validation_result(result, suggest)

    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type in ("validation", "unknown_option"):
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult, suggest: bool) -> None:
    typer.echo(get_validation_explanation(result))

    if suggest:
        suggestions = suggest_fixes(result)
        if suggestions:
            typer.echo()
            typer.echo("Suggestions:")
            for suggestion in suggestions:
                typer.echo(f"  {suggestion}")

    typer.echo()
    if result.blockers:
        typer.echo(
            f"Validation failed: {len(result.blockers)} blocker(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
