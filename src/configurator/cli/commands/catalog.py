"""Commands for inspecting the option catalog and the rule set."""

from typing import Annotated

import typer

from configurator.domain.catalog import list_modes, list_options
from configurator.domain.rules import RULE_SET
from configurator.domain.value_objects import Dimension
from configurator.infrastructure.formatters import RuleTableFormatter


def _echo_dimension(dimension: Dimension) -> None:
    typer.echo(f"{dimension.value}:")
    if dimension.is_catalog:
        options = list_options(dimension)
        width = max(len(o.id) for o in options)
        for option in options:
            price = f"+{option.price:,} EUR" if option.price else "included"
            typer.echo(f"  {option.id:<{width}}  {option.name} ({price})")
    else:
        modes = list_modes(dimension)
        width = max(len(m.value) for m in modes)
        for mode in modes:
            typer.echo(f"  {mode.value:<{width}}  {mode.label}")


def options_command(
    dimension: Annotated[
        str | None,
        typer.Argument(help="Dimension to list (default: all dimensions)"),
    ] = None,
) -> None:
    """List the selectable values of one or all dimensions.

    Examples:
        configurator options
        configurator options wheels
    """
    if dimension is None:
        for index, dim in enumerate(Dimension):
            if index:
                typer.echo()
            _echo_dimension(dim)
        return

    try:
        selected = Dimension(dimension)
    except ValueError:
        available = ", ".join(d.value for d in Dimension)
        typer.echo(f"Error: Unknown dimension: {dimension}", err=True)
        typer.echo(f"Available dimensions: {available}", err=True)
        raise typer.Exit(code=1)

    _echo_dimension(selected)


def rules_command() -> None:
    """Print the rule set as a table."""
    typer.echo(RuleTableFormatter().format(RULE_SET))
