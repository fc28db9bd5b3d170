"""Execution of assistant function calls against a configuration.

A conversational assistant expresses the customer's intent as named function
calls (``change_wheels`` with a ``wheelId``, ...) or as a list of structured
field changes. This module turns either form into a partial configuration
update. It never raises on bad input: unknown function names, undeclared
option ids and values outside a closed set contribute nothing to the update,
so the previous selection is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from configurator.domain.catalog import find_mode, find_option
from configurator.domain.entities import Configuration, InteriorConfig, with_updates
from configurator.domain.value_objects import Dimension

logger = logging.getLogger(__name__)


class FunctionCall(BaseModel):
    """A named function call emitted by the assistant."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    arguments: dict[str, Any] = Field(default_factory=dict)


class ConfigurationChange(BaseModel):
    """A structured field change emitted by the assistant.

    Attributes:
        field: Configuration field, camelCase or snake_case
            (e.g. "performancePackage" or "performance_package")
        value: Option id or mode value; a mapping for "interior"
        reason: Why the assistant made the change (display only)
    """

    field: str
    value: str | dict[str, str]
    reason: str = ""


@dataclass
class FunctionCallOutcome:
    """Result of executing one or more function calls.

    Attributes:
        config_update: Configuration field replacements to apply
        show_validation: The assistant asked for the validation to be shown
    """

    config_update: dict[str, Any] = field(default_factory=dict)
    show_validation: bool = False

    def merge(self, other: "FunctionCallOutcome") -> "FunctionCallOutcome":
        """Merge a later outcome into this one; later updates win."""
        self.config_update.update(other.config_update)
        self.show_validation = self.show_validation or other.show_validation
        return self


def _resolve(dimension: Dimension, value: Any) -> Any | None:
    if not isinstance(value, str):
        return None
    if dimension.is_catalog:
        return find_option(dimension, value)
    return find_mode(dimension, value)


def _interior_update(
    values: Mapping[str, Any], base: InteriorConfig
) -> dict[str, Any]:
    """Merge interior parts into ``base``, the interior built up so far."""
    leather = _resolve(Dimension.LEATHER, values["leather"]) if "leather" in values else None
    color = _resolve(Dimension.INTERIOR_COLOR, values["color"]) if "color" in values else None
    trim = _resolve(Dimension.TRIM, values["trim"]) if "trim" in values else None

    for key, resolved in (("leather", leather), ("color", color), ("trim", trim)):
        if key in values and resolved is None:
            logger.warning(f"Ignoring unknown interior {key} {values[key]!r}")

    if leather is None and color is None and trim is None:
        return {}
    return {
        "interior": InteriorConfig(
            leather=leather or base.leather,
            color=color or base.color,
            trim=trim or base.trim,
        )
    }


def _single_field(config_field: str, dimension: Dimension, argument: str):
    def handler(args: Mapping[str, Any], current: Configuration) -> FunctionCallOutcome:
        value = args.get(argument)
        resolved = _resolve(dimension, value)
        if resolved is None:
            logger.warning(f"Ignoring unknown {dimension.value} {value!r}")
            return FunctionCallOutcome()
        return FunctionCallOutcome(config_update={config_field: resolved})

    return handler


def _change_interior(args: Mapping[str, Any], current: Configuration) -> FunctionCallOutcome:
    return FunctionCallOutcome(config_update=_interior_update(args, current.interior))


def _validate(args: Mapping[str, Any], current: Configuration) -> FunctionCallOutcome:
    return FunctionCallOutcome(show_validation=True)


FUNCTION_HANDLERS: dict[
    str, Callable[[Mapping[str, Any], Configuration], FunctionCallOutcome]
] = {
    "change_model": _single_field("model", Dimension.MODEL, "model"),
    "change_color": _single_field("color", Dimension.COLOR, "colorId"),
    "change_wheels": _single_field("wheels", Dimension.WHEELS, "wheelId"),
    "change_interior": _change_interior,
    "change_brakes": _single_field("brakes", Dimension.BRAKES, "brakes"),
    "set_performance_package": _single_field(
        "performance_package", Dimension.PERFORMANCE_PACKAGE, "package"
    ),
    "change_lights": _single_field("lights", Dimension.LIGHTS, "lights"),
    "change_sound": _single_field("sound", Dimension.SOUND, "sound"),
    "change_driving_assistant": _single_field(
        "driving_assistant", Dimension.DRIVING_ASSISTANT, "assistant"
    ),
    "change_grille": _single_field("grille", Dimension.GRILLE, "grilleId"),
    "change_hood_pattern": _single_field("hood_pattern", Dimension.HOOD_PATTERN, "hoodPatternId"),
    "validate_configuration": _validate,
}


def execute_function_call(
    name: str, args: Mapping[str, Any], current: Configuration
) -> FunctionCallOutcome:
    """Translate one function call into a partial update.

    Args:
        name: Function name (see FUNCTION_HANDLERS)
        args: Function arguments as emitted by the assistant
        current: Configuration the call applies to

    Returns:
        The outcome; empty if the call is unknown or its arguments do not
        resolve.
    """
    handler = FUNCTION_HANDLERS.get(name)
    if handler is None:
        logger.warning(f"Ignoring unknown function call '{name}'")
        return FunctionCallOutcome()
    return handler(args, current)


def execute_function_calls(
    calls: Sequence[FunctionCall], current: Configuration
) -> FunctionCallOutcome:
    """Execute calls in order and merge their outcomes.

    Each call sees the configuration as updated by the calls before it.
    """
    outcome = FunctionCallOutcome()
    for call in calls:
        working = with_updates(current, outcome.config_update)
        outcome.merge(execute_function_call(call.name, call.arguments, working))
    return outcome


# Structured change field -> dimension; camelCase as emitted by the assistant
CHANGE_FIELDS: dict[str, tuple[str, Dimension]] = {
    "model": ("model", Dimension.MODEL),
    "color": ("color", Dimension.COLOR),
    "wheels": ("wheels", Dimension.WHEELS),
    "performancePackage": ("performance_package", Dimension.PERFORMANCE_PACKAGE),
    "performance_package": ("performance_package", Dimension.PERFORMANCE_PACKAGE),
    "brakes": ("brakes", Dimension.BRAKES),
    "lights": ("lights", Dimension.LIGHTS),
    "sound": ("sound", Dimension.SOUND),
    "drivingAssistant": ("driving_assistant", Dimension.DRIVING_ASSISTANT),
    "driving_assistant": ("driving_assistant", Dimension.DRIVING_ASSISTANT),
    "grille": ("grille", Dimension.GRILLE),
    "hoodPattern": ("hood_pattern", Dimension.HOOD_PATTERN),
    "hood_pattern": ("hood_pattern", Dimension.HOOD_PATTERN),
}


def execute_config_changes(
    changes: Sequence[ConfigurationChange], current: Configuration
) -> dict[str, Any]:
    """Translate structured field changes into a partial update.

    Args:
        changes: Changes in the order the assistant emitted them
        current: Configuration the changes apply to

    Returns:
        Field name to new value, suitable for ``with_updates``.
    """
    updates: dict[str, Any] = {}

    for change in changes:
        if change.field == "interior":
            if isinstance(change.value, dict):
                base = updates.get("interior", current.interior)
                updates.update(_interior_update(change.value, base))
            else:
                logger.warning(f"Ignoring non-mapping interior change {change.value!r}")
            continue

        target = CHANGE_FIELDS.get(change.field)
        if target is None:
            logger.warning(f"Ignoring change to unknown field '{change.field}'")
            continue

        config_field, dimension = target
        resolved = _resolve(dimension, change.value)
        if resolved is None:
            logger.warning(f"Ignoring unknown {dimension.value} {change.value!r}")
            continue
        updates[config_field] = resolved

    return updates
