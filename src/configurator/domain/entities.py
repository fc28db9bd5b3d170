"""Configuration entities.

A ``Configuration`` is one complete, concrete bundle of selections: exactly
one value per dimension, with no unset state. Configurations are never
mutated. A new state is built from an old one with ``with_updates`` and the
previous configuration is simply discarded.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from .catalog import find_option
from .value_objects import (
    Option,
    BrakeTier,
    ColorOption,
    Dimension,
    DrivingAssistant,
    GrilleOption,
    HoodPatternOption,
    InteriorColor,
    InteriorTrim,
    LeatherType,
    LightType,
    ModelVariant,
    PerformancePackage,
    SoundSystem,
    WheelOption,
)


@dataclass(frozen=True)
class InteriorConfig:
    """Interior selections: leather, leather color and trim material."""

    leather: LeatherType
    color: InteriorColor
    trim: InteriorTrim


@dataclass(frozen=True)
class Configuration:
    """A complete vehicle configuration.

    Every field always holds exactly one value. Catalog dimensions hold the
    ``Option`` records themselves; mode dimensions hold enum members.

    Attributes:
        model: Trim level / model variant
        performance_package: Performance package tier
        color: Exterior paint
        wheels: Wheel set
        brakes: Brake tier
        interior: Leather, leather color and trim material
        lights: Headlight type
        sound: Sound system tier
        driving_assistant: Driving assistant tier
        grille: Kidney grille trim
        hood_pattern: Hood pattern
    """

    model: ModelVariant
    performance_package: PerformancePackage
    color: ColorOption
    wheels: WheelOption
    brakes: BrakeTier
    interior: InteriorConfig
    lights: LightType
    sound: SoundSystem
    driving_assistant: DrivingAssistant
    grille: GrilleOption
    hood_pattern: HoodPatternOption

    @property
    def option_price(self) -> int:
        """Sum of the price increments of the selected catalog options."""
        return (
            self.color.price
            + self.wheels.price
            + self.grille.price
            + self.hood_pattern.price
        )

    def value_of(self, dimension: Dimension) -> Any:
        """Return the selected value of a dimension."""
        dimension = Dimension(dimension)
        if dimension is Dimension.LEATHER:
            return self.interior.leather
        if dimension is Dimension.INTERIOR_COLOR:
            return self.interior.color
        if dimension is Dimension.TRIM:
            return self.interior.trim
        return getattr(self, dimension.value)


def with_updates(base: Configuration, updates: Mapping[str, Any]) -> Configuration:
    """Build a new configuration from ``base`` with some fields replaced.

    Fields present in ``updates`` take the supplied value; every other field
    is copied unchanged. Values are trusted structurally: callers resolve
    identifiers through the catalog before passing them in.

    Args:
        base: Configuration to start from
        updates: Field name to new value

    Returns:
        The new configuration. ``base`` is left untouched.

    Raises:
        TypeError: If ``updates`` names a field Configuration does not have.
    """
    if not updates:
        return base
    return dataclasses.replace(base, **dict(updates))


def default_configuration() -> Configuration:
    """Return the shipped baseline configuration.

    The baseline is orderable as shipped: it triggers no blocking rule and no
    warning under the current rule set. Any rule change must keep it that way.
    """
    return Configuration(
        model=ModelVariant.M5,
        performance_package=PerformancePackage.PERFORMANCE,
        color=_require(find_option(Dimension.COLOR, "sapphire-black")),
        wheels=_require(find_option(Dimension.WHEELS, "m-double-spoke-20")),
        brakes=BrakeTier.PERFORMANCE,
        interior=InteriorConfig(
            leather=LeatherType.MERINO,
            color=InteriorColor.BLACK,
            trim=InteriorTrim.ALUMINUM,
        ),
        lights=LightType.LASER,
        sound=SoundSystem.HARMAN_KARDON,
        driving_assistant=DrivingAssistant.PLUS,
        grille=_require(find_option(Dimension.GRILLE, "shadow-line")),
        hood_pattern=_require(find_option(Dimension.HOOD_PATTERN, "standard")),
    )


def _require(option: Option | None) -> Option:
    if option is None:
        raise LookupError("Default configuration references an undeclared option")
    return option
