"""Static option catalog.

The catalog is the finite, ordered reference data for every catalog
dimension (paint, wheels, grille trim, hood pattern). It is declared once at
import time and never mutated. Lookups that miss return ``None``: an unknown
identifier is a valid outcome that callers handle by keeping their previous
selection.
"""

from __future__ import annotations

from enum import Enum

from .value_objects import (
    MODE_TYPES,
    ColorFinish,
    ColorOption,
    Dimension,
    GrilleFinish,
    GrilleOption,
    HoodFinish,
    HoodPatternOption,
    Option,
    WheelOption,
    WheelType,
)

AVAILABLE_COLORS: tuple[ColorOption, ...] = (
    # Solid
    ColorOption("alpine-white", "Alpine White", ColorFinish.SOLID, 0, hex="#f5f5f5"),
    ColorOption("black", "Black", ColorFinish.SOLID, 0, hex="#1a1a1a"),
    # Metallic
    ColorOption(
        "sapphire-black", "Sapphire Black Metallic", ColorFinish.METALLIC, 1200,
        hex="#0f0f14",
    ),
    ColorOption(
        "brooklyn-grey", "Brooklyn Grey Metallic", ColorFinish.METALLIC, 1200,
        hex="#4a4a4f",
    ),
    ColorOption(
        "portimao-blue", "Portimao Blue Metallic", ColorFinish.METALLIC, 1200,
        hex="#1c3d6e",
    ),
    ColorOption(
        "isle-of-man-green", "Isle of Man Green Metallic", ColorFinish.METALLIC, 1500,
        hex="#1a3d2e",
    ),
    # Individual / Frozen
    ColorOption(
        "individual-tanzanite-blue", "Individual Tanzanite Blue", ColorFinish.INDIVIDUAL,
        3900, hex="#1b2440",
    ),
    ColorOption(
        "frozen-deep-grey", "Frozen Deep Grey", ColorFinish.FROZEN, 4500,
        hex="#3a3a3a",
    ),
    ColorOption(
        "frozen-marina-bay-blue", "Frozen Marina Bay Blue", ColorFinish.FROZEN, 4500,
        hex="#1c4d7a",
    ),
)

AVAILABLE_WHEELS: tuple[WheelOption, ...] = (
    # Standard wheels are not offered on the M5
    WheelOption("standard-19", 'Standard Alloy 19"', WheelType.STANDARD, 0, size=19),
    WheelOption("m-double-spoke-20", 'M Double-Spoke 20"', WheelType.M_SPORT, 1800, size=20),
    WheelOption("m-star-spoke-21", 'M Star-Spoke 21"', WheelType.M_SPORT, 2400, size=21),
    WheelOption("m-y-spoke-21", 'M Y-Spoke 21"', WheelType.M_SPORT, 2800, size=21),
    WheelOption(
        "m-performance-forge-21", 'M Performance Forged 21"', WheelType.M_PERFORMANCE,
        4200, size=21,
    ),
)

AVAILABLE_GRILLES: tuple[GrilleOption, ...] = (
    GrilleOption("shadow-line", "Shadow Line High-Gloss", GrilleFinish.GLOSS_BLACK, 0, hex="#1a1a1a"),
    GrilleOption("chrome", "Chrome", GrilleFinish.CHROME, 0, hex="#c0c0c8"),
    GrilleOption("m-carbon", "M Carbon Kidney Grille", GrilleFinish.CARBON, 1900, hex="#222226"),
    GrilleOption("iconic-glow", "Iconic Glow Illuminated", GrilleFinish.ILLUMINATED, 600, hex="#2b2b30"),
)

AVAILABLE_HOOD_PATTERNS: tuple[HoodPatternOption, ...] = (
    HoodPatternOption("standard", "Standard", HoodFinish.PLAIN, 0),
    HoodPatternOption("m-stripes", "M Stripes", HoodFinish.STRIPES, 950),
    HoodPatternOption("carbon-hood", "M Carbon Hood", HoodFinish.CARBON, 3200),
)

_CATALOG: dict[Dimension, tuple[Option, ...]] = {
    Dimension.COLOR: AVAILABLE_COLORS,
    Dimension.WHEELS: AVAILABLE_WHEELS,
    Dimension.GRILLE: AVAILABLE_GRILLES,
    Dimension.HOOD_PATTERN: AVAILABLE_HOOD_PATTERNS,
}


def _validate_unique_ids(dimension: Dimension, options: tuple[Option, ...]) -> None:
    """Raise ValueError if two options of a dimension share an id."""
    seen: set[str] = set()
    for option in options:
        if option.id in seen:
            raise ValueError(
                f"Duplicate option id '{option.id}' in {dimension.value} catalog"
            )
        seen.add(option.id)


for _dimension, _options in _CATALOG.items():
    _validate_unique_ids(_dimension, _options)


def list_options(dimension: Dimension) -> tuple[Option, ...]:
    """Return the catalog options of a dimension in declaration order.

    Mode dimensions have no catalog objects and yield an empty tuple; use
    ``list_modes`` for them.
    """
    return _CATALOG.get(Dimension(dimension), ())


def list_modes(dimension: Dimension) -> tuple[Enum, ...]:
    """Return the closed value set of a mode dimension in declaration order."""
    mode_type = MODE_TYPES.get(Dimension(dimension))
    if mode_type is None:
        return ()
    return tuple(mode_type)


def find_option(dimension: Dimension, option_id: str) -> Option | None:
    """Look up a catalog option by identifier.

    Args:
        dimension: Catalog dimension to search
        option_id: Option identifier, unique within the dimension

    Returns:
        The option, or None if the identifier is not declared.
    """
    for option in list_options(dimension):
        if option.id == option_id:
            return option
    return None


def find_mode(dimension: Dimension, value: str) -> Enum | None:
    """Parse a mode value, returning None if it is outside the closed set."""
    mode_type = MODE_TYPES.get(Dimension(dimension))
    if mode_type is None:
        return None
    try:
        return mode_type(value)
    except ValueError:
        return None


def display_name(dimension: Dimension, value: str) -> str | None:
    """Resolve the display name of a catalog option or mode value.

    This is the single lookup used for any dimension, so callers never need
    to know whether a dimension is backed by catalog objects.
    """
    dimension = Dimension(dimension)
    if dimension.is_catalog:
        option = find_option(dimension, value)
        return option.name if option is not None else None
    mode = find_mode(dimension, value)
    return mode.label if mode is not None else None
