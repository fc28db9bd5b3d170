"""Value objects for vehicle configuration.

Every configurable dimension is either a catalog dimension, whose values are
immutable ``Option`` records declared in ``configurator.domain.catalog``, or a
mode dimension, whose values form a closed ``(str, Enum)`` set. The enums use
``str`` as a mixin so they serialize to JSON as their plain values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Dimension(str, Enum):
    """Independently selectable facets of a vehicle configuration."""

    MODEL = "model"
    PERFORMANCE_PACKAGE = "performance_package"
    COLOR = "color"
    WHEELS = "wheels"
    BRAKES = "brakes"
    LEATHER = "leather"
    INTERIOR_COLOR = "interior_color"
    TRIM = "trim"
    LIGHTS = "lights"
    SOUND = "sound"
    DRIVING_ASSISTANT = "driving_assistant"
    GRILLE = "grille"
    HOOD_PATTERN = "hood_pattern"

    @property
    def is_catalog(self) -> bool:
        """True if values of this dimension are catalog ``Option`` records."""
        return self in CATALOG_DIMENSIONS


CATALOG_DIMENSIONS: frozenset[Dimension] = frozenset(
    {
        Dimension.COLOR,
        Dimension.WHEELS,
        Dimension.GRILLE,
        Dimension.HOOD_PATTERN,
    }
)


class _LabelledEnum(str, Enum):
    """Closed string set whose members carry a display label."""

    @property
    def label(self) -> str:
        return _LABELS.get(type(self), {}).get(self.value, self.value)


# =============================================================================
# Mode dimensions
# =============================================================================


class ModelVariant(_LabelledEnum):
    """Trim level / model variant. ``M5`` is the top trim."""

    M5 = "M5"
    SERIES_5 = "5-series"


class PerformancePackage(_LabelledEnum):
    NONE = "none"
    PERFORMANCE = "performance"
    COMPETITION = "competition"


class BrakeTier(_LabelledEnum):
    STANDARD = "standard"
    PERFORMANCE = "performance"
    CERAMIC = "ceramic"


class LeatherType(_LabelledEnum):
    VERNASCA = "vernasca"
    MERINO = "merino"
    EXTENDED_MERINO = "extended-merino"


class InteriorColor(_LabelledEnum):
    BLACK = "black"
    COGNAC = "cognac"
    SILVERSTONE = "silverstone"
    FIONA_RED = "fiona-red"
    IVORY = "ivory"


class InteriorTrim(_LabelledEnum):
    ALUMINUM = "aluminum"
    WOOD = "wood"
    CARBON = "carbon"


class LightType(_LabelledEnum):
    LED = "led"
    LASER = "laser"


class SoundSystem(_LabelledEnum):
    STANDARD = "standard"
    HARMAN_KARDON = "harman-kardon"
    BOWERS_WILKINS = "bowers-wilkins"


class DrivingAssistant(_LabelledEnum):
    NONE = "none"
    BASIC = "basic"
    PLUS = "plus"
    PRO = "pro"


# Keyed by enum class: members of different enums share values ("none",
# "standard") and compare equal as strings.
_LABELS: dict[type[Enum], dict[str, str]] = {
    ModelVariant: {"M5": "BMW M5", "5-series": "BMW 5 Series"},
    PerformancePackage: {
        "none": "Base",
        "performance": "M Performance",
        "competition": "M Competition",
    },
    BrakeTier: {
        "standard": "M Compound",
        "performance": "M Performance",
        "ceramic": "M Carbon Ceramic",
    },
    LeatherType: {
        "vernasca": "Vernasca",
        "merino": "Merino",
        "extended-merino": "Extended Merino",
    },
    InteriorColor: {
        "black": "Black",
        "cognac": "Cognac",
        "silverstone": "Silverstone",
        "fiona-red": "Fiona Red",
        "ivory": "Ivory",
    },
    InteriorTrim: {
        "aluminum": "Aluminium Rhombicle",
        "wood": "Fineline Oak",
        "carbon": "M Carbon",
    },
    LightType: {"led": "LED Headlights", "laser": "BMW Laserlight"},
    SoundSystem: {
        "standard": "HiFi",
        "harman-kardon": "Harman Kardon",
        "bowers-wilkins": "Bowers & Wilkins Diamond",
    },
    DrivingAssistant: {
        "none": "None",
        "basic": "Driving Assistant",
        "plus": "Driving Assistant Plus",
        "pro": "Driving Assistant Professional",
    },
}


MODE_TYPES: dict[Dimension, type[_LabelledEnum]] = {
    Dimension.MODEL: ModelVariant,
    Dimension.PERFORMANCE_PACKAGE: PerformancePackage,
    Dimension.BRAKES: BrakeTier,
    Dimension.LEATHER: LeatherType,
    Dimension.INTERIOR_COLOR: InteriorColor,
    Dimension.TRIM: InteriorTrim,
    Dimension.LIGHTS: LightType,
    Dimension.SOUND: SoundSystem,
    Dimension.DRIVING_ASSISTANT: DrivingAssistant,
}


# =============================================================================
# Catalog option classifications
# =============================================================================


class ColorFinish(str, Enum):
    """Paint finish family."""

    SOLID = "solid"
    METALLIC = "metallic"
    INDIVIDUAL = "individual"
    FROZEN = "frozen"


class WheelType(str, Enum):
    STANDARD = "standard"
    M_SPORT = "m-sport"
    M_PERFORMANCE = "m-performance"


class GrilleFinish(str, Enum):
    GLOSS_BLACK = "gloss-black"
    CHROME = "chrome"
    CARBON = "carbon"
    ILLUMINATED = "illuminated"


class HoodFinish(str, Enum):
    PLAIN = "plain"
    STRIPES = "stripes"
    CARBON = "carbon"


# =============================================================================
# Options
# =============================================================================


@dataclass(frozen=True)
class Option:
    """A catalog-declared choice within a dimension.

    Attributes:
        id: Stable identifier, unique within its dimension
        name: Display name
        classification: Dimension-specific classification tag
        price: Price increment in EUR (non-negative)
    """

    id: str
    name: str
    classification: str
    price: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Option id must not be empty")
        if self.price < 0:
            raise ValueError(f"Option '{self.id}' has a negative price")


@dataclass(frozen=True)
class ColorOption(Option):
    """Exterior paint. ``classification`` is a ``ColorFinish``."""

    hex: str = "#000000"

    @property
    def finish(self) -> ColorFinish:
        return ColorFinish(self.classification)


@dataclass(frozen=True)
class WheelOption(Option):
    """Wheel set. ``classification`` is a ``WheelType``."""

    size: int = 19

    @property
    def wheel_type(self) -> WheelType:
        return WheelType(self.classification)

    @property
    def is_m_series(self) -> bool:
        """M-series wheels are identified by the ``m-`` id prefix."""
        return self.id.startswith("m-")


@dataclass(frozen=True)
class GrilleOption(Option):
    """Kidney grille trim. ``classification`` is a ``GrilleFinish``."""

    hex: str = "#1a1a1a"


@dataclass(frozen=True)
class HoodPatternOption(Option):
    """Hood pattern. ``classification`` is a ``HoodFinish``."""


# =============================================================================
# Rule metadata
# =============================================================================


class Severity(str, Enum):
    """How a violated rule affects sellability."""

    BLOCK = "block"
    WARN = "warn"


class RuleCategory(str, Enum):
    """Grouping tag used for display and for routing fix suggestions."""

    WHEELS = "wheels"
    BRAKES = "brakes"
    COLOR = "color"
    INTERIOR = "interior"
    TECH = "tech"
