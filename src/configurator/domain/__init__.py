"""Domain layer - catalog, configuration model, rules and validation."""

from .catalog import (
    AVAILABLE_COLORS,
    AVAILABLE_GRILLES,
    AVAILABLE_HOOD_PATTERNS,
    AVAILABLE_WHEELS,
    display_name,
    find_mode,
    find_option,
    list_modes,
    list_options,
)
from .entities import (
    Configuration,
    InteriorConfig,
    default_configuration,
    with_updates,
)
from .rules import RULE_SET, Rule, get_rule, list_rule_ids
from .services import ValidationEngine, ValidationResult, validate_configuration
from .value_objects import (
    BrakeTier,
    ColorFinish,
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
    Option,
    PerformancePackage,
    RuleCategory,
    Severity,
    SoundSystem,
    WheelOption,
)

__all__ = [
    # Catalog
    "AVAILABLE_COLORS",
    "AVAILABLE_GRILLES",
    "AVAILABLE_HOOD_PATTERNS",
    "AVAILABLE_WHEELS",
    "display_name",
    "find_mode",
    "find_option",
    "list_modes",
    "list_options",
    # Configuration
    "Configuration",
    "InteriorConfig",
    "default_configuration",
    "with_updates",
    # Rules
    "RULE_SET",
    "Rule",
    "get_rule",
    "list_rule_ids",
    # Validation
    "ValidationEngine",
    "ValidationResult",
    "validate_configuration",
    # Value objects
    "BrakeTier",
    "ColorFinish",
    "ColorOption",
    "Dimension",
    "DrivingAssistant",
    "GrilleOption",
    "HoodPatternOption",
    "InteriorColor",
    "InteriorTrim",
    "LeatherType",
    "LightType",
    "ModelVariant",
    "Option",
    "PerformancePackage",
    "RuleCategory",
    "Severity",
    "SoundSystem",
    "WheelOption",
]
