"""BMW M5 configurator constraint and validation engine."""

from configurator.application.session import ConfiguratorSession
from configurator.domain.catalog import find_option, list_modes, list_options
from configurator.domain.entities import (
    Configuration,
    default_configuration,
    with_updates,
)
from configurator.domain.rules import RULE_SET
from configurator.domain.services.validation import (
    ValidationResult,
    validate_configuration,
)
from configurator.infrastructure.formatters import (
    get_validation_explanation,
    suggest_fixes,
)

__all__ = [
    "RULE_SET",
    "Configuration",
    "ConfiguratorSession",
    "ValidationResult",
    "default_configuration",
    "find_option",
    "get_validation_explanation",
    "list_modes",
    "list_options",
    "suggest_fixes",
    "validate_configuration",
    "with_updates",
]
