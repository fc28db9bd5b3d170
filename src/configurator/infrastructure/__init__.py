"""Infrastructure layer - text formatters."""

from .formatters import (
    ConfigurationSummaryFormatter,
    FixSuggestionFormatter,
    RuleTableFormatter,
    ValidationExplanationFormatter,
    get_validation_explanation,
    suggest_fixes,
)

__all__ = [
    "ConfigurationSummaryFormatter",
    "FixSuggestionFormatter",
    "RuleTableFormatter",
    "ValidationExplanationFormatter",
    "get_validation_explanation",
    "suggest_fixes",
]
