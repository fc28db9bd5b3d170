"""Text formatters for validation results, configurations and rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from configurator.domain.catalog import display_name
from configurator.domain.value_objects import Dimension, RuleCategory

if TYPE_CHECKING:
    from configurator.domain.entities import Configuration
    from configurator.domain.rules import Rule
    from configurator.domain.services.validation import ValidationResult

VALID_SENTENCE = "The configuration is valid and can be ordered."
BLOCKERS_HEADER = "This configuration cannot be ordered:"
WARNINGS_HEADER = "Notes:"

# Dimensions searched, in order, when resolving a rule's suggested alternative
CATEGORY_DIMENSIONS: dict[RuleCategory, tuple[Dimension, ...]] = {
    RuleCategory.WHEELS: (Dimension.WHEELS,),
    RuleCategory.COLOR: (Dimension.COLOR,),
    RuleCategory.BRAKES: (Dimension.PERFORMANCE_PACKAGE,),
    RuleCategory.INTERIOR: (Dimension.LEATHER, Dimension.TRIM, Dimension.INTERIOR_COLOR),
    RuleCategory.TECH: (Dimension.LIGHTS, Dimension.SOUND, Dimension.DRIVING_ASSISTANT),
}

SUGGESTION_TEMPLATES: dict[RuleCategory, str] = {
    RuleCategory.WHEELS: "Change wheels to: {name}",
    RuleCategory.COLOR: "Change color to: {name}",
    RuleCategory.BRAKES: "Add performance package: {name}",
    RuleCategory.INTERIOR: "Change interior to: {name}",
    RuleCategory.TECH: "Add equipment: {name}",
}


class ValidationExplanationFormatter:
    """Explains a validation result in prose for the chat and CLI layers.

    A clean result (valid, no warnings) always yields the same fixed
    sentence, regardless of the configuration that produced it.
    """

    def format(self, result: ValidationResult) -> str:
        if result.is_valid and not result.warnings:
            return VALID_SENTENCE

        lines: list[str] = []
        if result.blockers:
            lines.append(BLOCKERS_HEADER)
            lines.extend(f"- {rule.message}" for rule in result.blockers)

        if result.warnings:
            if lines:
                lines.append("")
            lines.append(WARNINGS_HEADER)
            lines.extend(f"- {rule.message}" for rule in result.warnings)

        return "\n".join(lines)


class FixSuggestionFormatter:
    """Maps violated rules back to concrete alternative selections.

    Wording is chosen per rule category. The alternative's display name is
    resolved through the catalog; if it does not resolve, the raw identifier
    is echoed instead. Rules without a suggested alternative are skipped.
    """

    def format(self, result: ValidationResult) -> list[str]:
        suggestions: list[str] = []
        for rule in (*result.blockers, *result.warnings):
            suggestion = self.suggest(rule)
            if suggestion is not None:
                suggestions.append(suggestion)
        return suggestions

    def suggest(self, rule: Rule) -> str | None:
        """Return the suggestion for a single rule, or None if it has no alternative."""
        if not rule.suggested_alternative:
            return None
        template = SUGGESTION_TEMPLATES.get(rule.category, "Add equipment: {name}")
        return template.format(name=self.resolve_name(rule))

    @staticmethod
    def resolve_name(rule: Rule) -> str:
        """Resolve the display name of a rule's suggested alternative."""
        alternative = rule.suggested_alternative or ""
        for dimension in CATEGORY_DIMENSIONS.get(rule.category, ()):
            name = display_name(dimension, alternative)
            if name is not None:
                return name
        return alternative


class ConfigurationSummaryFormatter:
    """Formats a configuration as a labelled summary with option prices."""

    def format(self, config: Configuration) -> str:
        rows = [
            ("Model", config.model.label),
            ("Performance package", config.performance_package.label),
            ("Color", f"{config.color.name} ({config.color.finish.value})"),
            ("Wheels", config.wheels.name),
            ("Brakes", config.brakes.label),
            ("Leather", config.interior.leather.label),
            ("Interior color", config.interior.color.label),
            ("Trim", config.interior.trim.label),
            ("Lights", config.lights.label),
            ("Sound", config.sound.label),
            ("Driving assistant", config.driving_assistant.label),
            ("Grille", config.grille.name),
            ("Hood pattern", config.hood_pattern.name),
        ]

        lines = [
            "CONFIGURATION SUMMARY",
            "=" * 60,
        ]
        for label, value in rows:
            lines.append(f"{label:<22} {value}")
        lines.append("-" * 60)
        lines.append(f"{'Option price':<22} {config.option_price:,} EUR")
        return "\n".join(lines)


class RuleTableFormatter:
    """Formats rules as a read-only table for display and debugging."""

    def format(self, rules: tuple[Rule, ...]) -> str:
        if not rules:
            return "No rules defined."

        lines = [
            "RULES",
            "=" * 96,
            f"{'Id':<30} {'Severity':<9} {'Category':<9} {'Alternative':<20} Description",
            "-" * 96,
        ]
        for rule in rules:
            lines.append(
                f"{rule.id:<30} {rule.severity.value:<9} {rule.category.value:<9} "
                f"{rule.suggested_alternative or '-':<20} {rule.description}"
            )
        return "\n".join(lines)


_explanation_formatter = ValidationExplanationFormatter()
_suggestion_formatter = FixSuggestionFormatter()


def get_validation_explanation(result: ValidationResult) -> str:
    """Explain a validation result (see ValidationExplanationFormatter)."""
    return _explanation_formatter.format(result)


def suggest_fixes(
    result: ValidationResult, config: Configuration | None = None
) -> list[str]:
    """List corrective actions for a validation result.

    Args:
        result: The validation result
        config: The configuration that produced ``result``. Accepted for
            callers that pass both; suggestions depend on the result only.

    Returns:
        One suggestion per violated rule that declares an alternative.
    """
    return _suggestion_formatter.format(result)
