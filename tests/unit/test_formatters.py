"""Unit tests for the explanation, suggestion, summary and rule formatters."""

from configurator.domain.catalog import find_option
from configurator.domain.entities import Configuration, with_updates
from configurator.domain.rules import RULE_SET, Rule, get_rule
from configurator.domain.services import ValidationResult, validate_configuration
from configurator.domain.value_objects import (
    Dimension,
    ModelVariant,
    RuleCategory,
    Severity,
    SoundSystem,
)
from configurator.infrastructure import (
    ConfigurationSummaryFormatter,
    FixSuggestionFormatter,
    RuleTableFormatter,
    ValidationExplanationFormatter,
    get_validation_explanation,
    suggest_fixes,
)
from configurator.infrastructure.formatters import (
    BLOCKERS_HEADER,
    VALID_SENTENCE,
    WARNINGS_HEADER,
)


def _result(*rules: Rule) -> ValidationResult:
    blockers = tuple(r for r in rules if r.is_blocking)
    warnings = tuple(r for r in rules if not r.is_blocking)
    return ValidationResult(
        is_valid=not blockers,
        blockers=blockers,
        warnings=warnings,
        total_violations=len(rules),
    )


class TestValidationExplanation:
    """Tests for get_validation_explanation."""

    def test_clean_result(self) -> None:
        """A clean result yields the fixed sentence."""
        assert get_validation_explanation(ValidationResult(is_valid=True)) == VALID_SENTENCE

    def test_clean_result_independent_of_configuration(
        self, default_config: Configuration
    ) -> None:
        """Any clean configuration is explained identically."""
        other = with_updates(
            default_config,
            {"model": ModelVariant.SERIES_5, "sound": SoundSystem.STANDARD},
        )
        assert get_validation_explanation(validate_configuration(other)) == VALID_SENTENCE

    def test_blockers_only(self) -> None:
        """Blockers are listed under the blocker header."""
        rule = get_rule("M5_REQUIRES_M_WHEELS")
        text = get_validation_explanation(_result(rule))
        assert text == f"{BLOCKERS_HEADER}\n- {rule.message}"

    def test_warnings_only(self) -> None:
        """Warnings alone have no leading blank line."""
        rule = get_rule("HARMAN_KARDON_MIN")
        text = get_validation_explanation(_result(rule))
        assert text == f"{WARNINGS_HEADER}\n- {rule.message}"

    def test_blockers_and_warnings(self) -> None:
        """Blockers come first, separated from warnings by a blank line."""
        blocker = get_rule("FROZEN_COLOR_M5")
        warning = get_rule("CARBON_TRIM_PERFORMANCE")
        lines = get_validation_explanation(_result(blocker, warning)).split("\n")
        assert lines == [
            BLOCKERS_HEADER,
            f"- {blocker.message}",
            "",
            WARNINGS_HEADER,
            f"- {warning.message}",
        ]

    def test_every_message_included(self) -> None:
        """Every violated rule's message appears."""
        text = ValidationExplanationFormatter().format(_result(*RULE_SET))
        for rule in RULE_SET:
            assert rule.message in text


class TestFixSuggestions:
    """Tests for suggest_fixes."""

    def test_no_violations(self) -> None:
        """No violations, no suggestions."""
        assert suggest_fixes(ValidationResult(is_valid=True)) == []

    def test_every_shipped_rule(self) -> None:
        """Each shipped rule resolves to a named alternative."""
        suggestions = suggest_fixes(_result(*RULE_SET))
        assert suggestions == [
            'Change wheels to: M Double-Spoke 20"',
            'Change wheels to: M Star-Spoke 21"',
            "Add performance package: M Performance",
            "Change color to: Sapphire Black Metallic",
            "Change interior to: Vernasca",
            "Change interior to: Aluminium Rhombicle",
            "Add equipment: BMW Laserlight",
            "Add equipment: Harman Kardon",
        ]

    def test_rule_without_alternative_is_omitted(self) -> None:
        """Rules without an alternative contribute nothing."""
        rule = Rule(
            id="NO_FIX",
            description="No fix",
            predicate=lambda config: True,
            message="No fix.",
            severity=Severity.BLOCK,
            category=RuleCategory.WHEELS,
        )
        assert suggest_fixes(_result(rule)) == []

    def test_unresolvable_alternative_echoes_id(self) -> None:
        """An alternative the catalog does not know is echoed verbatim."""
        rule = Rule(
            id="MYSTERY",
            description="Mystery",
            predicate=lambda config: True,
            message="Mystery.",
            severity=Severity.WARN,
            category=RuleCategory.WHEELS,
            suggested_alternative="gold-24",
        )
        assert FixSuggestionFormatter().suggest(rule) == "Change wheels to: gold-24"

    def test_suggested_wheel_resolves(self) -> None:
        """The M5 wheel suggestion resolves to a declared M wheel."""
        rule = get_rule("M5_REQUIRES_M_WHEELS")
        wheel = find_option(Dimension.WHEELS, rule.suggested_alternative)
        assert wheel is not None
        assert FixSuggestionFormatter.resolve_name(rule) == wheel.name


class TestSummaryFormatter:
    """Tests for ConfigurationSummaryFormatter."""

    def test_summary(self, default_config: Configuration) -> None:
        """The summary lists every selection and the option price."""
        text = ConfigurationSummaryFormatter().format(default_config)
        assert text.startswith("CONFIGURATION SUMMARY")
        assert "BMW M5" in text
        assert "Sapphire Black Metallic (metallic)" in text
        assert "BMW Laserlight" in text
        assert "Merino" in text
        assert text.splitlines()[-1].endswith("3,000 EUR")


class TestRuleTableFormatter:
    """Tests for RuleTableFormatter."""

    def test_lists_every_rule(self) -> None:
        """Every rule id appears in the table."""
        text = RuleTableFormatter().format(RULE_SET)
        assert text.startswith("RULES")
        for rule in RULE_SET:
            assert rule.id in text

    def test_empty(self) -> None:
        """An empty rule set has a placeholder."""
        assert RuleTableFormatter().format(()) == "No rules defined."
