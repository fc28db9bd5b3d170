"""Validation engine.

Evaluates every rule of a rule set against one configuration and aggregates
the triggered rules into a ``ValidationResult``. The engine holds no state
between calls: identical input always yields an identical result, so callers
can re-run it after every single configuration change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from configurator.domain.rules import RULE_SET, Rule
from configurator.domain.value_objects import Severity

if TYPE_CHECKING:
    from configurator.domain.entities import Configuration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Aggregate verdict for one configuration.

    A result is derived data: it is recomputed in full on every configuration
    change and is never patched incrementally.

    Attributes:
        is_valid: True iff no blocking rule is violated
        blockers: Violated BLOCK rules, in rule-set order
        warnings: Violated WARN rules, in rule-set order
        total_violations: len(blockers) + len(warnings)
    """

    is_valid: bool
    blockers: tuple[Rule, ...] = ()
    warnings: tuple[Rule, ...] = ()
    total_violations: int = 0

    @property
    def has_warnings(self) -> bool:
        """Check if any advisory rule is violated."""
        return len(self.warnings) > 0

    @property
    def violations(self) -> tuple[Rule, ...]:
        """Blockers followed by warnings."""
        return self.blockers + self.warnings

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are blockers
            2 if valid but has warnings
        """
        if self.blockers:
            return 1
        if self.warnings:
            return 2
        return 0


class ValidationEngine:
    """Stateless evaluator for an ordered rule set.

    Example:
        engine = ValidationEngine()
        result = engine.validate(default_configuration())
        assert result.is_valid
    """

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        """Initialize the engine.

        Args:
            rules: Rules to evaluate, in reporting order. Defaults to the
                shipped RULE_SET.
        """
        self._rules: tuple[Rule, ...] = tuple(RULE_SET if rules is None else rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, config: Configuration) -> ValidationResult:
        """Evaluate every rule against ``config``.

        Args:
            config: A structurally complete configuration

        Returns:
            ValidationResult with triggered rules partitioned by severity.
        """
        blockers: list[Rule] = []
        warnings: list[Rule] = []

        for rule in self._rules:
            if not rule.is_violated_by(config):
                continue
            logger.debug(f"Rule '{rule.id}' triggered ({rule.severity.value})")
            if rule.severity == Severity.BLOCK:
                blockers.append(rule)
            else:
                warnings.append(rule)

        return ValidationResult(
            is_valid=len(blockers) == 0,
            blockers=tuple(blockers),
            warnings=tuple(warnings),
            total_violations=len(blockers) + len(warnings),
        )


_default_engine = ValidationEngine()


def validate_configuration(config: Configuration) -> ValidationResult:
    """Validate a configuration against the shipped rule set."""
    return _default_engine.validate(config)
