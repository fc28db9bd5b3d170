"""Rule record shared by the rule library and the validation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from configurator.domain.value_objects import RuleCategory, Severity

if TYPE_CHECKING:
    from configurator.domain.entities import Configuration


@dataclass(frozen=True)
class Rule:
    """Declarative compatibility rule.

    The predicate encodes the PROBLEM condition: it returns True when the
    configuration violates the rule. It must be pure, reading only the
    configuration and static catalog data.

    Attributes:
        id: Unique identifier (e.g. "M5_REQUIRES_M_WHEELS")
        description: Short documentation of the constraint
        predicate: Returns True if the configuration violates the rule
        message: Human-readable explanation shown to the customer
        severity: BLOCK makes the configuration unsellable, WARN is advisory
        category: Grouping tag, also selects the fix-suggestion wording
        suggested_alternative: Identifier that would resolve the violation,
            scoped to a dimension implied by the category
    """

    id: str
    description: str
    predicate: Callable[["Configuration"], bool]
    message: str
    severity: Severity
    category: RuleCategory
    suggested_alternative: str | None = None

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.BLOCK

    def is_violated_by(self, config: "Configuration") -> bool:
        """Evaluate the rule. True means the rule is violated."""
        return bool(self.predicate(config))
