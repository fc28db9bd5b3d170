"""The shipped, ordered rule set.

Rules are authored here as static data. Declaration order only determines
the order in which violations are reported; it never affects validity.
There is no runtime mechanism to add or remove rules.
"""

from __future__ import annotations

from configurator.domain.value_objects import RuleCategory, Severity

from . import library as rules_lib
from .base import Rule

RULE_SET: tuple[Rule, ...] = (
    # ---------- Wheels ----------
    Rule(
        id="M5_REQUIRES_M_WHEELS",
        description="The M5 requires M Sport wheels",
        predicate=rules_lib.m5_without_m_wheels,
        message=(
            "The BMW M5 requires M Sport wheels. Standard alloy wheels are not "
            "available for this high-performance vehicle."
        ),
        severity=Severity.BLOCK,
        category=RuleCategory.WHEELS,
        suggested_alternative="m-double-spoke-20",
    ),
    Rule(
        id="M_COMPETITION_21_INCH",
        description="The M Competition package requires 21 inch wheels",
        predicate=rules_lib.competition_without_21_inch,
        message=(
            "The M Competition package is only compatible with 21 inch wheels "
            "for optimal braking performance."
        ),
        severity=Severity.BLOCK,
        category=RuleCategory.WHEELS,
        suggested_alternative="m-star-spoke-21",
    ),
    # ---------- Brakes ----------
    Rule(
        id="CERAMIC_BRAKES_PERFORMANCE",
        description="Ceramic brakes require a performance package",
        predicate=rules_lib.ceramic_brakes_without_package,
        message=(
            "M Carbon ceramic brakes are only available in combination with an "
            "M performance package."
        ),
        severity=Severity.BLOCK,
        category=RuleCategory.BRAKES,
        suggested_alternative="performance",
    ),
    # ---------- Color ----------
    Rule(
        id="FROZEN_COLOR_M5",
        description="Individual and Frozen paints are exclusive to the M5",
        predicate=rules_lib.exclusive_color_without_m5,
        message="BMW Individual and Frozen paints are exclusively available for the BMW M5.",
        severity=Severity.BLOCK,
        category=RuleCategory.COLOR,
        suggested_alternative="sapphire-black",
    ),
    # ---------- Interior ----------
    Rule(
        id="MERINO_LEATHER_M5",
        description="Extended Merino leather requires the M5",
        predicate=rules_lib.extended_merino_without_m5,
        message="Extended Merino leather is an exclusive feature of the BMW M5.",
        severity=Severity.BLOCK,
        category=RuleCategory.INTERIOR,
        suggested_alternative="vernasca",
    ),
    Rule(
        id="CARBON_TRIM_PERFORMANCE",
        description="Carbon interior trim requires a performance package",
        predicate=rules_lib.carbon_trim_without_package,
        message="The M Carbon interior trim is only offered with a performance package.",
        severity=Severity.WARN,
        category=RuleCategory.INTERIOR,
        suggested_alternative="aluminum",
    ),
    # ---------- Tech ----------
    Rule(
        id="DRIVING_ASSIST_PRO_LASER",
        description="Driving Assistant Professional requires laser lights",
        predicate=rules_lib.assistant_pro_without_laser,
        message=(
            "Driving Assistant Professional uses the laser light system for "
            "optimal functionality."
        ),
        severity=Severity.WARN,
        category=RuleCategory.TECH,
        suggested_alternative="laser",
    ),
    Rule(
        id="HARMAN_KARDON_MIN",
        description="The M5 includes at least Harman Kardon sound",
        predicate=rules_lib.m5_with_standard_sound,
        message="The BMW M5 comes with the Harman Kardon surround sound system as standard.",
        severity=Severity.WARN,
        category=RuleCategory.TECH,
        suggested_alternative="harman-kardon",
    ),
)


def _validate_unique_ids(rules: tuple[Rule, ...]) -> None:
    """Raise ValueError if two rules share an id."""
    seen: set[str] = set()
    for rule in rules:
        if rule.id in seen:
            raise ValueError(f"Duplicate rule id '{rule.id}'")
        seen.add(rule.id)


_validate_unique_ids(RULE_SET)

# Map stable rule IDs -> rule
RULES: dict[str, Rule] = {rule.id: rule for rule in RULE_SET}


def get_rule(rule_id: str) -> Rule:
    """Get a rule by id.

    Raises:
        KeyError: If no rule has that id.
    """
    if rule_id not in RULES:
        available = ", ".join(RULES)
        raise KeyError(f"No rule with id '{rule_id}'. Available rules: {available}")
    return RULES[rule_id]


def list_rule_ids() -> list[str]:
    """Return the stable IDs of all rules in declaration order."""
    return [rule.id for rule in RULE_SET]
