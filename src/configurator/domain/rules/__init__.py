"""Rule set: declarative compatibility rules over a Configuration.

- Rule: immutable rule record (predicate true means violated)
- library: one named pure predicate per rule
- registry: the ordered RULE_SET and id lookups
"""

from .base import Rule
from .registry import RULE_SET, RULES, get_rule, list_rule_ids

__all__ = [
    "Rule",
    "RULE_SET",
    "RULES",
    "get_rule",
    "list_rule_ids",
]
