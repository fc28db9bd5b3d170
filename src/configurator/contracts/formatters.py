"""Formatter protocols for output generation.

This module defines protocol classes for formatters that turn validation
results and configurations into human-readable text for the chat, CLI and
REST layers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from configurator.domain.services.validation import ValidationResult


class ExplanationFormatterProtocol(Protocol):
    """Protocol for explaining a validation result in prose.

    Example:
        ```python
        class ValidationExplanationFormatter:
            def format(self, result: ValidationResult) -> str:
                ...
        ```
    """

    def format(self, result: ValidationResult) -> str:
        """Explain why a configuration is (not) orderable.

        Args:
            result: The validation result to explain.

        Returns:
            Multi-line explanation text.
        """
        ...


class SuggestionFormatterProtocol(Protocol):
    """Protocol for turning violations into corrective actions."""

    def format(self, result: ValidationResult) -> list[str]:
        """List one suggestion per violated rule that declares an alternative.

        Args:
            result: The validation result to derive suggestions from.

        Returns:
            Suggestion strings, blockers first.
        """
        ...

