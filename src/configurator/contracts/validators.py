"""Validation engine protocol.

This module defines the protocol that rule evaluators implement, so the
application layer can be handed an alternative engine (for instance one
built over a reduced rule set in tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from configurator.domain.entities import Configuration
    from configurator.domain.services.validation import ValidationResult


@runtime_checkable
class ValidationEngineProtocol(Protocol):
    """Protocol for configuration validation engines.

    Implementations must be pure: no state is carried between calls and the
    result depends only on the configuration passed in.

    Example:
        class AlwaysValid:
            def validate(self, config: Configuration) -> ValidationResult:
                return ValidationResult(is_valid=True)
    """

    def validate(self, config: Configuration) -> ValidationResult:
        """Validate the given configuration.

        Args:
            config: A complete Configuration.

        Returns:
            ValidationResult with blockers and warnings.
        """
        ...
