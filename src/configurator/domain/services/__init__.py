"""Domain services."""

from .validation import ValidationEngine, ValidationResult, validate_configuration

__all__ = [
    "ValidationEngine",
    "ValidationResult",
    "validate_configuration",
]
