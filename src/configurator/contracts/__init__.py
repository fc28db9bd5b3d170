"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the
application layer stays loosely coupled and testable.

Example:
    ```python
    from configurator.contracts import ExplanationFormatterProtocol

    def render(formatter: ExplanationFormatterProtocol, result) -> str:
        return formatter.format(result)
    ```
"""

# Formatter protocols
from .formatters import (
    ExplanationFormatterProtocol as ExplanationFormatterProtocol,
    SuggestionFormatterProtocol as SuggestionFormatterProtocol,
)

# Validation engine protocol
from .validators import ValidationEngineProtocol as ValidationEngineProtocol
