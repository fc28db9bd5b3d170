"""Configurator session.

The session is the single owner of the current configuration and of the
validation result derived from it. Every transition builds a new
configuration with ``with_updates`` and then revalidates explicitly, so the
stored result always matches the stored configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from configurator.application.config.adapter import update_to_fields
from configurator.application.config.schema import ConfigurationUpdate
from configurator.application.function_calls import (
    ConfigurationChange,
    FunctionCall,
    FunctionCallOutcome,
    execute_config_changes,
    execute_function_calls,
)
from configurator.contracts import (
    ExplanationFormatterProtocol,
    SuggestionFormatterProtocol,
    ValidationEngineProtocol,
)
from configurator.domain.catalog import find_option
from configurator.domain.entities import (
    Configuration,
    InteriorConfig,
    default_configuration,
    with_updates,
)
from configurator.domain.services.validation import ValidationEngine, ValidationResult
from configurator.domain.value_objects import (
    BrakeTier,
    Dimension,
    InteriorColor,
    InteriorTrim,
    LeatherType,
    PerformancePackage,
)
from configurator.infrastructure.formatters import (
    FixSuggestionFormatter,
    ValidationExplanationFormatter,
)

logger = logging.getLogger(__name__)


class ConfiguratorSession:
    """Holds one customer's configuration and its current validation.

    Example:
        session = ConfiguratorSession()
        session.set_wheels("standard-19")
        assert not session.validation.is_valid
        print(session.explain())
    """

    def __init__(
        self,
        engine: ValidationEngineProtocol | None = None,
        initial: Configuration | None = None,
        explainer: ExplanationFormatterProtocol | None = None,
        suggester: SuggestionFormatterProtocol | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            engine: Validation engine. Defaults to one over the shipped rule set.
            initial: Starting configuration. Defaults to the shipped baseline.
            explainer: Formatter used by explain().
            suggester: Formatter used by suggest_fixes().
        """
        self._engine = engine or ValidationEngine()
        self._explainer = explainer or ValidationExplanationFormatter()
        self._suggester = suggester or FixSuggestionFormatter()
        self._configuration = initial or default_configuration()
        self._validation = self._engine.validate(self._configuration)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def validation(self) -> ValidationResult:
        """Validation result for the current configuration."""
        return self._validation

    def _transition(self, fields: Mapping[str, Any]) -> ValidationResult:
        if fields:
            self._configuration = with_updates(self._configuration, fields)
            logger.debug(f"Configuration updated: {sorted(fields)}")
        self._validation = self._engine.validate(self._configuration)
        logger.debug(
            f"Revalidated: valid={self._validation.is_valid}, "
            f"{len(self._validation.blockers)} blocker(s), "
            f"{len(self._validation.warnings)} warning(s)"
        )
        return self._validation

    def update(self, **fields: Any) -> ValidationResult:
        """Replace configuration fields with already-resolved values.

        Raises:
            TypeError: If a field name is not a Configuration field.
        """
        return self._transition(fields)

    def _set_option(self, dimension: Dimension, option_id: str) -> bool:
        option = find_option(dimension, option_id)
        if option is None:
            logger.debug(f"Ignoring unknown {dimension.value} option '{option_id}'")
            return False
        self._transition({dimension.value: option})
        return True

    def set_color(self, color_id: str) -> bool:
        """Select a paint by id. Returns False (and changes nothing) if unknown."""
        return self._set_option(Dimension.COLOR, color_id)

    def set_wheels(self, wheel_id: str) -> bool:
        """Select a wheel set by id. Returns False (and changes nothing) if unknown."""
        return self._set_option(Dimension.WHEELS, wheel_id)

    def set_grille(self, grille_id: str) -> bool:
        return self._set_option(Dimension.GRILLE, grille_id)

    def set_hood_pattern(self, pattern_id: str) -> bool:
        return self._set_option(Dimension.HOOD_PATTERN, pattern_id)

    def set_interior(
        self,
        leather: LeatherType | None = None,
        color: InteriorColor | None = None,
        trim: InteriorTrim | None = None,
    ) -> ValidationResult:
        """Merge the given interior selections into the current interior."""
        current = self._configuration.interior
        interior = InteriorConfig(
            leather=LeatherType(leather) if leather is not None else current.leather,
            color=InteriorColor(color) if color is not None else current.color,
            trim=InteriorTrim(trim) if trim is not None else current.trim,
        )
        return self._transition({"interior": interior})

    def set_performance_package(self, package: PerformancePackage) -> ValidationResult:
        return self._transition({"performance_package": PerformancePackage(package)})

    def set_brakes(self, brakes: BrakeTier) -> ValidationResult:
        return self._transition({"brakes": BrakeTier(brakes)})

    def apply_update(self, update: ConfigurationUpdate) -> ValidationResult:
        """Apply a partial update document; unknown catalog ids are skipped."""
        return self._transition(update_to_fields(update, self._configuration))

    def apply_function_calls(self, calls: Sequence[FunctionCall]) -> FunctionCallOutcome:
        """Execute assistant function calls, merge their updates and revalidate once."""
        outcome = execute_function_calls(calls, self._configuration)
        self._transition(outcome.config_update)
        return outcome

    def apply_config_changes(self, changes: Sequence[ConfigurationChange]) -> ValidationResult:
        """Apply structured assistant changes and revalidate once."""
        return self._transition(execute_config_changes(changes, self._configuration))

    def reset(self) -> ValidationResult:
        """Return to the shipped baseline configuration."""
        self._configuration = default_configuration()
        logger.debug("Configuration reset to default")
        return self._transition({})

    def explain(self) -> str:
        """Explain the current validation result in prose."""
        return self._explainer.format(self._validation)

    def suggest_fixes(self) -> list[str]:
        """List corrective actions for the current validation result."""
        return self._suggester.format(self._validation)
