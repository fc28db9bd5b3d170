"""Configuration validation endpoints."""

from fastapi import APIRouter

from configurator.application.config import (
    document_to_configuration,
    load_config_from_dict,
)
from configurator.domain.rules import Rule
from configurator.domain.services.validation import (
    ValidationResult,
    validate_configuration,
)
from configurator.infrastructure.formatters import (
    get_validation_explanation,
    suggest_fixes,
)
from configurator.web.schemas.requests import ConfigValidateRequest
from configurator.web.schemas.responses import RuleSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


def rule_to_schema(rule: Rule) -> RuleSchema:
    """Convert a domain Rule to its response schema."""
    return RuleSchema(
        id=rule.id,
        description=rule.description,
        message=rule.message,
        severity=rule.severity.value,
        category=rule.category.value,
        suggested_alternative=rule.suggested_alternative,
    )


def result_to_schema(result: ValidationResult) -> ValidationResultSchema:
    """Convert a ValidationResult, with explanation and suggestions, to a schema."""
    return ValidationResultSchema(
        is_valid=result.is_valid,
        blockers=[rule_to_schema(r) for r in result.blockers],
        warnings=[rule_to_schema(r) for r in result.warnings],
        total_violations=result.total_violations,
        explanation=get_validation_explanation(result),
        suggestions=suggest_fixes(result),
    )


@router.post("", response_model=ValidationResultSchema)
async def validate_document(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a configuration document.

    Args:
        request: Request containing the configuration document.

    Returns:
        Validation verdict with explanation and suggestions.

    Raises:
        ConfigError: If the document is malformed or references unknown
            options (handled by exception handler).
    """
    config = document_to_configuration(load_config_from_dict(request.config))
    return result_to_schema(validate_configuration(config))
