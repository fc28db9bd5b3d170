"""Pydantic response schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from configurator.application.config import ConfigurationDocument


class RuleSchema(BaseModel):
    """A configuration rule."""

    id: str = Field(..., description="Stable rule identifier")
    description: str = Field(..., description="What the rule checks")
    message: str = Field(..., description="Message shown when the rule is violated")
    severity: Literal["block", "warn"] = Field(..., description="Rule severity")
    category: str = Field(..., description="Rule category")
    suggested_alternative: str | None = Field(
        default=None, description="Option id or mode value that resolves the violation"
    )


class RuleListSchema(BaseModel):
    """Response listing the rule set."""

    rules: list[RuleSchema] = Field(default_factory=list, description="Rules in order")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the configuration can be ordered")
    blockers: list[RuleSchema] = Field(
        default_factory=list, description="Violated blocking rules"
    )
    warnings: list[RuleSchema] = Field(
        default_factory=list, description="Violated advisory rules"
    )
    total_violations: int = Field(..., description="Blockers plus warnings")
    explanation: str = Field(..., description="Prose explanation of the verdict")
    suggestions: list[str] = Field(
        default_factory=list, description="Suggested corrective actions"
    )


class OptionValueSchema(BaseModel):
    """A selectable value of a dimension."""

    id: str = Field(..., description="Option id or mode value")
    name: str = Field(..., description="Display name")
    classification: str | None = Field(
        default=None, description="Catalog classification (catalog dimensions only)"
    )
    price: int = Field(default=0, description="Price increment in EUR")


class DimensionOptionsSchema(BaseModel):
    """Selectable values of one dimension."""

    dimension: str = Field(..., description="Dimension name")
    kind: Literal["catalog", "mode"] = Field(..., description="Value source")
    options: list[OptionValueSchema] = Field(
        default_factory=list, description="Values in declaration order"
    )


class OptionsListSchema(BaseModel):
    """Response listing every dimension."""

    dimensions: list[DimensionOptionsSchema] = Field(default_factory=list)


class SessionStateSchema(BaseModel):
    """Current state of the configurator session."""

    configuration: ConfigurationDocument = Field(..., description="Current configuration")
    option_price: int = Field(..., description="Sum of selected option prices in EUR")
    validation: ValidationResultSchema = Field(..., description="Current validation")


class FunctionCallsResultSchema(BaseModel):
    """Response for applying assistant function calls."""

    updated_fields: list[str] = Field(
        default_factory=list, description="Configuration fields that were replaced"
    )
    show_validation: bool = Field(
        default=False, description="Whether the assistant asked to show validation"
    )
    session: SessionStateSchema = Field(..., description="Session state after the update")


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
