"""Pydantic schemas for the REST API."""

from configurator.web.schemas.requests import (
    ConfigValidateRequest,
    FunctionCallsRequest,
)
from configurator.web.schemas.responses import (
    DimensionOptionsSchema,
    ErrorResponseSchema,
    FunctionCallsResultSchema,
    OptionsListSchema,
    OptionValueSchema,
    RuleListSchema,
    RuleSchema,
    SessionStateSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "FunctionCallsRequest",
    # Responses
    "DimensionOptionsSchema",
    "ErrorResponseSchema",
    "FunctionCallsResultSchema",
    "OptionValueSchema",
    "OptionsListSchema",
    "RuleListSchema",
    "RuleSchema",
    "SessionStateSchema",
    "ValidationResultSchema",
]
