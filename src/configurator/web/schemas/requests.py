"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from configurator.application.function_calls import ConfigurationChange, FunctionCall


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration document."""

    config: dict[str, Any] = Field(..., description="Configuration document JSON")


class FunctionCallsRequest(BaseModel):
    """Assistant output to apply to the session.

    Named calls are executed first, then structured changes; later values win.
    """

    calls: list[FunctionCall] = Field(
        default_factory=list, description="Named function calls, in order"
    )
    changes: list[ConfigurationChange] = Field(
        default_factory=list, description="Structured field changes, in order"
    )
