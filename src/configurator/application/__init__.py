"""Application layer - session orchestration, documents and function calls."""

from .function_calls import (
    ConfigurationChange,
    FunctionCall,
    FunctionCallOutcome,
    execute_config_changes,
    execute_function_call,
    execute_function_calls,
)
from .session import ConfiguratorSession

__all__ = [
    "ConfigurationChange",
    "ConfiguratorSession",
    "FunctionCall",
    "FunctionCallOutcome",
    "execute_config_changes",
    "execute_function_call",
    "execute_function_calls",
]
