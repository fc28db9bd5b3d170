"""Configuration document loader with comprehensive error handling.

This module loads configuration documents from JSON files or dictionaries.
It handles file system errors, JSON parsing errors and Pydantic validation
errors, and reports all of them through a single ConfigError type with
clear, actionable messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from configurator.application.config.schema import ConfigurationDocument


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation, unknown_option)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, field
            errors with path/message/value otherwise)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("interior", "trim"))
        'interior.trim'
        >>> _format_json_path(("changes", 0, "field"))
        'changes[0].field'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def format_error_details(headline: str, details: list[dict[str, Any]]) -> str:
    """Format error details into a human-readable multi-line message."""
    lines = [headline]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_config(path: Path) -> ConfigurationDocument:
    """Load and validate a configuration document from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated ConfigurationDocument

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     doc = load_config(Path("my-m5.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
            details=[{"path": "", "message": "Expected a JSON object", "value": None}],
        )

    try:
        return load_config_from_dict(data)
    except ConfigError as e:
        e.path = path
        raise


def load_config_from_dict(data: dict[str, Any]) -> ConfigurationDocument:
    """Load and validate a configuration document from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return ConfigurationDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=format_error_details("Configuration validation failed:", details),
            error_type="validation",
            details=details,
        )
