"""Configuration document schema and loading.

This package provides JSON-based loading and validation of configuration
documents, and conversion between documents and domain configurations.

Public API:
    - ConfigurationDocument: Root document model
    - ConfigurationUpdate: Partial update model
    - InteriorSchema / InteriorUpdateSchema: Interior selections
    - load_config: Load a document from a JSON file
    - load_config_from_dict: Load a document from a dictionary
    - ConfigError: Exception for configuration errors
    - document_to_configuration / configuration_to_document: Conversion
    - update_to_fields: Resolve a partial update against a configuration

Example:
    >>> from pathlib import Path
    >>> from configurator.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     doc = load_config(Path("my-m5.json"))
    ...     config = document_to_configuration(doc)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from configurator.application.config.adapter import (
    configuration_to_document,
    document_to_configuration,
    update_to_fields,
)
from configurator.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from configurator.application.config.schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    ConfigurationDocument,
    ConfigurationUpdate,
    InteriorSchema,
    InteriorUpdateSchema,
)

__all__ = [
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ConfigurationDocument",
    "ConfigurationUpdate",
    "InteriorSchema",
    "InteriorUpdateSchema",
    "configuration_to_document",
    "document_to_configuration",
    "load_config",
    "load_config_from_dict",
    "update_to_fields",
]
