"""Conversion between configuration documents and domain configurations.

Documents reference catalog selections by identifier. Converting a whole
document treats an undeclared identifier as an error, since a file or API
payload naming a missing option cannot be turned into a complete
configuration. Converting a partial update instead drops undeclared
identifiers so the previous selection is retained.
"""

from __future__ import annotations

import logging
from typing import Any

from configurator.application.config.loader import ConfigError, format_error_details
from configurator.application.config.schema import (
    CURRENT_VERSION,
    ConfigurationDocument,
    ConfigurationUpdate,
    InteriorSchema,
)
from configurator.domain.catalog import find_option
from configurator.domain.entities import Configuration, InteriorConfig
from configurator.domain.value_objects import Dimension

logger = logging.getLogger(__name__)

# Document fields holding catalog identifiers
CATALOG_FIELDS: dict[str, Dimension] = {
    "color": Dimension.COLOR,
    "wheels": Dimension.WHEELS,
    "grille": Dimension.GRILLE,
    "hood_pattern": Dimension.HOOD_PATTERN,
}

MODE_FIELDS: tuple[str, ...] = (
    "model",
    "performance_package",
    "brakes",
    "lights",
    "sound",
    "driving_assistant",
)


def document_to_configuration(doc: ConfigurationDocument) -> Configuration:
    """Resolve a configuration document into a domain Configuration.

    Args:
        doc: A validated ConfigurationDocument

    Returns:
        The complete Configuration.

    Raises:
        ConfigError: With error_type "unknown_option" if any catalog
            identifier is not declared. All misses are reported at once.
    """
    resolved: dict[str, Any] = {}
    details: list[dict[str, Any]] = []

    for field_name, dimension in CATALOG_FIELDS.items():
        option_id = getattr(doc, field_name)
        option = find_option(dimension, option_id)
        if option is None:
            details.append(
                {
                    "path": field_name,
                    "message": f"Unknown {dimension.value} option",
                    "value": option_id,
                }
            )
        else:
            resolved[field_name] = option

    if details:
        raise ConfigError(
            message=format_error_details("Configuration references unknown options:", details),
            error_type="unknown_option",
            details=details,
        )

    return Configuration(
        model=doc.model,
        performance_package=doc.performance_package,
        brakes=doc.brakes,
        interior=InteriorConfig(
            leather=doc.interior.leather,
            color=doc.interior.color,
            trim=doc.interior.trim,
        ),
        lights=doc.lights,
        sound=doc.sound,
        driving_assistant=doc.driving_assistant,
        **resolved,
    )


def configuration_to_document(config: Configuration) -> ConfigurationDocument:
    """Serialize a Configuration into a document referencing ids."""
    return ConfigurationDocument(
        schema_version=CURRENT_VERSION,
        model=config.model,
        performance_package=config.performance_package,
        color=config.color.id,
        wheels=config.wheels.id,
        brakes=config.brakes,
        interior=InteriorSchema(
            leather=config.interior.leather,
            color=config.interior.color,
            trim=config.interior.trim,
        ),
        lights=config.lights,
        sound=config.sound,
        driving_assistant=config.driving_assistant,
        grille=config.grille.id,
        hood_pattern=config.hood_pattern.id,
    )


def update_to_fields(update: ConfigurationUpdate, current: Configuration) -> dict[str, Any]:
    """Translate a partial update into Configuration field replacements.

    Catalog identifiers that do not resolve are left out, so applying the
    result keeps the current selection for that dimension. Interior updates
    are merged into the current interior.

    Args:
        update: The partial update
        current: Configuration the update applies to

    Returns:
        Field name to new value, suitable for ``with_updates``.
    """
    fields: dict[str, Any] = {}

    for field_name in MODE_FIELDS:
        value = getattr(update, field_name)
        if value is not None:
            fields[field_name] = value

    for field_name, dimension in CATALOG_FIELDS.items():
        option_id = getattr(update, field_name)
        if option_id is None:
            continue
        option = find_option(dimension, option_id)
        if option is None:
            logger.debug(f"Ignoring unknown {dimension.value} option '{option_id}'")
            continue
        fields[field_name] = option

    if update.interior is not None:
        interior = update.interior
        fields["interior"] = InteriorConfig(
            leather=interior.leather or current.interior.leather,
            color=interior.color or current.interior.color,
            trim=interior.trim or current.interior.trim,
        )

    return fields
