"""Unit tests for configuration documents: schema, loader and adapter."""

import json
from pathlib import Path

import pytest

from configurator.application.config import (
    CURRENT_VERSION,
    ConfigError,
    ConfigurationDocument,
    ConfigurationUpdate,
    InteriorUpdateSchema,
    configuration_to_document,
    document_to_configuration,
    load_config,
    load_config_from_dict,
    update_to_fields,
)
from configurator.domain.entities import Configuration, default_configuration
from configurator.domain.value_objects import (
    InteriorColor,
    InteriorTrim,
    LeatherType,
    LightType,
    ModelVariant,
)


def _write(tmp_path: Path, data: object, name: str = "config.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


class TestConfigurationDocument:
    """Tests for the document schema."""

    def test_minimal_document_is_baseline(self) -> None:
        """A document with only a version resolves to the baseline."""
        doc = load_config_from_dict({"schema_version": "1.0"})
        assert document_to_configuration(doc) == default_configuration()

    def test_enum_values_parsed(self) -> None:
        """Closed-set values are parsed into enums."""
        doc = load_config_from_dict(
            {"schema_version": "1.0", "model": "5-series", "lights": "led"}
        )
        assert doc.model == ModelVariant.SERIES_5
        assert doc.lights == LightType.LED

    def test_missing_version(self) -> None:
        """schema_version is required."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_newer_minor_version_accepted(self) -> None:
        """Newer minor versions of a supported major are accepted."""
        assert load_config_from_dict({"schema_version": "1.3"}).schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        """Unsupported major versions are rejected."""
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_config_from_dict({"schema_version": "2.0"})

    def test_unknown_field_rejected(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "spoiler": "big"})
        assert exc_info.value.details[0]["path"] == "spoiler"

    def test_value_outside_closed_set(self) -> None:
        """Values outside a closed set are rejected with their path."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": "1.0", "interior": {"trim": "marble"}}
            )
        detail = exc_info.value.details[0]
        assert detail["path"] == "interior.trim"
        assert detail["value"] == "marble"


class TestLoadConfig:
    """Tests for loading documents from files."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        """A valid file loads into a document."""
        path = _write(tmp_path, {"schema_version": "1.0", "wheels": "m-y-spoke-21"})
        assert load_config(path).wheels == "m-y-spoke-21"

    def test_file_not_found(self, tmp_path: Path) -> None:
        """Missing files raise file_not_found."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises json_parse with line and column."""
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": ')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_non_object_json(self, tmp_path: Path) -> None:
        """Top-level JSON must be an object."""
        path = _write(tmp_path, ["schema_version"])
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"

    def test_validation_error_carries_path(self, tmp_path: Path) -> None:
        """Validation errors from files carry the file path."""
        path = _write(tmp_path, {"schema_version": "1.0", "sound": "mono"})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.path == path


class TestAdapter:
    """Tests for document and configuration conversion."""

    def test_unknown_option_reports_all(self) -> None:
        """Every unknown id is reported in one error."""
        doc = ConfigurationDocument(
            schema_version="1.0", color="rainbow", wheels="imaginary-22"
        )
        with pytest.raises(ConfigError) as exc_info:
            document_to_configuration(doc)
        error = exc_info.value
        assert error.error_type == "unknown_option"
        assert [d["path"] for d in error.details] == ["color", "wheels"]
        assert "rainbow" in str(error)

    def test_configuration_round_trip(self, default_config: Configuration) -> None:
        """A configuration survives conversion to a document and back."""
        doc = configuration_to_document(default_config)
        assert doc.schema_version == CURRENT_VERSION
        assert doc.color == "sapphire-black"
        assert document_to_configuration(doc) == default_config

    def test_document_serializes_to_plain_values(self, default_config: Configuration) -> None:
        """Dumped documents contain plain JSON values."""
        data = configuration_to_document(default_config).model_dump(mode="json")
        assert data["model"] == "M5"
        assert data["interior"] == {"leather": "merino", "color": "black", "trim": "aluminum"}

    def test_update_to_fields(self, default_config: Configuration) -> None:
        """Partial updates resolve known ids and skip unknown ones."""
        fields = update_to_fields(
            ConfigurationUpdate(
                grille="iconic-glow",
                hood_pattern="no-such-hood",
                interior=InteriorUpdateSchema(color="fiona-red"),
            ),
            default_config,
        )
        assert fields["grille"].id == "iconic-glow"
        assert "hood_pattern" not in fields
        assert fields["interior"].color == InteriorColor.FIONA_RED
        assert fields["interior"].leather == LeatherType.MERINO
        assert fields["interior"].trim == InteriorTrim.ALUMINUM

    def test_empty_update(self, default_config: Configuration) -> None:
        """An empty update yields no fields."""
        assert update_to_fields(ConfigurationUpdate(), default_config) == {}
