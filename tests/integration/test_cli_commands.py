"""Integration tests for the configurator CLI.

These tests verify the commands work end-to-end, including:
- Orderable, warning-only and blocked configurations
- Load errors (missing file, bad JSON, unknown fields, unknown options)
- Exit codes
- Catalog, rule and document commands
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from configurator.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a configuration document to a temporary file."""

    def _write(data: object, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        """The baseline passes with exit code 0."""
        path = write_config({"schema_version": "1.0"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 0
        assert "The configuration is valid and can be ordered." in result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_blocked_config(self, runner: CliRunner, write_config) -> None:
        """A blocker fails with exit code 1 and a suggestion."""
        path = write_config({"schema_version": "1.0", "wheels": "standard-19"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "This configuration cannot be ordered:" in result.output
        assert "Suggestions:" in result.output
        assert 'Change wheels to: M Double-Spoke 20"' in result.output
        assert "Validation failed: 1 blocker(s), 0 warning(s)" in result.output

    def test_no_suggest(self, runner: CliRunner, write_config) -> None:
        """--no-suggest hides suggestions."""
        path = write_config({"schema_version": "1.0", "wheels": "standard-19"})
        result = runner.invoke(app, ["validate", str(path), "--no-suggest"])

        assert result.exit_code == 1
        assert "Suggestions:" not in result.output

    def test_warnings_only(self, runner: CliRunner, write_config) -> None:
        """Warnings alone exit with code 2."""
        path = write_config(
            {"schema_version": "1.0", "driving_assistant": "pro", "lights": "led"}
        )
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Notes:" in result.output
        assert "Add equipment: BMW Laserlight" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        """Invalid JSON should fail with exit code 1."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, write_config) -> None:
        """Unknown fields should cause validation failure."""
        path = write_config({"schema_version": "1.0", "spoiler": "big"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "spoiler" in result.output

    def test_unknown_option_rejected(self, runner: CliRunner, write_config) -> None:
        """Unknown option ids in a file are errors."""
        path = write_config({"schema_version": "1.0", "color": "rainbow"})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Unknown color option" in result.output
        assert "'rainbow'" in result.output

    def test_verbose_flag(self, runner: CliRunner, write_config) -> None:
        """--verbose is accepted before the command."""
        path = write_config({"schema_version": "1.0"})
        result = runner.invoke(app, ["--verbose", "validate", str(path)])

        assert result.exit_code == 0


class TestCatalogCommands:
    """Tests for the options and rules commands."""

    def test_options_all(self, runner: CliRunner) -> None:
        """Without an argument every dimension is listed."""
        result = runner.invoke(app, ["options"])

        assert result.exit_code == 0
        assert "wheels:" in result.output
        assert "driving_assistant:" in result.output

    def test_options_catalog_dimension(self, runner: CliRunner) -> None:
        """Catalog dimensions list ids, names and prices."""
        result = runner.invoke(app, ["options", "color"])

        assert result.exit_code == 0
        assert "frozen-deep-grey" in result.output
        assert "+4,500 EUR" in result.output
        assert "included" in result.output

    def test_options_mode_dimension(self, runner: CliRunner) -> None:
        """Mode dimensions list values and labels."""
        result = runner.invoke(app, ["options", "sound"])

        assert result.exit_code == 0
        assert "bowers-wilkins" in result.output
        assert "Harman Kardon" in result.output

    def test_options_unknown_dimension(self, runner: CliRunner) -> None:
        """Unknown dimensions fail with exit code 1."""
        result = runner.invoke(app, ["options", "spoiler"])

        assert result.exit_code == 1
        assert "Unknown dimension" in result.output

    def test_rules(self, runner: CliRunner) -> None:
        """The rule table lists every rule."""
        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0
        assert "M5_REQUIRES_M_WHEELS" in result.output
        assert "HARMAN_KARDON_MIN" in result.output


class TestDocumentCommands:
    """Tests for the init and summary commands."""

    def test_init_writes_baseline(self, runner: CliRunner, tmp_path: Path) -> None:
        """init writes a document that validates cleanly."""
        output = tmp_path / "my-m5.json"
        result = runner.invoke(app, ["init", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["schema_version"] == "1.0"
        assert data["wheels"] == "m-double-spoke-20"

        validated = runner.invoke(app, ["validate", str(output)])
        assert validated.exit_code == 0

    def test_init_refuses_overwrite(self, runner: CliRunner, write_config) -> None:
        """init does not overwrite without --force."""
        path = write_config({"schema_version": "1.0"})
        result = runner.invoke(app, ["init", str(path)])

        assert result.exit_code == 1
        assert "already exists" in result.output

        forced = runner.invoke(app, ["init", str(path), "--force"])
        assert forced.exit_code == 0

    def test_summary(self, runner: CliRunner, write_config) -> None:
        """summary prints the labelled configuration."""
        path = write_config({"schema_version": "1.0", "grille": "m-carbon"})
        result = runner.invoke(app, ["summary", str(path)])

        assert result.exit_code == 0
        assert "CONFIGURATION SUMMARY" in result.output
        assert "M Carbon Kidney Grille" in result.output
        assert "4,900 EUR" in result.output
