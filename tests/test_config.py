"""Tests for the configuration module."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from resume_tailor.config import (
    AppConfig,
    ConfigurationError,
    OutputFormat,
    load_config,
    load_environment_config,
    parse_config_dict,
    validate_config_file,
)
from resume_tailor.config.validators import check_for_warnings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, clean_env):
        """Test loading a fully populated configuration file."""
        app_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert app_config.logging.level == "DEBUG"
        assert app_config.logging.format == "json"
        assert app_config.highlighting.marker_start == "[["
        assert app_config.highlighting.marker_end == "]]"
        assert app_config.highlighting.tooltip_separator == ": "
        assert app_config.output.format == OutputFormat.HTML.value
        assert app_config.output.include_summary is False
        assert env_config.environment == "local"

    def test_load_empty_config_uses_defaults(self, clean_env):
        """Test that an empty document yields the defaults."""
        app_config, _ = load_config(FIXTURES_DIR / "empty_config.yaml")

        assert app_config == AppConfig()
        assert app_config.logging.level == "INFO"
        assert app_config.logging.format == "key-value"
        assert app_config.highlighting.marker_start == "**"
        assert app_config.output.format == "markers"
        assert app_config.output.include_summary is True

    def test_no_config_file_uses_defaults(self, clean_env, tmp_path):
        """Test fallback to defaults when no default file exists."""
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config == AppConfig()

    def test_default_location_is_used(self, clean_env, tmp_path):
        """Test that ./config.yaml is picked up automatically."""
        (tmp_path / "config.yaml").write_text("output:\n  format: json\n")
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config.output.format == "json"

    def test_nested_default_location_is_used(self, clean_env, tmp_path):
        """Test that ./config/config.yaml is the second candidate."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("logging:\n  level: ERROR\n")
        clean_env.chdir(tmp_path)

        app_config, _ = load_config()

        assert app_config.logging.level == "ERROR"

    def test_explicit_missing_file_raises(self, clean_env):
        """Test error when an explicit config file doesn't exist."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(Path("nonexistent.yaml"))

        assert "not found" in str(exc_info.value)
        assert exc_info.value.suggestions

    def test_malformed_yaml_raises(self, clean_env):
        """Test error on YAML syntax problems."""
        with pytest.raises(ConfigurationError, match="Failed to parse YAML") as exc_info:
            load_config(FIXTURES_DIR / "malformed_config.yaml")

        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_non_mapping_document_raises(self, clean_env):
        """Test error when the document is a list."""
        with pytest.raises(ConfigurationError, match="YAML mapping"):
            load_config(FIXTURES_DIR / "list_config.yaml")

    def test_invalid_values_collect_every_error(self, clean_env):
        """Test that all validation errors are reported together."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_values_config.yaml")

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any("logging -> level" in error for error in errors)
        assert any("output -> format" in error for error in errors)
        assert any("output -> include_summary" in error for error in errors)
        assert "Validation Errors:" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_marker_with_newline_rejected(self):
        """Test that markers must stay on one line."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_config_dict({"highlighting": {"marker_start": "<<\n"}})

        assert any("highlighting -> marker_start" in error for error in exc_info.value.errors)

    def test_unknown_sections_warn(self):
        """Test that unknown sections emit a warning but still load."""
        with pytest.warns(UserWarning, match="Unknown configuration sections"):
            app_config = parse_config_dict({"sources": [], "output": {"format": "json"}})

        assert app_config.output.format == "json"


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid_file(self, capsys):
        """Test that a valid file reports success."""
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "is valid" in capsys.readouterr().out

    def test_invalid_file(self, capsys):
        """Test that an invalid file reports failure."""
        assert validate_config_file(FIXTURES_DIR / "invalid_values_config.yaml") is False
        assert "validation failed" in capsys.readouterr().out


class TestCheckForWarnings:
    """Tests for check_for_warnings."""

    def test_clean_config_has_no_warnings(self):
        """Test that a known layout produces no warnings."""
        assert check_for_warnings({"logging": {}, "highlighting": {}, "output": {}}) == []

    def test_empty_markers_warn(self):
        """Test the warning for indistinguishable markers."""
        warnings = check_for_warnings({"highlighting": {"marker_start": "", "marker_end": ""}})

        assert len(warnings) == 1
        assert "markers are empty" in warnings[0]

    def test_one_empty_marker_is_fine(self):
        """Test that a single empty marker is allowed without warning."""
        assert check_for_warnings({"highlighting": {"marker_start": ">>", "marker_end": ""}}) == []


class TestEnvironmentConfig:
    """Tests for environment variable loading."""

    def test_defaults_when_unset(self, clean_env):
        """Test that every variable is optional."""
        env_config = load_environment_config()

        assert env_config.log_level is None
        assert env_config.log_format is None
        assert env_config.output_format is None
        assert env_config.environment == "local"

    def test_values_are_normalized(self, clean_env):
        """Test case normalization of valid values."""
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("LOG_FORMAT", "JSON")
        clean_env.setenv("TAILOR_OUTPUT_FORMAT", " Html ")
        clean_env.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.log_format == "json"
        assert env_config.output_format == "html"
        assert env_config.environment == "staging"

    def test_invalid_values_raise(self, clean_env):
        """Test that invalid values are collected into one error."""
        clean_env.setenv("LOG_LEVEL", "LOUD")
        clean_env.setenv("LOG_FORMAT", "xml")
        clean_env.setenv("TAILOR_OUTPUT_FORMAT", "pdf")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 3

    def test_load_config_propagates_environment_errors(self, clean_env):
        """Test that load_config surfaces invalid environment values."""
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError, match="Environment variable validation failed") as exc_info:
            load_config(FIXTURES_DIR / "empty_config.yaml")

        assert exc_info.value.message == "Environment variable validation failed"
        assert "Invalid LOG_LEVEL: 'LOUD'" in exc_info.value.errors[0]
