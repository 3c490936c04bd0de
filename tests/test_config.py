"""Tests for configuration handling."""

import pytest

from formspec import config as config_module
from formspec.build import FormSpecCompiler
from formspec.config import FormSpecConfig, get_config, reset_config, update_config
from formspec.dsl import field, formspec, when
from formspec.errors import FormValidationError


@pytest.fixture(autouse=True)
def restore_config():
    """Reload configuration from the environment after each test."""
    yield
    reset_config()


class TestFormSpecConfig:
    """Tests for FormSpecConfig."""

    def test_defaults(self):
        """Test default settings."""
        settings = FormSpecConfig()
        assert settings.json_schema_version == "https://json-schema.org/draft-07/schema#"
        assert settings.validation_mode == "warn"
        assert settings.constraints_file is None
        assert settings.search_parent_dirs is True
        assert settings.mcp_transport == "stdio"
        assert settings.mcp_port == 8080
        assert settings.indent_json_output == 2

    def test_from_env(self, monkeypatch):
        """Test reading settings from environment variables."""
        monkeypatch.setenv("FORMSPEC_VALIDATION_MODE", "THROW")
        monkeypatch.setenv("FORMSPEC_SEARCH_PARENT_DIRS", "false")
        monkeypatch.setenv("FORMSPEC_CONSTRAINTS_FILE", "/tmp/.formspec.yml")
        monkeypatch.setenv("MCP_TRANSPORT", "sse")
        monkeypatch.setenv("MCP_PORT", "9000")
        monkeypatch.setenv("FORMSPEC_LOG_LEVEL", "debug")

        settings = FormSpecConfig.from_env()
        assert settings.validation_mode == "throw"
        assert settings.search_parent_dirs is False
        assert settings.constraints_file == "/tmp/.formspec.yml"
        assert settings.mcp_transport == "sse"
        assert settings.mcp_port == 9000
        assert settings.log_level == "DEBUG"

    def test_empty_constraints_file_means_none(self, monkeypatch):
        """Test that an empty variable does not set a path."""
        monkeypatch.setenv("FORMSPEC_CONSTRAINTS_FILE", "")
        assert FormSpecConfig.from_env().constraints_file is None


class TestConfigAccess:
    """Tests for get_config / update_config / reset_config."""

    def test_update(self):
        """Test updating a setting."""
        update_config(validation_mode="throw")
        assert get_config().validation_mode == "throw"

    def test_update_ignores_unknown_keys(self):
        """Test that unknown settings are ignored."""
        settings = update_config(not_a_setting=1)
        assert not hasattr(settings, "not_a_setting")

    def test_reset(self, monkeypatch):
        """Test reset reloads from the environment."""
        update_config(mcp_port=1)
        monkeypatch.setenv("MCP_PORT", "8181")
        reset_config()
        assert config_module.get_config().mcp_port == 8181

    def test_compiler_uses_configured_mode(self):
        """Test the compiler default follows the configured mode."""
        update_config(validation_mode="throw")
        with pytest.raises(FormValidationError):
            FormSpecCompiler().compile(formspec(when("missing", "x", field.text("a"))))

    def test_compiler_uses_configured_schema_version(self):
        """Test the compiler default $schema follows the configuration."""
        update_config(json_schema_version="urn:custom")
        assert FormSpecCompiler().compile(formspec()).json_schema["$schema"] == "urn:custom"
