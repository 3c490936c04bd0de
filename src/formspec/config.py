"""
Configuration module for FormSpec.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormSpecConfig:
    """Configuration settings for FormSpec."""

    # Output settings
    json_schema_version: str = "https://json-schema.org/draft-07/schema#"
    indent_json_output: int = 2

    # Validation settings: warn, throw or skip
    validation_mode: str = "warn"

    # Constraint settings
    constraints_file: str | None = None
    search_parent_dirs: bool = True

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FormSpecConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            json_schema_version=os.getenv("FORMSPEC_JSON_SCHEMA_VERSION", _defaults.json_schema_version),
            indent_json_output=int(os.getenv("FORMSPEC_INDENT_JSON", str(_defaults.indent_json_output))),
            validation_mode=os.getenv("FORMSPEC_VALIDATION_MODE", _defaults.validation_mode).lower(),
            constraints_file=os.getenv("FORMSPEC_CONSTRAINTS_FILE") or _defaults.constraints_file,
            search_parent_dirs=_env_flag("FORMSPEC_SEARCH_PARENT_DIRS", _defaults.search_parent_dirs),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            log_level=os.getenv("FORMSPEC_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormSpecConfig.from_env()


def get_config() -> FormSpecConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormSpecConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config


def reset_config() -> FormSpecConfig:
    """Reload configuration from the environment."""
    global config
    config = FormSpecConfig.from_env()
    return config
