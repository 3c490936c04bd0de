"""
MCP Tool definitions for FormSpec.

Wraps the compiler and the validator as MCP tools. Handlers are plain
synchronous functions returning JSON-serializable dicts; the server
serializes them into text content.
"""

import json
import logging
from typing import Any, Callable

from formspec.build import FormSpecCompiler
from formspec.constraints.models import ConstraintConfig
from formspec.errors import ConfigurationError, ConstraintConfigError, FormValidationError
from formspec.models.elements import FormSpec


logger = logging.getLogger("formspec-mcp")

ToolHandler = Callable[[dict[str, Any], ConstraintConfig | None], dict[str, Any]]


def load_formspec(data: Any) -> FormSpec:
    """
    Load a FormSpec from JSON text, a ``{"elements": [...]}`` mapping or
    a bare element list.

    Raises:
        ValueError: Malformed JSON or declaration (pydantic's
            ValidationError is a ValueError).
        ConfigurationError: Invalid element attributes.
    """
    if isinstance(data, str):
        data = json.loads(data)
    if isinstance(data, list):
        data = {"elements": data}
    if not isinstance(data, dict):
        raise ValueError("formspec must be an object with an 'elements' list")
    return FormSpec.model_validate(data)


def _resolve_constraints(
    arguments: dict[str, Any],
    default: ConstraintConfig | None,
) -> ConstraintConfig | None:
    raw = arguments.get("constraints")
    if raw is None:
        return default
    return ConstraintConfig.model_validate(raw)


def _error_payload(e: Exception) -> dict[str, Any]:
    return {
        "error": True,
        "message": str(e),
    }


def handle_build_form_schemas(
    arguments: dict[str, Any],
    constraints: ConstraintConfig | None = None,
) -> dict[str, Any]:
    """Compile a FormSpec; returns issues, jsonSchema and uiSchema."""
    try:
        form = load_formspec(arguments.get("formspec"))
        compiler = FormSpecCompiler(
            validation_mode=arguments.get("validation_mode"),
            constraints=_resolve_constraints(arguments, constraints),
            name=arguments.get("name"),
        )
        return compiler.compile(form).to_output()
    except (ValueError, ConfigurationError, ConstraintConfigError, FormValidationError) as e:
        logger.error(f"build_form_schemas failed: {e}")
        return _error_payload(e)


def handle_validate_formspec(
    arguments: dict[str, Any],
    constraints: ConstraintConfig | None = None,
) -> dict[str, Any]:
    """Validate a FormSpec without compiling it."""
    try:
        form = load_formspec(arguments.get("formspec"))
        compiler = FormSpecCompiler(
            validation_mode="skip",
            constraints=_resolve_constraints(arguments, constraints),
        )
        return compiler.validate(form).model_dump(exclude_none=True)
    except (ValueError, ConfigurationError) as e:
        logger.error(f"validate_formspec failed: {e}")
        return _error_payload(e)


TOOL_HANDLERS: dict[str, ToolHandler] = {
    "build_form_schemas": handle_build_form_schemas,
    "validate_formspec": handle_validate_formspec,
}


_FORMSPEC_INPUT = {
    "type": "object",
    "description": (
        'Declaration tree: {"elements": [...]}. Elements are fields '
        '({"type": "field", "kind": "text", "name": "email"}), groups '
        '({"type": "group", "label": "...", "elements": [...]}) or conditionals '
        '({"type": "conditional", "field": "status", "value": "a", "elements": [...]}).'
    ),
}

_CONSTRAINTS_INPUT = {
    "type": "object",
    "description": "Optional constraint config (fieldTypes, layout, fieldOptions)",
}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "build_form_schemas",
            "description": """
Compile a FormSpec declaration tree into a JSON Schema (data validation)
and a JSON Forms UI Schema (layout and conditional visibility).

FIELD KINDS:
text, number (min/max), boolean, static_enum (options), dynamic_enum
(source, params), dynamic_schema (schemaSource), array (items, minItems,
maxItems), object (properties).

RETURNS:
- valid: false when validation found errors
- issues: duplicate names (warning), unknown conditional fields (error)
- jsonSchema / uiSchema: the generated schemas
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "formspec": _FORMSPEC_INPUT,
                    "validation_mode": {
                        "type": "string",
                        "enum": ["warn", "throw", "skip"],
                        "description": "How validation issues are handled (default: warn)",
                    },
                    "name": {
                        "type": "string",
                        "description": "Form name used in messages",
                    },
                    "constraints": _CONSTRAINTS_INPUT,
                },
                "required": ["formspec"],
            },
        },
        {
            "name": "validate_formspec",
            "description": """
Validate a FormSpec declaration tree without compiling it. Reports
duplicate field names per scope, conditionals that test undeclared
fields and, when constraints are given, disallowed features.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "formspec": _FORMSPEC_INPUT,
                    "constraints": _CONSTRAINTS_INPUT,
                },
                "required": ["formspec"],
            },
        },
    ]
