"""
FormSpec compiler passes.

Each pass reads the same immutable declaration tree independently:
- scope: scope membership and enclosing predicates of every field
- validator: duplicate names and unknown conditional references
- json_schema: the data-validation schema
- ui_schema: the JSON Forms layout with visibility rules
"""

from formspec.compiler.json_schema import (
    JSON_SCHEMA_DRAFT_07,
    compile_schema,
    field_to_schema,
    generate_json_schema,
)
from formspec.compiler.scope import (
    ROOT_SCOPE,
    Scope,
    ScopeResolution,
    resolve_scopes,
)
from formspec.compiler.ui_schema import (
    build_rule,
    compile_layout,
    generate_ui_schema,
)
from formspec.compiler.validator import (
    ValidationMode,
    enforce_validation,
    log_validation_issues,
    normalize_validation_mode,
    run_validation,
    validate_form,
)

__all__ = [
    # Scope resolution
    "ROOT_SCOPE",
    "Scope",
    "ScopeResolution",
    "resolve_scopes",
    # Validation
    "ValidationMode",
    "enforce_validation",
    "log_validation_issues",
    "normalize_validation_mode",
    "run_validation",
    "validate_form",
    # JSON Schema
    "JSON_SCHEMA_DRAFT_07",
    "compile_schema",
    "field_to_schema",
    "generate_json_schema",
    # UI Schema
    "build_rule",
    "compile_layout",
    "generate_ui_schema",
]
