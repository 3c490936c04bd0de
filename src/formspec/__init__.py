"""
FormSpec: declare a form once, get JSON Schema + UI Schema.

A FormSpec is a tree of fields, groups and conditionals. Its nesting is
the layout: groups become labeled sections, conditionals hide their
contents unless another field has a given value.

Simple Usage:
    from formspec import build_form_schemas, field, formspec, group, when

    form = formspec(
        group("Customer",
            field.text("name", required=True),
            field.enum("status", ["draft", "sent"]),
        ),
        when("status", "draft",
            field.text("notes"),
        ),
    )

    result = build_form_schemas(form)

    # Get the schemas
    json_schema = result.json_schema
    ui_schema = result.ui_schema

Advanced Usage:
    from formspec import FormSpecCompiler, load_constraints

    compiler = FormSpecCompiler(
        validation_mode="throw",  # raise FormValidationError on errors
        constraints=load_constraints().config,  # .formspec.yml
        name="customer",
    )

    result = compiler.compile(form)

    # Validate without compiling
    issues = compiler.validate(form).issues
"""

from formspec.build import (
    FormSpecCompiler,
    build_form_schemas,
)
from formspec.compiler import (
    generate_json_schema,
    generate_ui_schema,
    resolve_scopes,
    validate_form,
)
from formspec.constraints import (
    ConstraintConfig,
    load_constraints,
    validate_constraints,
)
from formspec.dsl import (
    field,
    formspec,
    formspec_with_validation,
    group,
    when,
)
from formspec.errors import (
    ConfigurationError,
    ConstraintConfigError,
    FormValidationError,
)
from formspec.models import (
    BuildResult,
    Conditional,
    Element,
    FormSpec,
    Group,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Main interface
    "FormSpecCompiler",
    "build_form_schemas",
    # Builders
    "field",
    "formspec",
    "formspec_with_validation",
    "group",
    "when",
    # Compiler passes
    "generate_json_schema",
    "generate_ui_schema",
    "resolve_scopes",
    "validate_form",
    # Constraints
    "ConstraintConfig",
    "load_constraints",
    "validate_constraints",
    # Models
    "BuildResult",
    "Conditional",
    "Element",
    "FormSpec",
    "Group",
    "ValidationIssue",
    "ValidationResult",
    # Errors
    "ConfigurationError",
    "ConstraintConfigError",
    "FormValidationError",
]

__version__ = "0.1.0"
