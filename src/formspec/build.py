"""
Form compilation orchestrator.

This is the main entry point: give it a FormSpec, get back validation
issues, a JSON Schema and a UI Schema.
"""

from typing import Sequence

from formspec.compiler.json_schema import compile_schema
from formspec.compiler.scope import ROOT_SCOPE, as_elements
from formspec.compiler.ui_schema import generate_ui_schema
from formspec.compiler.validator import (
    ValidationMode,
    enforce_validation,
    normalize_validation_mode,
    validate_form,
)
from formspec.config import get_config
from formspec.constraints.models import ConstraintConfig
from formspec.constraints.validators import validate_constraints
from formspec.models.elements import Element, FormSpec
from formspec.models.schema_output import BuildResult
from formspec.models.validation_result import ValidationResult


class FormSpecCompiler:
    """
    Compiles FormSpecs into JSON Schema and UI Schema.

    Usage:
        compiler = FormSpecCompiler(validation_mode="throw")

        result = compiler.compile(form)

        json_schema = result.json_schema
        ui_schema = result.ui_schema
    """

    def __init__(
        self,
        validation_mode: bool | str | None = None,
        schema_version: str | None = None,
        constraints: ConstraintConfig | None = None,
        name: str | None = None,
    ):
        """
        Initialize the compiler.

        Args:
            validation_mode: "warn" logs issues, "throw" raises
                FormValidationError on errors, "skip" does not validate.
                If None, uses config.validation_mode.
            schema_version: ``$schema`` of the root JSON Schema node.
                If None, uses config.json_schema_version.
            constraints: Optional project constraints checked alongside
                the structural validation.
            name: Form name used in log messages and errors.
        """
        config = get_config()
        self.validation_mode: ValidationMode = normalize_validation_mode(
            config.validation_mode if validation_mode is None else validation_mode
        )
        self.schema_version = schema_version or config.json_schema_version
        self.constraints = constraints
        self.name = name

    def validate(self, form: FormSpec | Sequence[Element]) -> ValidationResult:
        """Run the structural checks and, if configured, the constraint checks."""
        result = validate_form(form)
        if self.constraints is not None:
            result = result.merge(validate_constraints(form, self.constraints))
        return result

    def compile(self, form: FormSpec | Sequence[Element]) -> BuildResult:
        """
        Validate (per the validation mode) and generate both schemas.

        Raises:
            FormValidationError: In "throw" mode when errors were found.
        """
        issues = []
        valid = True
        if self.validation_mode != "skip":
            result = enforce_validation(self.validate(form), self.validation_mode, self.name)
            issues = result.issues
            valid = result.valid

        return BuildResult(
            valid=valid,
            issues=issues,
            json_schema=compile_schema(as_elements(form), ROOT_SCOPE, self.schema_version),
            ui_schema=generate_ui_schema(form),
        )


def build_form_schemas(
    form: FormSpec | Sequence[Element],
    validation_mode: bool | str | None = None,
    constraints: ConstraintConfig | None = None,
) -> BuildResult:
    """
    Convenience function to compile a FormSpec.

    Example:
        >>> form = formspec(
        ...     field.text("name", required=True),
        ...     field.number("age", min=0),
        ... )
        >>> result = build_form_schemas(form)
        >>> result.json_schema["required"]
        ['name']
    """
    compiler = FormSpecCompiler(validation_mode=validation_mode, constraints=constraints)
    return compiler.compile(form)
