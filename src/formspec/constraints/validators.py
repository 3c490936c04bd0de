"""
Constraint validation.

Walks a declaration tree and reports every use of a feature that the
project's ConstraintConfig restricts.
"""

from typing import Sequence

from formspec.compiler.scope import (
    as_elements,
    conditional_segment,
    group_segment,
    join_path,
    nested_elements,
    nested_path,
    opens_scope,
)
from formspec.constraints.models import ConstraintConfig, ConstraintSeverity
from formspec.models.elements import (
    ArrayField,
    BaseField,
    Conditional,
    Element,
    FormSpec,
    Group,
    NumberField,
    TextField,
)
from formspec.models.validation_result import ValidationIssue, ValidationResult


FIELD_TYPE_NAMES = {
    "text": "text field",
    "number": "number field",
    "boolean": "boolean field",
    "static_enum": "static enum field",
    "dynamic_enum": "dynamic enum field",
    "dynamic_schema": "dynamic schema field",
    "array": "array field",
    "object": "object field",
}


def _issue_severity(severity: ConstraintSeverity) -> str:
    return "error" if severity == "error" else "warning"


def extract_field_options(field: BaseField) -> list[str]:
    """Names of the restrictable options a field uses."""
    options: list[str] = []
    if field.label is not None:
        options.append("label")
    if isinstance(field, TextField) and field.placeholder is not None:
        options.append("placeholder")
    if field.required:
        options.append("required")
    if isinstance(field, NumberField):
        if field.min is not None:
            options.append("min_value")
        if field.max is not None:
            options.append("max_value")
    if isinstance(field, ArrayField):
        if field.min_items is not None:
            options.append("min_items")
        if field.max_items is not None:
            options.append("max_items")
    return options


def _option_display_name(option: str) -> str:
    head, *rest = option.split("_")
    return head + "".join(part.capitalize() for part in rest)


def validate_constraints(
    form: FormSpec | Sequence[Element],
    constraints: ConstraintConfig | None = None,
) -> ValidationResult:
    """
    Validate a FormSpec against project constraints.

    Example:
        >>> constraints = ConstraintConfig.model_validate({
        ...     "fieldTypes": {"dynamicEnum": "error"},
        ...     "layout": {"group": "warn"},
        ... })
        >>> result = validate_constraints(form, constraints)
        >>> if not result.valid:
        ...     print(result.errors)
    """
    constraints = constraints or ConstraintConfig()
    issues: list[ValidationIssue] = []

    def walk(elements: Sequence[Element], path: str, depth: int) -> None:
        for element in elements:
            if isinstance(element, Group):
                group_path = join_path(path, group_segment(element))
                severity = constraints.layout.group
                if severity != "off":
                    issues.append(ValidationIssue(
                        severity=_issue_severity(severity),
                        code="DISALLOWED_GROUP",
                        category="layout",
                        message=(
                            f'Group "{element.label}" is not allowed - visual grouping '
                            f"is not supported in this project"
                        ),
                        path=group_path,
                    ))
                walk(element.elements, group_path, depth)
            elif isinstance(element, Conditional):
                conditional_path = join_path(path, conditional_segment(element))
                severity = constraints.layout.conditionals
                if severity != "off":
                    issues.append(ValidationIssue(
                        severity=_issue_severity(severity),
                        code="DISALLOWED_CONDITIONAL",
                        category="layout",
                        message="Conditional visibility (when) is not allowed in this project",
                        path=conditional_path,
                    ))
                walk(element.elements, conditional_path, depth)
            else:
                walk_field(element, path, depth)

    def walk_field(field: BaseField, path: str, depth: int) -> None:
        field_path = join_path(path, field.name)

        severity = getattr(constraints.field_types, field.kind)
        if severity != "off":
            issues.append(ValidationIssue(
                severity=_issue_severity(severity),
                code="DISALLOWED_FIELD_TYPE",
                category="fieldTypes",
                message=(
                    f'Field "{field.name}" uses {FIELD_TYPE_NAMES[field.kind]}, '
                    f"which is not allowed in this project"
                ),
                path=field_path,
                field_name=field.name,
            ))

        for option in extract_field_options(field):
            severity = getattr(constraints.field_options, option)
            if severity == "off":
                continue
            issues.append(ValidationIssue(
                severity=_issue_severity(severity),
                code="DISALLOWED_FIELD_OPTION",
                category="fieldOptions",
                message=(
                    f'Field "{field.name}" uses the "{_option_display_name(option)}" option, '
                    f"which is not allowed in this project"
                ),
                path=field_path,
                field_name=field.name,
            ))

        if not opens_scope(field):
            return

        max_depth = constraints.layout.max_nesting_depth
        if max_depth is not None and depth + 1 > max_depth:
            issues.append(ValidationIssue(
                severity="error",
                code="EXCEEDED_NESTING_DEPTH",
                category="layout",
                message=(
                    f"Nesting depth {depth + 1} exceeds maximum allowed depth of {max_depth}"
                ),
                path=field_path,
                field_name=field.name,
            ))
        walk(nested_elements(field), nested_path(field, field_path), depth + 1)

    walk(as_elements(form), "", 0)
    return ValidationResult.from_issues(issues)
