"""
Structural validation of declaration trees.

Two scope-aware checks:
1. Duplicate field names within one scope (warning).
2. Conditionals testing a field that is not declared anywhere in their
   scope (error). Forward references are legal.

Validation never changes the tree and never blocks compilation by
itself; ``enforce_validation`` applies a mode on top of the result.
"""

import logging
from typing import Literal, Sequence

from formspec.compiler.scope import ScopeResolution, resolve_scopes
from formspec.errors import FormValidationError
from formspec.models.elements import Element, FormSpec
from formspec.models.validation_result import ValidationIssue, ValidationResult


logger = logging.getLogger("formspec")

ValidationMode = Literal["warn", "throw", "skip"]

VALIDATION_MODES = ("warn", "throw", "skip")


def validate_form(form: FormSpec | Sequence[Element]) -> ValidationResult:
    """
    Validate a FormSpec's structure.

    Returns:
        ValidationResult; ``valid`` is False only when an error-severity
        issue was found. Duplicate names alone keep it valid.
    """
    resolution = resolve_scopes(form)
    issues = _duplicate_name_issues(resolution) + _unknown_reference_issues(resolution)
    return ValidationResult.from_issues(issues)


def _duplicate_name_issues(resolution: ScopeResolution) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for scope in resolution.scopes:
        paths_by_name: dict[str, list[str]] = {}
        for placement in resolution.fields_in(scope):
            paths_by_name.setdefault(placement.field.name, []).append(placement.path)

        for name, paths in paths_by_name.items():
            if len(paths) < 2:
                continue
            issues.append(ValidationIssue(
                severity="warning",
                code="DUPLICATE_FIELD_NAME",
                message=(
                    f'Duplicate field name "{name}" found {len(paths)} times '
                    f"in {scope.describe()} at: {', '.join(paths)}"
                ),
                path=paths[0],
                field_name=name,
            ))
    return issues


def _unknown_reference_issues(resolution: ScopeResolution) -> list[ValidationIssue]:
    names = resolution.names_by_scope()
    issues: list[ValidationIssue] = []
    for placement in resolution.conditionals:
        referenced = placement.conditional.field
        if referenced in names[placement.scope]:
            continue
        issues.append(ValidationIssue(
            severity="error",
            code="UNKNOWN_CONDITIONAL_FIELD",
            message=(
                f'Conditional references non-existent field "{referenced}" '
                f"in {placement.scope.describe()}"
            ),
            path=placement.path,
            field_name=referenced,
        ))
    return issues


def normalize_validation_mode(mode: bool | str | None) -> ValidationMode:
    """
    Map user input to a validation mode.

    ``True`` means warn and ``False``/``None`` mean skip.
    """
    if mode is True:
        return "warn"
    if mode is False or mode is None:
        return "skip"
    if not isinstance(mode, str):
        raise ValueError(
            f"Validation mode must be a string or a boolean, got {type(mode).__name__}"
        )
    mode = mode.strip().lower()
    if mode not in VALIDATION_MODES:
        raise ValueError(
            f"Unknown validation mode: {mode!r}. Use one of: {', '.join(VALIDATION_MODES)}"
        )
    return mode


def log_validation_issues(result: ValidationResult, form_name: str | None = None) -> None:
    """Log every issue, errors at ERROR level and warnings at WARNING level."""
    prefix = f'FormSpec "{form_name}"' if form_name else "FormSpec"
    for issue in result.issues:
        location = f" at {issue.path}" if issue.path else ""
        message = f"{prefix}: {issue.message}{location}"
        if issue.severity == "error":
            logger.error(message)
        else:
            logger.warning(message)


def enforce_validation(
    result: ValidationResult,
    mode: ValidationMode,
    form_name: str | None = None,
) -> ValidationResult:
    """
    Apply a validation mode to a result.

    Raises:
        FormValidationError: In "throw" mode when the result has errors.
    """
    if mode == "throw" and not result.valid:
        raise FormValidationError(result, form_name)
    if mode != "skip":
        log_validation_issues(result, form_name)
    return result


def run_validation(
    form: FormSpec | Sequence[Element],
    mode: bool | str | None = "warn",
    form_name: str | None = None,
) -> ValidationResult | None:
    """
    Validate according to ``mode``; returns None when skipped.

    Raises:
        FormValidationError: In "throw" mode when errors were found.
    """
    resolved = normalize_validation_mode(mode)
    if resolved == "skip":
        return None
    return enforce_validation(validate_form(form), resolved, form_name)
