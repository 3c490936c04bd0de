"""
Exception types for FormSpec.

Construction-time problems raise ConfigurationError; validation in
"throw" mode raises FormValidationError.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formspec.models.validation_result import ValidationResult


class ConfigurationError(Exception):
    """A form element was declared with invalid attributes."""


class FormValidationError(Exception):
    """Structural validation found error-severity issues."""

    def __init__(self, result: "ValidationResult", form_name: str | None = None):
        self.result = result
        self.form_name = form_name
        errors = "; ".join(issue.message for issue in result.errors)
        prefix = f'FormSpec "{form_name}"' if form_name else "Form"
        super().__init__(f"{prefix} validation failed: {errors}")


class ConstraintConfigError(Exception):
    """The constraints file could not be read or parsed."""
