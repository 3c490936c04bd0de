"""
Structure builders: groups, conditionals and the FormSpec root.

The structure is the definition: nesting implies layout (groups) and
conditional visibility (when).
"""

from typing import Any

from formspec.compiler.validator import run_validation
from formspec.config import get_config
from formspec.models.elements import Conditional, Element, FormSpec, Group


def group(label: str, *elements: Element) -> Group:
    """Group elements under a visual heading; no effect on the data schema."""
    return Group(label=label, elements=elements)


def when(field_name: str, value: Any, *elements: Element) -> Conditional:
    """Show ``elements`` only while ``field_name`` equals ``value``."""
    return Conditional(field=field_name, value=value, elements=elements)


def formspec(*elements: Element) -> FormSpec:
    """Build a FormSpec without validating it."""
    return FormSpec(elements=elements)


def formspec_with_validation(
    *elements: Element,
    validate: bool | str | None = None,
    name: str | None = None,
) -> FormSpec:
    """
    Build a FormSpec and validate it on the spot.

    Args:
        elements: Top-level elements.
        validate: "warn" (or True) logs issues, "throw" raises on
            errors, "skip" (or False) does nothing. Defaults to the
            configured validation mode.
        name: Form name used in log messages and errors.

    Raises:
        FormValidationError: In "throw" mode when errors were found.
    """
    form = FormSpec(elements=elements)
    mode = get_config().validation_mode if validate is None else validate
    run_validation(form, mode, form_name=name)
    return form
