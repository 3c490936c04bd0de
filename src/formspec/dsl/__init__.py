"""
Builder DSL for FormSpec declaration trees.

    from formspec.dsl import field, formspec, group, when

    form = formspec(
        group("Customer",
            field.text("name", label="Name", required=True),
            field.enum("status", ["draft", "sent"]),
        ),
        when("status", "draft",
            field.text("notes"),
        ),
    )
"""

from formspec.dsl import field
from formspec.dsl.structure import (
    formspec,
    formspec_with_validation,
    group,
    when,
)

__all__ = [
    "field",
    "formspec",
    "formspec_with_validation",
    "group",
    "when",
]
