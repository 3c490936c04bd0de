"""
JSON Forms UI Schema generation.

Groups are kept as ``Group`` layout nodes. Conditionals are flattened:
their children are spliced into the surrounding list in place, and
every descendant Control carries a SHOW rule built from all enclosing
predicates.

See: https://jsonforms.io/docs/uischema/
"""

from copy import deepcopy
from typing import Any, Sequence

from formspec.compiler.scope import PredicateStack, as_elements, push_predicate
from formspec.models.elements import (
    BaseField,
    Conditional,
    Element,
    EqualsPredicate,
    FormSpec,
    Group,
)


UiNode = dict[str, Any]


def field_to_scope(field_name: str) -> str:
    """JSON Pointer of a root-level property."""
    return f"#/properties/{field_name}"


def build_rule(predicates: Sequence[EqualsPredicate]) -> dict[str, Any] | None:
    """
    Build the SHOW rule for a stack of enclosing predicates.

    One predicate yields a scoped ``const`` condition. Several yield an
    ``allOf`` with one conjunct per predicate, outermost first; that
    condition has no ``scope`` so renderers evaluate it against the
    whole data object.
    """
    if not predicates:
        return None

    if len(predicates) == 1:
        predicate = predicates[0]
        return {
            "effect": "SHOW",
            "condition": {
                "scope": field_to_scope(predicate.field),
                "schema": {"const": deepcopy(predicate.value)},
            },
        }

    return {
        "effect": "SHOW",
        "condition": {
            "schema": {
                "allOf": [
                    {"properties": {predicate.field: {"const": deepcopy(predicate.value)}}}
                    for predicate in predicates
                ],
            },
        },
    }


def field_to_control(field: BaseField, predicates: PredicateStack = ()) -> UiNode:
    control: UiNode = {
        "type": "Control",
        "scope": field_to_scope(field.name),
    }
    if field.label is not None:
        control["label"] = field.label
    rule = build_rule(predicates)
    if rule is not None:
        control["rule"] = rule
    return control


def compile_layout(
    elements: Sequence[Element],
    predicate_stack: PredicateStack = (),
) -> list[UiNode]:
    """
    Convert elements to an ordered list of UI nodes.

    Args:
        elements: The elements to convert.
        predicate_stack: Predicates of the enclosing conditionals,
            outermost first.

    Returns:
        Controls and Groups in declaration order. A Group never carries
        a rule itself; its descendant Controls do.
    """
    nodes: list[UiNode] = []

    for element in elements:
        if isinstance(element, Group):
            nodes.append({
                "type": "Group",
                "label": element.label,
                "elements": compile_layout(element.elements, predicate_stack),
            })
        elif isinstance(element, Conditional):
            nodes.extend(
                compile_layout(element.elements, push_predicate(predicate_stack, element))
            )
        else:
            nodes.append(field_to_control(element, predicate_stack))

    return nodes


def generate_ui_schema(form: FormSpec | Sequence[Element]) -> UiNode:
    """
    Generate the UI Schema for a whole form.

    Example:
        >>> form = formspec(
        ...     group("Customer", field.text("name", label="Name")),
        ...     when("status", "draft", field.text("notes")),
        ... )
        >>> generate_ui_schema(form)
        {'type': 'VerticalLayout',
         'elements': [
             {'type': 'Group', 'label': 'Customer', 'elements': [
                 {'type': 'Control', 'scope': '#/properties/name', 'label': 'Name'}]},
             {'type': 'Control', 'scope': '#/properties/notes',
              'rule': {'effect': 'SHOW', 'condition': {
                  'scope': '#/properties/status', 'schema': {'const': 'draft'}}}}]}
    """
    return {
        "type": "VerticalLayout",
        "elements": compile_layout(as_elements(form)),
    }
