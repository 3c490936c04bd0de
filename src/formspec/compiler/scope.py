"""
Scope resolution for declaration trees.

The root FormSpec and every array/object field's own element list are
independent name scopes. Groups and conditionals do not open a scope;
their children belong to the enclosing one. Conditionals push their
predicate onto a stack that every descendant field inherits.
"""

from dataclasses import dataclass, field
from typing import Sequence

from formspec.models.elements import (
    ArrayField,
    BaseField,
    Conditional,
    Element,
    EqualsPredicate,
    FormSpec,
    Group,
    ObjectField,
)


PredicateStack = tuple[EqualsPredicate, ...]


@dataclass(frozen=True)
class Scope:
    """
    A field-name namespace.

    ``address`` is the position of the owning array/object field in the
    tree (child indices from the root), which keeps scopes distinct even
    when two owners share a name. ``path`` is only used in messages.
    """

    address: tuple[int, ...] = ()
    path: str = ""

    @property
    def is_root(self) -> bool:
        return not self.address

    def describe(self) -> str:
        return f'scope "{self.path}"' if self.path else "root scope"


ROOT_SCOPE = Scope()


def as_elements(form: FormSpec | Sequence[Element]) -> Sequence[Element]:
    """Accept either a FormSpec or a bare element sequence."""
    if isinstance(form, FormSpec):
        return form.elements
    return form


def join_path(parent: str, segment: str) -> str:
    return f"{parent}.{segment}" if parent else segment


def group_segment(group: Group) -> str:
    return f"[{group.label}]"


def conditional_segment(conditional: Conditional) -> str:
    return f"when({conditional.field})"


def nested_elements(field_: BaseField) -> Sequence[Element]:
    """Children of an array or object field, empty for every other kind."""
    if isinstance(field_, ArrayField):
        return field_.items
    if isinstance(field_, ObjectField):
        return field_.properties
    return ()


def nested_path(field_: BaseField, field_path: str) -> str:
    """Message path of a nested scope; array items get a '[]' suffix."""
    if isinstance(field_, ArrayField):
        return f"{field_path}[]"
    return field_path


def nested_scope(field_: BaseField, field_path: str, address: tuple[int, ...]) -> Scope:
    """The scope opened by an array's items or an object's properties."""
    return Scope(address=address, path=nested_path(field_, field_path))


def opens_scope(field_: BaseField) -> bool:
    return isinstance(field_, (ArrayField, ObjectField))


def push_predicate(stack: PredicateStack, conditional: Conditional) -> PredicateStack:
    return stack + (conditional.predicate,)


@dataclass(frozen=True)
class FieldPlacement:
    """Where a field sits: its scope and the predicates enclosing it."""

    field: BaseField
    scope: Scope
    predicates: PredicateStack
    path: str


@dataclass(frozen=True)
class ConditionalPlacement:
    """Where a conditional sits; ``predicates`` excludes its own."""

    conditional: Conditional
    scope: Scope
    predicates: PredicateStack
    path: str


@dataclass
class ScopeResolution:
    """Every field and conditional of a tree, tagged with its scope."""

    scopes: list[Scope] = field(default_factory=list)
    fields: list[FieldPlacement] = field(default_factory=list)
    conditionals: list[ConditionalPlacement] = field(default_factory=list)

    def fields_in(self, scope: Scope) -> list[FieldPlacement]:
        return [placement for placement in self.fields if placement.scope == scope]

    def names_by_scope(self) -> dict[Scope, set[str]]:
        """Field names declared in each scope, regardless of order."""
        names: dict[Scope, set[str]] = {scope: set() for scope in self.scopes}
        for placement in self.fields:
            names[placement.scope].add(placement.field.name)
        return names


def resolve_scopes(form: FormSpec | Sequence[Element]) -> ScopeResolution:
    """
    Walk the tree depth-first and record the scope and enclosing
    predicates (outermost first) of every field and conditional.

    Args:
        form: A FormSpec or a sequence of top-level elements.

    Returns:
        ScopeResolution listing scopes, fields and conditionals in
        declaration order.
    """
    resolution = ScopeResolution(scopes=[ROOT_SCOPE])

    def visit(
        elements: Sequence[Element],
        scope: Scope,
        predicates: PredicateStack,
        path: str,
        address: tuple[int, ...],
    ) -> None:
        for index, element in enumerate(elements):
            element_address = address + (index,)
            if isinstance(element, Group):
                visit(
                    element.elements,
                    scope,
                    predicates,
                    join_path(path, group_segment(element)),
                    element_address,
                )
            elif isinstance(element, Conditional):
                conditional_path = join_path(path, conditional_segment(element))
                resolution.conditionals.append(
                    ConditionalPlacement(element, scope, predicates, conditional_path)
                )
                visit(
                    element.elements,
                    scope,
                    push_predicate(predicates, element),
                    conditional_path,
                    element_address,
                )
            else:
                field_path = join_path(path, element.name)
                resolution.fields.append(FieldPlacement(element, scope, predicates, field_path))
                if opens_scope(element):
                    child_scope = nested_scope(element, field_path, element_address)
                    resolution.scopes.append(child_scope)
                    visit(
                        nested_elements(element),
                        child_scope,
                        predicates,
                        child_scope.path,
                        element_address,
                    )

    visit(as_elements(form), ROOT_SCOPE, (), "", ())
    return resolution
