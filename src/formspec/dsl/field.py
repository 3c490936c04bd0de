"""
Field builders.

Usage:
    from formspec import field

    field.text("name", label="Full name", required=True)
    field.number("age", min=0, max=150)
    field.enum("status", ["draft", "sent"])
    field.enum("country", [{"id": "us", "label": "United States"}])
    field.dynamic_enum("city", "cities", params=["country"])
    field.array("contacts", field.text("email"), min_items=1)
    field.object("address", field.text("street"), field.text("zip"))

Invalid declarations raise ConfigurationError immediately.
"""

from typing import Any, Sequence

from formspec.models.elements import (
    ArrayField,
    BooleanField,
    DynamicEnumField,
    DynamicSchemaField,
    Element,
    EnumOption,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
)


def text(
    name: str,
    *,
    label: str | None = None,
    placeholder: str | None = None,
    required: bool = False,
) -> TextField:
    return TextField(name=name, label=label, placeholder=placeholder, required=required)


def number(
    name: str,
    *,
    label: str | None = None,
    min: int | float | None = None,
    max: int | float | None = None,
    required: bool = False,
) -> NumberField:
    return NumberField(name=name, label=label, min=min, max=max, required=required)


def boolean(name: str, *, label: str | None = None, required: bool = False) -> BooleanField:
    return BooleanField(name=name, label=label, required=required)


def enum(
    name: str,
    options: Sequence[str] | Sequence[EnumOption | dict[str, Any]],
    *,
    label: str | None = None,
    required: bool = False,
) -> StaticEnumField:
    """
    A select with fixed options.

    Args:
        name: Field name.
        options: All plain strings, or all ``{id, label}`` records
            (dicts or EnumOption). Mixing both raises ConfigurationError.
    """
    return StaticEnumField(name=name, options=options, label=label, required=required)


def dynamic_enum(
    name: str,
    source: str,
    *,
    params: Sequence[str] = (),
    label: str | None = None,
    required: bool = False,
) -> DynamicEnumField:
    """
    A select whose options are fetched at runtime from ``source``.

    ``params`` names sibling fields whose values the source needs, for
    dependent dropdowns.
    """
    return DynamicEnumField(
        name=name, source=source, params=tuple(params), label=label, required=required
    )


def dynamic_schema(
    name: str,
    schema_source: str,
    *,
    label: str | None = None,
    required: bool = False,
) -> DynamicSchemaField:
    return DynamicSchemaField(
        name=name, schema_source=schema_source, label=label, required=required
    )


def array(
    name: str,
    *items: Element,
    label: str | None = None,
    required: bool = False,
    min_items: int | None = None,
    max_items: int | None = None,
) -> ArrayField:
    """A repeated item whose shape is given by ``items``."""
    return ArrayField(
        name=name,
        items=items,
        label=label,
        required=required,
        min_items=min_items,
        max_items=max_items,
    )


def object(
    name: str,
    *properties: Element,
    label: str | None = None,
    required: bool = False,
) -> ObjectField:
    """A nested object whose properties are given by ``properties``."""
    return ObjectField(name=name, properties=properties, label=label, required=required)
