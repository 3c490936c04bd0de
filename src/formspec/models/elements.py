"""
Declaration element models for FormSpec.

A form is an ordered tree of elements:
- Fields (leaves, or array/object fields owning a nested scope)
- Groups (visual grouping, transparent to the data schema)
- Conditionals (children shown only when another field has a given value)

All models are frozen and child lists are tuples, so a tree cannot be
changed once built. Element types are discriminated by ``type`` and,
for fields, by ``kind``, which lets a whole tree be loaded from JSON.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationInfo,
    field_validator,
    model_validator,
)

from formspec.errors import ConfigurationError


FieldKind = Literal[
    "text",
    "number",
    "boolean",
    "static_enum",
    "dynamic_enum",
    "dynamic_schema",
    "array",
    "object",
]


class EnumOption(BaseModel):
    """A static enum option with a stable id and a display label."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., description="Value stored in the form data")
    label: str = Field(..., description="Text shown to the user")


class EqualsPredicate(BaseModel):
    """Holds when the named field equals ``value``."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Name of the field being tested")
    value: Any = Field(default=None, description="Expected value")


class _ElementModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class BaseField(_ElementModel):
    """Attributes shared by every field kind."""

    type: Literal["field"] = "field"
    name: str = Field(..., min_length=1, description="Property key, unique within its scope")
    label: str | None = Field(default=None, description="Display label")
    required: bool = Field(default=False, description="Whether a value must be submitted")


class TextField(BaseField):
    kind: Literal["text"] = "text"
    placeholder: str | None = Field(default=None, description="Placeholder shown when empty")


class NumberField(BaseField):
    kind: Literal["number"] = "number"
    min: int | float | None = Field(default=None, description="Minimum allowed value")
    max: int | float | None = Field(default=None, description="Maximum allowed value")

    @model_validator(mode="after")
    def _check_range(self) -> "NumberField":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ConfigurationError(
                f'field.number("{self.name}"): min ({self.min}) must not exceed max ({self.max})'
            )
        return self


class BooleanField(BaseField):
    kind: Literal["boolean"] = "boolean"


def _option_attr(option: Any, key: str) -> Any:
    if isinstance(option, dict):
        return option.get(key)
    return getattr(option, key, None)


def check_enum_options(name: str, options: Any) -> list[Any]:
    """
    Check that static enum options are non-empty and homogeneous.

    Options must be all plain strings or all ``{id, label}`` records
    with non-empty string values.

    Raises:
        ConfigurationError: If the options violate either rule.
    """
    if isinstance(options, (str, bytes)) or not hasattr(options, "__iter__"):
        raise ConfigurationError(
            f'field.enum("{name}"): options must be a list of strings or {{id, label}} objects'
        )
    options = list(options)
    if not options:
        raise ConfigurationError(f'field.enum("{name}"): options must not be empty')

    first_is_object = not isinstance(options[0], str)
    for option in options:
        if (not isinstance(option, str)) != first_is_object:
            raise ConfigurationError(
                f'field.enum("{name}"): options must be all strings or all objects with '
                f"{{id, label}}, not mixed. Received mixed types in options array."
            )

    if first_is_object:
        for option in options:
            option_id = _option_attr(option, "id")
            option_label = _option_attr(option, "label")
            if not isinstance(option_id, str) or not option_id or \
                    not isinstance(option_label, str) or not option_label:
                raise ConfigurationError(
                    f'field.enum("{name}"): object options must have non-empty string '
                    f'"id" and "label" properties. Received: {option!r}'
                )
    return options


class StaticEnumField(BaseField):
    kind: Literal["static_enum"] = "static_enum"
    options: tuple[str, ...] | tuple[EnumOption, ...] = Field(
        ..., description="Fixed options: all strings or all {id, label} records"
    )

    @field_validator("options", mode="before")
    @classmethod
    def _check_options(cls, value: Any, info: ValidationInfo) -> Any:
        return check_enum_options(info.data.get("name", "?"), value)

    @property
    def has_object_options(self) -> bool:
        return isinstance(self.options[0], EnumOption)


class DynamicEnumField(BaseField):
    kind: Literal["dynamic_enum"] = "dynamic_enum"
    source: str = Field(..., description="Data source key resolved at runtime")
    params: tuple[str, ...] = Field(
        default=(), description="Sibling fields whose values the source needs"
    )


class DynamicSchemaField(BaseField):
    kind: Literal["dynamic_schema"] = "dynamic_schema"
    schema_source: str = Field(
        ..., alias="schemaSource", description="Key of the schema loaded at runtime"
    )


def _check_item_bounds(name: str, min_items: int | None, max_items: int | None) -> None:
    for bound in (min_items, max_items):
        if bound is not None and bound < 0:
            raise ConfigurationError(f'field.array("{name}"): item bounds must not be negative')
    if min_items is not None and max_items is not None and min_items > max_items:
        raise ConfigurationError(
            f'field.array("{name}"): minItems ({min_items}) must not exceed maxItems ({max_items})'
        )


class ArrayField(BaseField):
    """A repeated item; ``items`` describe one entry and form their own scope."""

    kind: Literal["array"] = "array"
    items: tuple["Element", ...] = Field(default=(), description="Shape of one item")
    min_items: int | None = Field(default=None, alias="minItems")
    max_items: int | None = Field(default=None, alias="maxItems")

    @model_validator(mode="after")
    def _check_bounds(self) -> "ArrayField":
        _check_item_bounds(self.name, self.min_items, self.max_items)
        return self


class ObjectField(BaseField):
    """A nested object; ``properties`` form their own scope."""

    kind: Literal["object"] = "object"
    properties: tuple["Element", ...] = Field(default=(), description="Nested elements")


class Group(_ElementModel):
    """Visual grouping of elements under a label."""

    type: Literal["group"] = "group"
    label: str = Field(..., description="Group heading")
    elements: tuple["Element", ...] = Field(default=())


class Conditional(_ElementModel):
    """Elements shown only while ``field`` equals ``value``."""

    type: Literal["conditional"] = "conditional"
    field: str = Field(..., min_length=1, description="Name of the field being tested")
    value: Any = Field(default=None, description="Value that makes the children visible")
    elements: tuple["Element", ...] = Field(default=())

    @property
    def predicate(self) -> EqualsPredicate:
        return EqualsPredicate(field=self.field, value=self.value)


AnyField = Annotated[
    Union[
        TextField,
        NumberField,
        BooleanField,
        StaticEnumField,
        DynamicEnumField,
        DynamicSchemaField,
        ArrayField,
        ObjectField,
    ],
    Field(discriminator="kind"),
]


def element_tag(value: Any) -> str | None:
    """Tag of an element: its ``kind`` for fields, its ``type`` otherwise."""
    if isinstance(value, dict):
        element_type, kind = value.get("type"), value.get("kind")
    else:
        element_type, kind = getattr(value, "type", None), getattr(value, "kind", None)
    if element_type == "field":
        return kind
    return element_type


# One flat tagged union; every field variant shares type == "field"
Element = Annotated[
    Union[
        Annotated[TextField, Tag("text")],
        Annotated[NumberField, Tag("number")],
        Annotated[BooleanField, Tag("boolean")],
        Annotated[StaticEnumField, Tag("static_enum")],
        Annotated[DynamicEnumField, Tag("dynamic_enum")],
        Annotated[DynamicSchemaField, Tag("dynamic_schema")],
        Annotated[ArrayField, Tag("array")],
        Annotated[ObjectField, Tag("object")],
        Annotated[Group, Tag("group")],
        Annotated[Conditional, Tag("conditional")],
    ],
    Discriminator(element_tag),
]


class FormSpec(BaseModel):
    """Root of a declaration tree: the ordered top-level elements."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    elements: tuple[Element, ...] = Field(default=())


for _model in (ArrayField, ObjectField, Group, Conditional, FormSpec):
    _model.model_rebuild()
