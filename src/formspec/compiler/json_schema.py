"""
JSON Schema generation.

Groups and conditionals are transparent here: their children are
collected into the enclosing scope as if the wrappers were absent.
Array items and object properties are compiled as nested scopes, each
producing its own ``type: object`` node.
"""

from typing import Any, Sequence

from formspec.compiler.scope import (
    ROOT_SCOPE,
    Scope,
    as_elements,
    conditional_segment,
    group_segment,
    join_path,
    nested_scope,
)
from formspec.config import get_config
from formspec.models.elements import (
    ArrayField,
    BaseField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    DynamicSchemaField,
    Element,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
)


JsonSchemaNode = dict[str, Any]

JSON_SCHEMA_DRAFT_07 = "https://json-schema.org/draft-07/schema#"

# Extension keys read by the runtime data-resolution layer
SOURCE_KEY = "x-formspec-source"
PARAMS_KEY = "x-formspec-params"
SCHEMA_SOURCE_KEY = "x-formspec-schemaSource"


def compile_schema(
    elements: Sequence[Element],
    scope: Scope = ROOT_SCOPE,
    schema_version: str = JSON_SCHEMA_DRAFT_07,
) -> JsonSchemaNode:
    """
    Compile one scope's elements into an object schema node.

    Args:
        elements: Elements of the scope (root elements, array items or
            object properties).
        scope: The scope being compiled. Only the root scope gets a
            ``$schema`` key.
        schema_version: Value of ``$schema`` on the root node.

    Returns:
        ``{type: "object", properties, required?}``; ``required`` is
        deduplicated and omitted when empty.
    """
    properties, required = _collect_fields(elements, scope.address, scope.path)

    node: JsonSchemaNode = {}
    if scope.is_root:
        node["$schema"] = schema_version
    node["type"] = "object"
    node["properties"] = properties

    unique_required = list(dict.fromkeys(required))
    if unique_required:
        node["required"] = unique_required
    return node


def _collect_fields(
    elements: Sequence[Element],
    address: tuple[int, ...],
    path: str,
) -> tuple[dict[str, JsonSchemaNode], list[str]]:
    properties: dict[str, JsonSchemaNode] = {}
    required: list[str] = []

    for index, element in enumerate(elements):
        element_address = address + (index,)
        if isinstance(element, (Group, Conditional)):
            segment = group_segment(element) if isinstance(element, Group) \
                else conditional_segment(element)
            child_properties, child_required = _collect_fields(
                element.elements, element_address, join_path(path, segment)
            )
            properties.update(child_properties)
            required.extend(child_required)
            continue

        field_path = join_path(path, element.name)
        properties[element.name] = field_to_schema(
            element, nested_scope(element, field_path, element_address)
        )
        if element.required:
            required.append(element.name)

    return properties, required


def field_to_schema(field: BaseField, scope: Scope) -> JsonSchemaNode:
    """
    Convert a single field to its JSON Schema node.

    ``scope`` is the scope the field opens (see ``nested_scope``), used
    for array items and object properties; other kinds ignore it.
    """
    node: JsonSchemaNode = {}
    if field.label is not None:
        node["title"] = field.label

    if isinstance(field, NumberField):
        node["type"] = "number"
        if field.min is not None:
            node["minimum"] = field.min
        if field.max is not None:
            node["maximum"] = field.max
    elif isinstance(field, StaticEnumField):
        node["type"] = "string"
        if field.has_object_options:
            node["oneOf"] = [
                {"const": option.id, "title": option.label} for option in field.options
            ]
        else:
            node["enum"] = list(field.options)
    elif isinstance(field, DynamicEnumField):
        # Options are fetched at runtime; the schema only records where from
        node["type"] = "string"
        node[SOURCE_KEY] = field.source
        if field.params:
            node[PARAMS_KEY] = list(field.params)
    elif isinstance(field, DynamicSchemaField):
        node["type"] = "object"
        node["additionalProperties"] = True
        node[SCHEMA_SOURCE_KEY] = field.schema_source
    elif isinstance(field, ArrayField):
        node["type"] = "array"
        node["items"] = compile_schema(field.items, scope)
        if field.min_items is not None:
            node["minItems"] = field.min_items
        if field.max_items is not None:
            node["maxItems"] = field.max_items
    elif isinstance(field, ObjectField):
        node.update(compile_schema(field.properties, scope))
    elif isinstance(field, BooleanField):
        node["type"] = "boolean"
    else:
        node["type"] = "string"

    return node


def generate_json_schema(
    form: FormSpec | Sequence[Element],
    schema_version: str | None = None,
) -> JsonSchemaNode:
    """
    Generate the JSON Schema for a whole form.

    Example:
        >>> form = formspec(
        ...     field.text("name", label="Name", required=True),
        ...     field.number("age", min=0),
        ... )
        >>> generate_json_schema(form)
        {'$schema': 'https://json-schema.org/draft-07/schema#',
         'type': 'object',
         'properties': {'name': {'title': 'Name', 'type': 'string'},
                        'age': {'type': 'number', 'minimum': 0}},
         'required': ['name']}
    """
    version = schema_version or get_config().json_schema_version
    return compile_schema(as_elements(form), ROOT_SCOPE, version)
