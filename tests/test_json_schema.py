"""Tests for JSON Schema generation."""

from formspec.compiler.json_schema import (
    JSON_SCHEMA_DRAFT_07,
    field_to_schema,
    generate_json_schema,
)
from formspec.compiler.scope import nested_scope
from formspec.dsl import field, formspec, group, when


def _schema(f):
    """Schema of ``f`` declared as the only element of a form."""
    return field_to_schema(f, nested_scope(f, f.name, (0,)))


class TestFieldToSchema:
    """Tests for single field conversion."""

    def test_text(self):
        """Test text field with label."""
        assert _schema(field.text("name", label="Name")) == {
            "title": "Name",
            "type": "string",
        }

    def test_number(self):
        """Test number bounds."""
        assert _schema(field.number("age", min=0, max=120)) == {
            "type": "number",
            "minimum": 0,
            "maximum": 120,
        }

    def test_boolean(self):
        """Test boolean field."""
        assert _schema(field.boolean("agree")) == {"type": "boolean"}

    def test_string_enum(self):
        """Test string options become an enum."""
        schema = _schema(field.enum("status", ["draft", "sent"]))
        assert schema == {"type": "string", "enum": ["draft", "sent"]}

    def test_object_enum(self):
        """Test object options become oneOf with const/title."""
        schema = _schema(field.enum("country", [
            {"id": "us", "label": "United States"},
            {"id": "ca", "label": "Canada"},
        ]))
        assert schema == {
            "type": "string",
            "oneOf": [
                {"const": "us", "title": "United States"},
                {"const": "ca", "title": "Canada"},
            ],
        }

    def test_dynamic_enum(self):
        """Test dynamic enum records its source and params."""
        schema = _schema(field.dynamic_enum("city", "cities", params=["country"]))
        assert schema == {
            "type": "string",
            "x-formspec-source": "cities",
            "x-formspec-params": ["country"],
        }

    def test_dynamic_enum_without_params(self):
        """Test that empty params are omitted."""
        schema = _schema(field.dynamic_enum("city", "cities"))
        assert "x-formspec-params" not in schema

    def test_dynamic_schema(self):
        """Test dynamic schema is an open object."""
        schema = _schema(field.dynamic_schema("ext", "plugin"))
        assert schema == {
            "type": "object",
            "additionalProperties": True,
            "x-formspec-schemaSource": "plugin",
        }

    def test_array(self):
        """Test array items compile to a nested object without $schema."""
        schema = _schema(field.array(
            "rows",
            field.text("sku", required=True),
            min_items=1,
            max_items=5,
        ))
        assert schema == {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"sku": {"type": "string"}},
                "required": ["sku"],
            },
            "minItems": 1,
            "maxItems": 5,
        }

    def test_object(self):
        """Test object properties compile inline."""
        schema = _schema(field.object("address", field.text("city"), label="Address"))
        assert schema == {
            "title": "Address",
            "type": "object",
            "properties": {"city": {"type": "string"}},
        }

    def test_matches_form_output(self):
        """Test a field compiled with its own scope matches the whole-form node."""
        rows = field.array("rows", field.object("line", field.text("sku", required=True)))
        form_schema = generate_json_schema(formspec(field.text("note"), rows))
        scope = nested_scope(rows, "rows", (1,))
        assert scope.path == "rows[]"
        assert field_to_schema(rows, scope) == form_schema["properties"]["rows"]


class TestGenerateJsonSchema:
    """Tests for whole-form JSON Schema generation."""

    def test_root_node(self):
        """Test the root node shape."""
        schema = generate_json_schema(formspec(field.text("name", required=True)))
        assert schema["$schema"] == JSON_SCHEMA_DRAFT_07
        assert schema["type"] == "object"
        assert schema["required"] == ["name"]

    def test_empty_form(self):
        """Test an empty form has no required list."""
        schema = generate_json_schema(formspec())
        assert schema["properties"] == {}
        assert "required" not in schema

    def test_schema_version_override(self):
        """Test a custom $schema value."""
        version = "https://json-schema.org/draft/2020-12/schema"
        assert generate_json_schema(formspec(), schema_version=version)["$schema"] == version

    def test_wrappers_are_transparent(self):
        """Test that groups and conditionals leave no trace in the schema."""
        wrapped = formspec(
            field.text("kind"),
            group("G",
                when("kind", "a",
                    field.text("detail", required=True),
                ),
            ),
        )
        flat = formspec(
            field.text("kind"),
            field.text("detail", required=True),
        )
        assert generate_json_schema(wrapped) == generate_json_schema(flat)

    def test_conditional_required_stays_required(self):
        """Test that required fields under a conditional stay in required."""
        form = formspec(
            field.text("kind"),
            when("kind", "a", field.text("detail", required=True)),
        )
        assert generate_json_schema(form)["required"] == ["detail"]

    def test_required_is_deduplicated(self):
        """Test that duplicates yield one required entry, last schema wins."""
        form = formspec(
            field.text("a", required=True),
            field.number("b"),
            field.number("a", required=True),
        )
        schema = generate_json_schema(form)
        assert schema["required"] == ["a"]
        assert list(schema["properties"]) == ["a", "b"]
        assert schema["properties"]["a"] == {"type": "number"}

    def test_property_order(self):
        """Test properties keep declaration order."""
        form = formspec(
            field.text("c"),
            group("G", field.text("a")),
            field.text("b"),
        )
        assert list(generate_json_schema(form)["properties"]) == ["c", "a", "b"]

    def test_nested_scopes_have_no_schema_key(self):
        """Test $schema appears only on the root node."""
        form = formspec(field.object("o", field.array("a", field.text("t"))))
        schema = generate_json_schema(form)
        nested = schema["properties"]["o"]
        assert "$schema" not in nested
        assert "$schema" not in nested["properties"]["a"]["items"]
