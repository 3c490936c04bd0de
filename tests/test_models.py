"""Tests for FormSpec data models."""

import pytest
from pydantic import ValidationError

from formspec.dsl import field, formspec, group, when
from formspec.errors import ConfigurationError, FormValidationError
from formspec.models.elements import (
    ArrayField,
    Conditional,
    DynamicSchemaField,
    EnumOption,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
    element_tag,
)
from formspec.models.schema_output import BuildResult
from formspec.models.validation_result import (
    ValidationIssue,
    ValidationResult,
)


class TestFieldModels:
    """Tests for field element models."""

    def test_basic_field(self):
        """Test creating a basic text field."""
        field = TextField(name="email")
        assert field.name == "email"
        assert field.type == "field"
        assert field.kind == "text"
        assert field.required is False
        assert field.label is None

    def test_field_with_options(self):
        """Test field with label, placeholder and required."""
        field = TextField(
            name="email",
            label="Email Address",
            placeholder="you@example.com",
            required=True,
        )
        assert field.label == "Email Address"
        assert field.placeholder == "you@example.com"
        assert field.required is True

    def test_empty_name_rejected(self):
        """Test that field names must not be empty."""
        with pytest.raises(ValidationError):
            TextField(name="")

    def test_fields_are_frozen(self):
        """Test that fields cannot be changed after construction."""
        field = TextField(name="email")
        with pytest.raises(ValidationError):
            field.name = "other"

    def test_number_range(self):
        """Test number field bounds, including min == max."""
        field = NumberField(name="age", min=0, max=0)
        assert field.min == 0
        assert field.max == 0

    def test_number_min_above_max(self):
        """Test that min > max is a configuration error."""
        with pytest.raises(ConfigurationError, match="min"):
            NumberField(name="age", min=10, max=1)

    def test_dynamic_schema_alias(self):
        """Test that schemaSource is accepted by alias and by name."""
        by_alias = DynamicSchemaField.model_validate({"name": "ext", "schemaSource": "plugin"})
        by_name = DynamicSchemaField(name="ext", schema_source="plugin")
        assert by_alias.schema_source == "plugin"
        assert by_alias == by_name


class TestStaticEnumField:
    """Tests for static enum option checks."""

    def test_string_options(self):
        """Test plain string options."""
        field = StaticEnumField(name="status", options=["draft", "sent"])
        assert field.options == ("draft", "sent")
        assert not field.has_object_options

    def test_object_options(self):
        """Test {id, label} options given as dicts."""
        field = StaticEnumField(
            name="country",
            options=[{"id": "us", "label": "United States"}],
        )
        assert field.has_object_options
        assert field.options[0] == EnumOption(id="us", label="United States")

    def test_empty_options(self):
        """Test that an empty option list is rejected."""
        with pytest.raises(ConfigurationError, match="must not be empty"):
            StaticEnumField(name="status", options=[])

    def test_mixed_options(self):
        """Test that mixing strings and objects is rejected."""
        with pytest.raises(ConfigurationError, match="not mixed"):
            StaticEnumField(name="status", options=["a", {"id": "b", "label": "B"}])

    def test_object_option_without_label(self):
        """Test that object options need a non-empty label."""
        with pytest.raises(ConfigurationError, match="non-empty string"):
            StaticEnumField(name="status", options=[{"id": "a", "label": ""}])


class TestArrayField:
    """Tests for array item bounds."""

    def test_bounds(self):
        """Test valid item bounds given by alias."""
        field = ArrayField.model_validate({"name": "tags", "minItems": 1, "maxItems": 3})
        assert field.min_items == 1
        assert field.max_items == 3

    def test_negative_bound(self):
        """Test that negative bounds are rejected."""
        with pytest.raises(ConfigurationError, match="negative"):
            ArrayField(name="tags", min_items=-1)

    def test_inverted_bounds(self):
        """Test that minItems > maxItems is rejected."""
        with pytest.raises(ConfigurationError, match="minItems"):
            ArrayField(name="tags", min_items=5, max_items=2)


class TestFormSpec:
    """Tests for loading whole declaration trees."""

    def test_load_from_dict(self):
        """Test that discriminated elements load from plain data."""
        form = FormSpec.model_validate({
            "elements": [
                {"type": "field", "kind": "text", "name": "name"},
                {"type": "group", "label": "Details", "elements": [
                    {"type": "field", "kind": "static_enum", "name": "status",
                     "options": ["a", "b"]},
                ]},
                {"type": "conditional", "field": "status", "value": "a", "elements": [
                    {"type": "field", "kind": "object", "name": "address", "properties": [
                        {"type": "field", "kind": "text", "name": "city"},
                    ]},
                ]},
            ],
        })
        assert isinstance(form.elements[0], TextField)
        assert isinstance(form.elements[1], Group)
        assert isinstance(form.elements[1].elements[0], StaticEnumField)
        conditional = form.elements[2]
        assert isinstance(conditional, Conditional)
        assert conditional.predicate.field == "status"
        assert conditional.predicate.value == "a"
        assert isinstance(conditional.elements[0], ObjectField)

    def test_unknown_kind(self):
        """Test that an unknown field kind is rejected."""
        with pytest.raises(ValidationError):
            FormSpec.model_validate({
                "elements": [{"type": "field", "kind": "color", "name": "c"}],
            })

    def test_invalid_enum_in_tree(self):
        """Test that construction errors surface unwrapped from nested data."""
        with pytest.raises(ConfigurationError):
            FormSpec.model_validate({
                "elements": [{"type": "field", "kind": "static_enum", "name": "s",
                              "options": []}],
            })

    def test_empty_form(self):
        """Test that an empty FormSpec is valid."""
        assert FormSpec().elements == ()

    def test_mixed_tree_round_trip(self):
        """Test every element variant survives a dump and reload."""
        form = formspec(
            field.text("name", placeholder="Jane"),
            field.number("age", min=0),
            group("Flags", field.boolean("active")),
            field.enum("country", [{"id": "us", "label": "United States"}]),
            field.dynamic_enum("city", "cities", params=["country"]),
            when("active", True,
                field.dynamic_schema("ext", "plugin"),
                field.array("rows", field.object("line", field.text("sku")), min_items=1),
            ),
        )
        data = form.model_dump(by_alias=True, exclude_none=True)
        assert data["elements"][2]["type"] == "group"
        assert data["elements"][5]["elements"][1]["minItems"] == 1

        reloaded = FormSpec.model_validate(data)
        assert reloaded == form
        assert isinstance(reloaded.elements[5].elements[1].items[0], ObjectField)

    def test_element_tag(self):
        """Test fields are tagged by kind, wrappers by type."""
        assert element_tag({"type": "field", "kind": "number"}) == "number"
        assert element_tag({"type": "group"}) == "group"
        assert element_tag(field.boolean("b")) == "boolean"
        assert element_tag(when("b", True)) == "conditional"
        assert element_tag({"kind": "text"}) is None

    def test_missing_type(self):
        """Test that an element without a type is rejected."""
        with pytest.raises(ValidationError):
            FormSpec.model_validate({"elements": [{"kind": "text", "name": "a"}]})


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_valid_result(self):
        """Test result without errors."""
        result = ValidationResult.from_issues([
            ValidationIssue(severity="warning", message="Duplicate", path="a"),
        ])
        assert result.valid
        assert result.error_count == 0
        assert len(result.warnings) == 1

    def test_invalid_result(self):
        """Test result with an error."""
        result = ValidationResult.from_issues([
            ValidationIssue(severity="error", message="Unknown field", path="when(x)"),
        ])
        assert not result.valid
        assert result.error_count == 1

    def test_merge(self):
        """Test merging two results recomputes validity."""
        ok = ValidationResult.from_issues([])
        bad = ValidationResult.from_issues([
            ValidationIssue(severity="error", message="Bad"),
        ])
        merged = ok.merge(bad)
        assert not merged.valid
        assert merged.error_count == 1

    def test_issue_dict_conversion(self):
        """Test grouping messages by path."""
        result = ValidationResult.from_issues([
            ValidationIssue(severity="warning", message="first", path="a"),
            ValidationIssue(severity="error", message="second", path="a"),
            ValidationIssue(severity="error", message="third", path="b"),
        ])
        issue_dict = result.to_issue_dict()
        assert issue_dict["a"] == ["first", "second"]
        assert issue_dict["b"] == ["third"]


class TestFormValidationError:
    """Tests for the throw-mode exception."""

    def test_message_joins_errors(self):
        """Test that the message names the form and joins error messages."""
        result = ValidationResult.from_issues([
            ValidationIssue(severity="error", message="one"),
            ValidationIssue(severity="warning", message="ignored"),
            ValidationIssue(severity="error", message="two"),
        ])
        error = FormValidationError(result, form_name="signup")
        assert str(error) == 'FormSpec "signup" validation failed: one; two'
        assert error.result is result

    def test_message_without_name(self):
        """Test the default message prefix."""
        result = ValidationResult.from_issues([
            ValidationIssue(severity="error", message="one"),
        ])
        assert str(FormValidationError(result)) == "Form validation failed: one"


class TestBuildResult:
    """Tests for BuildResult model."""

    def test_form_config_export(self):
        """Test exporting the schema pair."""
        result = BuildResult(
            json_schema={"type": "object", "properties": {}},
            ui_schema={"type": "VerticalLayout", "elements": []},
        )
        config = result.to_form_config()
        assert config["schema"]["type"] == "object"
        assert config["uiSchema"]["type"] == "VerticalLayout"

    def test_output_uses_aliases(self):
        """Test that output keys are camelCase."""
        result = BuildResult(
            jsonSchema={"type": "object"},
            uiSchema={"type": "VerticalLayout", "elements": []},
        )
        output = result.to_output()
        assert output["valid"] is True
        assert output["issues"] == []
        assert "jsonSchema" in output
        assert "uiSchema" in output
