"""
Constraint configuration models.

A project restricts which DSL features its forms may use. Every
setting defaults to "off" (allowed), so a partial config only needs to
name what it restricts. Keys use the camelCase spelling of the
``.formspec.yml`` file.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


ConstraintSeverity = Literal["error", "warn", "off"]


class _ConstraintSection(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FieldTypeConstraints(_ConstraintSection):
    """Which field kinds are allowed; attribute names match field kinds."""

    text: ConstraintSeverity = "off"
    number: ConstraintSeverity = "off"
    boolean: ConstraintSeverity = "off"
    static_enum: ConstraintSeverity = Field(default="off", alias="staticEnum")
    dynamic_enum: ConstraintSeverity = Field(default="off", alias="dynamicEnum")
    dynamic_schema: ConstraintSeverity = Field(default="off", alias="dynamicSchema")
    array: ConstraintSeverity = "off"
    object: ConstraintSeverity = "off"


class LayoutConstraints(_ConstraintSection):
    """Grouping, conditionals and array/object nesting depth."""

    group: ConstraintSeverity = "off"
    conditionals: ConstraintSeverity = "off"
    max_nesting_depth: int | None = Field(default=None, ge=0, alias="maxNestingDepth")


class FieldOptionConstraints(_ConstraintSection):
    """Which field attributes may be set."""

    label: ConstraintSeverity = "off"
    placeholder: ConstraintSeverity = "off"
    required: ConstraintSeverity = "off"
    min_value: ConstraintSeverity = Field(default="off", alias="minValue")
    max_value: ConstraintSeverity = Field(default="off", alias="maxValue")
    min_items: ConstraintSeverity = Field(default="off", alias="minItems")
    max_items: ConstraintSeverity = Field(default="off", alias="maxItems")


class ConstraintConfig(_ConstraintSection):
    """Complete constraint configuration for a project."""

    field_types: FieldTypeConstraints = Field(
        default_factory=FieldTypeConstraints, alias="fieldTypes"
    )
    layout: LayoutConstraints = Field(default_factory=LayoutConstraints)
    field_options: FieldOptionConstraints = Field(
        default_factory=FieldOptionConstraints, alias="fieldOptions"
    )


class FormSpecFileConfig(_ConstraintSection):
    """Top-level structure of a ``.formspec.yml`` file."""

    constraints: ConstraintConfig = Field(default_factory=ConstraintConfig)
