"""
Data models for FormSpec.

This module contains Pydantic models for:
- Declaration elements (fields, groups, conditionals, the FormSpec root)
- Validation issues and results
- Build output (JSON Schema + UI Schema)
"""

from formspec.models.elements import (
    AnyField,
    ArrayField,
    BaseField,
    BooleanField,
    Conditional,
    DynamicEnumField,
    DynamicSchemaField,
    Element,
    EnumOption,
    EqualsPredicate,
    FieldKind,
    FormSpec,
    Group,
    NumberField,
    ObjectField,
    StaticEnumField,
    TextField,
)
from formspec.models.schema_output import BuildResult
from formspec.models.validation_result import (
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    # Elements
    "AnyField",
    "ArrayField",
    "BaseField",
    "BooleanField",
    "Conditional",
    "DynamicEnumField",
    "DynamicSchemaField",
    "Element",
    "EnumOption",
    "EqualsPredicate",
    "FieldKind",
    "FormSpec",
    "Group",
    "NumberField",
    "ObjectField",
    "StaticEnumField",
    "TextField",
    # Output
    "BuildResult",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
