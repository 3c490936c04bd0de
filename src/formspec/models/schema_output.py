"""
Build output models.

BuildResult bundles the validation issues with the two generated
artifacts: a JSON Schema for data validation and a JSON Forms UI Schema
for rendering.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from formspec.models.validation_result import ValidationIssue


class BuildResult(BaseModel):
    """Output of compiling one FormSpec."""

    model_config = ConfigDict(populate_by_name=True)

    valid: bool = Field(default=True, description="False when validation found errors")
    issues: list[ValidationIssue] = Field(default_factory=list)
    json_schema: dict[str, Any] = Field(..., alias="jsonSchema")
    ui_schema: dict[str, Any] = Field(..., alias="uiSchema")

    def to_form_config(self) -> dict[str, Any]:
        """Export the pair of schemas for client form libraries."""
        return {
            "schema": self.json_schema,
            "uiSchema": self.ui_schema,
        }

    def to_output(self) -> dict[str, Any]:
        """Export everything, camelCase keys, as plain JSON data."""
        return self.model_dump(by_alias=True, exclude_none=True)
