"""
Validation result models.

These models are returned by the structural validator and by the
constraint validator.
"""

from typing import Literal

from pydantic import BaseModel, Field


Severity = Literal["warning", "error"]


class ValidationIssue(BaseModel):
    """A single problem found in a declaration tree."""

    severity: Severity = Field(..., description="error invalidates the form, warning does not")
    message: str = Field(..., description="Human-readable description")
    path: str = Field(default="", description="Scope-qualified location of the issue")
    code: str | None = Field(default=None, description="Machine-readable issue code")
    category: str | None = Field(default=None, description="Constraint category, if any")
    field_name: str | None = Field(default=None, description="Name of the affected field")


class ValidationResult(BaseModel):
    """Outcome of validating a FormSpec."""

    valid: bool = Field(..., description="False when any error-severity issue exists")
    issues: list[ValidationIssue] = Field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> "ValidationResult":
        return cls(
            valid=all(issue.severity != "error" for issue in issues),
            issues=issues,
        )

    @property
    def errors(self) -> list[ValidationIssue]:
        """Issues with error severity."""
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Issues with warning severity."""
        return [issue for issue in self.issues if issue.severity == "warning"]

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine the issues of two results."""
        return ValidationResult.from_issues(self.issues + other.issues)

    def to_issue_dict(self) -> dict[str, list[str]]:
        """Map each path to the messages reported there."""
        result: dict[str, list[str]] = {}
        for issue in self.issues:
            if issue.path not in result:
                result[issue.path] = []
            result[issue.path].append(issue.message)
        return result
