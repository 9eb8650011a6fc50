"""Validation outcome models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from gradforms.typing.enums import ErrorKind


class FieldIssue(BaseModel):
    """Single failed rule on one form field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    rule: str
    kind: ErrorKind
    message: str


class ValidationResult(BaseModel):
    """Outcome of validating one form step."""

    model_config = ConfigDict(extra="forbid")

    step: int = Field(ge=1)
    issues: list[FieldIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """Return whether the step has no failed rule."""
        return not self.issues

    @property
    def errors(self) -> dict[str, list[str]]:
        """Return failure messages grouped by field, in evaluation order."""
        grouped: dict[str, list[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.field, []).append(issue.message)
        return grouped

    @property
    def first_errors(self) -> dict[str, str]:
        """Return the first failure message of every failed field."""
        return {field: messages[0] for field, messages in self.errors.items()}

    def error_for(self, field: str) -> str | None:
        """Return the first failure message of a field.

        Args:
            field (str): Form field name.

        Returns:
            str | None: Message, or None when the field is valid.
        """
        return self.first_errors.get(field)
