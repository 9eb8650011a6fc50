"""Core domain model exports."""

from gradforms.typing.models.intake import IntakeOption
from gradforms.typing.models.result import FieldIssue, ValidationResult
from gradforms.typing.models.steps import (
    EmploymentStep,
    EnrollmentStep,
    IdentityStep,
    StepRecord,
    TeachingStep,
)

__all__ = [
    "EmploymentStep",
    "EnrollmentStep",
    "FieldIssue",
    "IdentityStep",
    "IntakeOption",
    "StepRecord",
    "TeachingStep",
    "ValidationResult",
]
