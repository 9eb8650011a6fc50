"""Typing-centric domain modules."""

from gradforms.typing.enums import ErrorKind, Program, TeachingPreference
from gradforms.typing.models import (
    EmploymentStep,
    EnrollmentStep,
    FieldIssue,
    IdentityStep,
    IntakeOption,
    StepRecord,
    TeachingStep,
    ValidationResult,
)

__all__ = [
    "EmploymentStep",
    "EnrollmentStep",
    "ErrorKind",
    "FieldIssue",
    "IdentityStep",
    "IntakeOption",
    "Program",
    "StepRecord",
    "TeachingPreference",
    "TeachingStep",
    "ValidationResult",
]
