"""Validation schemas of the four registration steps."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from gradforms.intake import intake_values
from gradforms.processing.normalization import build_step_record
from gradforms.rules import (
    FieldRule,
    SiblingCondition,
    between,
    custom,
    each_matches,
    matches,
    max_value,
    min_items,
    min_value,
    one_of,
    required,
    required_if,
    url,
    when,
)
from gradforms.typing.enums import Program, TeachingPreference
from gradforms.typing.models import (
    EmploymentStep,
    EnrollmentStep,
    FieldIssue,
    IdentityStep,
    StepRecord,
    TeachingStep,
    ValidationResult,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

# Whitespace accepted by the text patterns, including Unicode spaces.
SPACE_CHARS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

NAME_PATTERN = rf"^[A-Za-z{SPACE_CHARS}]+$"
EMAIL_PATTERN = r"^[\w\.-]+@[a-zA-Z\d\.-]+\.[a-zA-Z]{2,}$"
MOBILE_PATTERN = r"^(010|011|012|015)\d{8}$"
CITY_PATTERN = rf"^[A-Za-z][A-Za-z{SPACE_CHARS}]*$"
FACULTY_UNIVERSITY_PATTERN = rf"^[a-zA-Z{SPACE_CHARS}]+$"
COURSE_PATTERN = r"^[A-Za-z0-9\-_ ]*$"
EMPLOYMENT_TEXT_PATTERN = rf"^[A-Za-z{SPACE_CHARS}_-]*$"

MIN_GRADUATION_YEAR = 1994
MIN_YEARS_OF_EXPERIENCE = 0
MAX_YEARS_OF_EXPERIENCE = 50


@dataclass(frozen=True)
class StepSchema:
    """Ordered field rules of one form step.

    Fields are evaluated independently and in declaration order; within a
    field, rules run in declaration order.
    """

    number: int
    title: str
    record_type: type[StepRecord]
    fields: Mapping[str, tuple[FieldRule, ...]]

    def __post_init__(self) -> None:
        """Freeze the field rules and reject fields the step record does not carry."""
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        unknown = set(self.fields) - set(self.record_type.field_names())
        if unknown:
            raise ValueError(f"Step {self.number} declares rules for unknown fields: {sorted(unknown)}")

    def validate(self, state: Mapping[str, Any], *, abort_early: bool = True) -> ValidationResult:
        """Validate the raw state of this step.

        Args:
            state (Mapping[str, Any]): Raw form state.
            abort_early (bool): Stop at the first failed rule of each field.

        Returns:
            ValidationResult: Failed rules of the step.
        """
        record = build_step_record(self.record_type, state)
        issues: list[FieldIssue] = []
        for field_name, rules in self.fields.items():
            value = record.value_of(field_name)
            for rule in rules:
                if rule.check(value, record):
                    continue
                issues.append(FieldIssue(field=field_name, rule=rule.name, kind=rule.kind, message=rule.message))
                if abort_early:
                    break
        return ValidationResult(step=self.number, issues=issues)


def _required_pattern(pattern: str, invalid_message: str, required_message: str) -> tuple[FieldRule, ...]:
    return (required(required_message), matches(pattern, invalid_message))


def _employment_text(label: str) -> tuple[FieldRule, ...]:
    return (
        matches(EMPLOYMENT_TEXT_PATTERN, f"{label} must contain only English letters."),
        required_if(_is_employed, f"{label} is required."),
    )


def _is_employed(record: StepRecord) -> bool:
    return bool(getattr(record, "is_employed", None))


def _has_freelance_experience(record: StepRecord) -> bool:
    return bool(getattr(record, "has_freelance_experience", None))


def _program_is(program: Program) -> SiblingCondition:
    def _condition(record: StepRecord) -> bool:
        return getattr(record, "program", None) == program.value

    return _condition


def _intake_fits_program(value: Any, record: StepRecord) -> bool:
    if _program_is(Program.PROFESSIONAL_TRAINING)(record):
        return bool(value)
    return True


def _identity_schema() -> StepSchema:
    return StepSchema(
        number=1,
        title="Identity",
        record_type=IdentityStep,
        fields={
            "fullName": _required_pattern(
                NAME_PATTERN,
                "Name must be in English and cannot contain special characters.",
                "Full Name is required.",
            ),
            "personalPhoto": (required("personal Photo is required"),),
            "email": _required_pattern(
                EMAIL_PATTERN,
                "Please enter a valid email address.",
                "Email is required.",
            ),
            "mobile": _required_pattern(
                MOBILE_PATTERN,
                "Please enter a valid Egyptian phone number (e.g., 01012345678).",
                "Mobile number is required.",
            ),
            "linkedin": (url("linkedin must be a valid URL"),),
            "cityOfBirth": _required_pattern(
                CITY_PATTERN,
                "City of birth must be in English,cannot contain special characters.",
                "City of birth is required.",
            ),
        },
    )


def _enrollment_schema(current_year: int) -> StepSchema:
    return StepSchema(
        number=2,
        title="Program enrollment",
        record_type=EnrollmentStep,
        fields={
            "faculty": _required_pattern(
                FACULTY_UNIVERSITY_PATTERN,
                "Faculty must be in English and cannot contain special characters.",
                "Faculty is required.",
            ),
            "university": _required_pattern(
                FACULTY_UNIVERSITY_PATTERN,
                "University must be in English and cannot contain special characters.",
                "University is required.",
            ),
            "trackName": (required("Track name is required."),),
            "branch": (required("Branch is required."),),
            "program": (
                required("Program is required."),
                one_of(Program.values(), "Please select one of the two provided programs"),
            ),
            "itiGraduationYear": (
                required("ITI Graduation Year is required."),
                min_value(MIN_GRADUATION_YEAR, "Graduation year must be after 1993."),
                max_value(current_year, f"Graduation year must be less than or equal to {current_year}."),
            ),
            "intake": (
                required("Intake is required."),
                one_of(intake_values(current_year), "Invalid intake value."),
                custom("valid_intake", "Invalid intake for the selected program.", _intake_fits_program),
            ),
            "round": (
                required_if(
                    _program_is(Program.INTENSIVE_CODE_CAMP),
                    "Round is required for 4 Months program.",
                ),
            ),
        },
    )


def _teaching_schema() -> StepSchema:
    return StepSchema(
        number=3,
        title="Teaching interest",
        record_type=TeachingStep,
        fields={
            "preferredTeachingBranches": (
                required("Preferred teaching branches are required."),
                min_items(1, "Please choose at least one branch you're interested in teaching in"),
            ),
            "preferredCoursesToTeach": (
                each_matches(
                    COURSE_PATTERN,
                    "Preferred courses can only include letters, numbers, underscores, dashes, and spaces.",
                ),
            ),
            "interestedInTeaching": (
                required("Please select your teaching preferences"),
                one_of(
                    TeachingPreference.values(),
                    "Please select a valid teaching preference (Business sessions, Courses or both).",
                ),
            ),
        },
    )


def _employment_schema() -> StepSchema:
    return StepSchema(
        number=4,
        title="Employment",
        record_type=EmploymentStep,
        fields={
            "isEmployed": (required("Employment status is required."),),
            "fullJobTitle": _employment_text("Job title"),
            "companyName": _employment_text("Company name"),
            "yearsOfExperience": (
                when(
                    _is_employed,
                    between(
                        MIN_YEARS_OF_EXPERIENCE,
                        MAX_YEARS_OF_EXPERIENCE,
                        "Years of experience must be between 0 and 50.",
                    ),
                ),
            ),
            "hasFreelanceExperience": (
                required("Please specify if you have worked as a freelancer before."),
            ),
            "freelancingIncome": (required_if(_has_freelance_experience, "Freelance gain is required ."),),
        },
    )


@lru_cache(maxsize=8)
def build_step_schemas(current_year: int) -> tuple[StepSchema, ...]:
    """Return the four step schemas for a calendar year.

    Args:
        current_year (int): Year bounding the graduation year and intake options.

    Returns:
        tuple[StepSchema, ...]: Schemas of steps 1 to 4, in order.
    """
    return (
        _identity_schema(),
        _enrollment_schema(current_year),
        _teaching_schema(),
        _employment_schema(),
    )
