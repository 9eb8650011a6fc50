"""Typed per-step form records."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from gradforms.processing.normalization import (
    coerce_flag,
    coerce_number,
    coerce_text,
    coerce_text_list,
    coerce_upload,
)

Text = Annotated[str | None, BeforeValidator(coerce_text)]
Number = Annotated[int | float | None, BeforeValidator(coerce_number)]
Flag = Annotated[bool | None, BeforeValidator(coerce_flag)]
TextList = Annotated[list[str] | None, BeforeValidator(coerce_text_list)]
Upload = Annotated[Any, BeforeValidator(coerce_upload)]


class StepRecord(BaseModel):
    """Base record for the values of one form step.

    Records are keyed by the form field names (aliases) and never reject
    input: malformed values are coerced to ``None`` so rules report them.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @classmethod
    def field_names(cls) -> dict[str, str]:
        """Return the mapping form field name -> attribute name.

        Returns:
            dict[str, str]: Attribute names keyed by form field name.
        """
        return {field.alias or name: name for name, field in cls.model_fields.items()}

    def value_of(self, field_name: str) -> Any:
        """Return the coerced value of a form field.

        Args:
            field_name (str): Form field name.

        Returns:
            Any: Coerced value.
        """
        return getattr(self, self.field_names()[field_name])


class IdentityStep(StepRecord):
    """Step 1: applicant identity."""

    full_name: Text = Field(default=None, alias="fullName")
    personal_photo: Upload = Field(default=None, alias="personalPhoto")
    email: Text = None
    mobile: Text = None
    linkedin: Text = None
    city_of_birth: Text = Field(default=None, alias="cityOfBirth")


class EnrollmentStep(StepRecord):
    """Step 2: program enrollment."""

    faculty: Text = None
    university: Text = None
    track_name: Text = Field(default=None, alias="trackName")
    branch: Text = None
    program: Text = None
    iti_graduation_year: Number = Field(default=None, alias="itiGraduationYear")
    intake: Number = None
    round: Text = None


class TeachingStep(StepRecord):
    """Step 3: teaching interest."""

    preferred_teaching_branches: TextList = Field(default=None, alias="preferredTeachingBranches")
    preferred_courses_to_teach: TextList = Field(default=None, alias="preferredCoursesToTeach")
    interested_in_teaching: Text = Field(default=None, alias="interestedInTeaching")


class EmploymentStep(StepRecord):
    """Step 4: employment and freelancing."""

    is_employed: Flag = Field(default=None, alias="isEmployed")
    full_job_title: Text = Field(default=None, alias="fullJobTitle")
    company_name: Text = Field(default=None, alias="companyName")
    years_of_experience: Number = Field(default=None, alias="yearsOfExperience")
    has_freelance_experience: Flag = Field(default=None, alias="hasFreelanceExperience")
    freelancing_income: Text = Field(default=None, alias="freelancingIncome")
