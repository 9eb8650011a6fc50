from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from gradforms.typing.enums import ErrorKind
from gradforms.typing.models import FieldIssue, IdentityStep, IntakeOption, ValidationResult


def _issue(field: str, message: str, kind: ErrorKind = ErrorKind.REQUIRED) -> FieldIssue:
    return FieldIssue(field=field, rule="required", kind=kind, message=message)


def test_validation_result_groups_messages_by_field() -> None:
    result = ValidationResult(
        step=2,
        issues=[
            _issue("intake", "Intake is required."),
            _issue("intake", "Invalid intake for the selected program.", ErrorKind.CONDITIONAL_CONSTRAINT),
            _issue("branch", "Branch is required."),
        ],
    )

    assert not result.is_valid
    assert result.errors == {
        "intake": ["Intake is required.", "Invalid intake for the selected program."],
        "branch": ["Branch is required."],
    }
    assert result.first_errors == {"intake": "Intake is required.", "branch": "Branch is required."}
    assert result.error_for("branch") == "Branch is required."
    assert result.error_for("round") is None


def test_empty_result_is_valid_and_serializes_flag() -> None:
    result = ValidationResult(step=1)

    payload = json.loads(result.model_dump_json())

    assert payload == {"step": 1, "issues": [], "is_valid": True}


def test_validation_result_rejects_step_zero() -> None:
    with pytest.raises(ValidationError):
        ValidationResult(step=0)


def test_intake_option_is_frozen() -> None:
    option = IntakeOption(value=3, label="3")

    with pytest.raises(ValidationError):
        option.value = 4


def test_step_record_field_names_map_aliases() -> None:
    names = IdentityStep.field_names()

    assert names["fullName"] == "full_name"
    assert names["email"] == "email"
    assert list(names) == ["fullName", "personalPhoto", "email", "mobile", "linkedin", "cityOfBirth"]


def test_step_record_never_rejects_malformed_input() -> None:
    record = IdentityStep.model_validate({"fullName": {"first": "Mona"}, "mobile": 1012345678})

    assert record.full_name is None
    assert record.mobile == "1012345678"
