from __future__ import annotations

from datetime import date

import pytest
import structlog

from gradforms.exceptions import UnknownStepError
from gradforms.settings import Settings
from gradforms.validator import StepValidator


@pytest.mark.parametrize("step", [0, 5, -1, True, "1", 2.0])
def test_unknown_steps_are_rejected(validator, step) -> None:
    with pytest.raises(UnknownStepError):
        validator.validate(step, {})


def test_schemas_are_ordered(validator) -> None:
    schemas = validator.schemas()

    assert [schema.number for schema in schemas] == [1, 2, 3, 4]
    assert validator.step_count == 4
    assert validator.schema_for(3).title == "Teaching interest"


def test_steps_ignore_fields_of_other_steps(validator, identity_state, employment_state) -> None:
    state = {**identity_state, **employment_state, "isEmployed": "garbage"}

    assert validator.validate(1, state).is_valid


def test_clock_is_read_per_call() -> None:
    today = {"value": date(2025, 6, 1)}
    validator = StepValidator(clock=lambda: today["value"])

    assert validator.current_year() == 2025
    assert len(validator.intake_options()) == 45

    today["value"] = date(2026, 1, 1)

    assert validator.current_year() == 2026
    assert validator.intake_options()[0].value == 46
    result = validator.validate(2, {"itiGraduationYear": 2026})
    assert result.error_for("itiGraduationYear") is None


def test_pinned_year_ignores_clock() -> None:
    validator = StepValidator(2000, clock=lambda: date(2030, 1, 1))

    assert validator.current_year() == 2000
    assert validator.validate(2, {"itiGraduationYear": 2001}).error_for("itiGraduationYear") == (
        "Graduation year must be less than or equal to 2000."
    )


def test_abort_early_default_can_be_disabled() -> None:
    validator = StepValidator(2025, abort_early=False)

    result = validator.validate(1, {"fullName": ""})

    assert result.errors["fullName"] == [
        "Full Name is required.",
        "Name must be in English and cannot contain special characters.",
    ]
    assert len(validator.validate(1, {"fullName": ""}, abort_early=True).errors["fullName"]) == 1


def test_from_settings() -> None:
    validator = StepValidator.from_settings(Settings(CURRENT_YEAR=2024, VALIDATION_ABORT_EARLY=False))

    assert validator.current_year() == 2024
    assert len(validator.validate(1, {"fullName": ""}).errors["fullName"]) == 2


def test_validate_form_returns_one_result_per_step(
    validator,
    identity_state,
    enrollment_state,
    teaching_state,
    employment_state,
) -> None:
    state = {**identity_state, **enrollment_state, **teaching_state, **employment_state}

    results = validator.validate_form(state)

    assert [result.step for result in results] == [1, 2, 3, 4]
    assert all(result.is_valid for result in results)


def test_validation_is_stateless(validator, identity_state) -> None:
    first = validator.validate(1, {})
    validator.validate(1, identity_state)
    second = validator.validate(1, {})

    assert first == second


def test_validate_binds_step_context_for_logging(mocker, validator, identity_state) -> None:
    seen: list[dict[str, object]] = []
    mocked_logger = mocker.patch("gradforms.validator.logger")
    mocked_logger.debug.side_effect = lambda *_args, **_kwargs: seen.append(
        structlog.contextvars.get_contextvars(),
    )

    validator.validate(1, identity_state)

    assert seen == [{"form_step": 1, "step_title": "Identity"}]
    assert "form_step" not in structlog.contextvars.get_contextvars()


def test_shared_schemas_are_read_only(validator) -> None:
    schema = validator.schema_for(1)

    with pytest.raises(TypeError):
        schema.fields["fullName"] = ()  # type: ignore[index]

    assert "fullName" in StepValidator(2025).schema_for(1).fields
