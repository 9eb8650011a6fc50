"""Multi-step registration form validator."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

import structlog

from gradforms.exceptions import UnknownStepError
from gradforms.intake import intake_year_options
from gradforms.logging import get_logger
from gradforms.schemas import StepSchema, build_step_schemas

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from gradforms.settings import Settings
    from gradforms.typing.models import IntakeOption, ValidationResult

STEP_COUNT = 4

logger = get_logger("gradforms.validator")


class StepValidator:
    """Validate the steps of the registration form.

    The validator holds no per-call state. The calendar year bounding the
    graduation year and the intake options is either pinned at construction or
    read from ``clock`` on every call.
    """

    def __init__(
        self,
        current_year: int | None = None,
        *,
        abort_early: bool = True,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Create a validator.

        Args:
            current_year (int | None): Pinned calendar year; None reads ``clock``.
            abort_early (bool): Report only the first failed rule of each field.
            clock (Callable[[], date]): Source of the current date.
        """
        self._current_year = current_year
        self._abort_early = abort_early
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> StepValidator:
        """Create a validator configured from runtime settings.

        Args:
            settings (Settings): Runtime settings.

        Returns:
            StepValidator: Configured validator.
        """
        return cls(settings.current_year, abort_early=settings.validation_abort_early)

    @property
    def step_count(self) -> int:
        """Return the number of form steps."""
        return STEP_COUNT

    def current_year(self) -> int:
        """Return the calendar year used for time-dependent rules."""
        if self._current_year is not None:
            return self._current_year
        return self._clock().year

    def schemas(self) -> tuple[StepSchema, ...]:
        """Return the step schemas for the current year."""
        return build_step_schemas(self.current_year())

    def schema_for(self, step: int) -> StepSchema:
        """Return the schema of one step.

        Args:
            step (int): Step number, 1-based.

        Raises:
            UnknownStepError: If the step number is not between 1 and 4.

        Returns:
            StepSchema: Step schema.
        """
        if isinstance(step, bool) or not isinstance(step, int) or not 1 <= step <= STEP_COUNT:
            raise UnknownStepError(step=step, step_count=STEP_COUNT)
        return self.schemas()[step - 1]

    def intake_options(self) -> tuple[IntakeOption, ...]:
        """Return the intake options offered for the current year."""
        return intake_year_options(self.current_year())

    def validate(
        self,
        step: int,
        state: Mapping[str, Any],
        *,
        abort_early: bool | None = None,
    ) -> ValidationResult:
        """Validate the raw state of one step.

        Only the fields of ``step`` are read; every field is evaluated even when
        a sibling fails.

        Args:
            step (int): Step number, 1-based.
            state (Mapping[str, Any]): Raw form state keyed by form field names.
            abort_early (bool | None): Override the validator default.

        Returns:
            ValidationResult: Failed rules of the step.
        """
        schema = self.schema_for(step)
        early = self._abort_early if abort_early is None else abort_early
        with structlog.contextvars.bound_contextvars(form_step=step, step_title=schema.title):
            result = schema.validate(state, abort_early=early)
            logger.debug(
                "Validated form step",
                extra={"issues": len(result.issues), "abort_early": early},
            )
        return result

    def validate_form(
        self,
        state: Mapping[str, Any],
        *,
        abort_early: bool | None = None,
    ) -> list[ValidationResult]:
        """Validate every step against one form state, as done on submission.

        Args:
            state (Mapping[str, Any]): Raw form state of the whole form.
            abort_early (bool | None): Override the validator default.

        Returns:
            list[ValidationResult]: One result per step, in step order.
        """
        return [
            self.validate(step, state, abort_early=abort_early) for step in range(1, STEP_COUNT + 1)
        ]
