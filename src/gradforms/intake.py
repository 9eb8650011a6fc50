"""Intake cohort options derived from the calendar year."""

from __future__ import annotations

from functools import lru_cache

from gradforms.typing.models import IntakeOption

INITIAL_INTAKE_YEAR = 1980


@lru_cache(maxsize=8)
def intake_year_options(
    current_year: int,
    initial_intake_year: int = INITIAL_INTAKE_YEAR,
) -> tuple[IntakeOption, ...]:
    """Return the selectable intake options for a calendar year.

    Intakes are numbered from 1 (the first cohort after ``initial_intake_year``)
    up to ``current_year - initial_intake_year`` and listed newest first. The
    result is memoized per year, so a new calendar year yields a new list.

    Args:
        current_year (int): Calendar year the options are computed for.
        initial_intake_year (int): Year preceding the first intake.

    Returns:
        tuple[IntakeOption, ...]: Options in strictly descending order.
    """
    intake_count = max(current_year - initial_intake_year, 0)
    return tuple(
        IntakeOption(value=intake_count - index, label=str(intake_count - index))
        for index in range(intake_count)
    )


def intake_values(current_year: int) -> frozenset[int]:
    """Return the set of valid intake numbers for a calendar year.

    Args:
        current_year (int): Calendar year.

    Returns:
        frozenset[int]: Accepted intake values.
    """
    return frozenset(option.value for option in intake_year_options(current_year))
