"""Pytest marker auto-assignment by folder and shared form fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from gradforms import logger
from gradforms.validator import StepValidator

PINNED_YEAR = 2025


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def validator() -> StepValidator:
    return StepValidator(PINNED_YEAR)


@pytest.fixture
def identity_state() -> dict[str, Any]:
    return {
        "fullName": "Mona Ahmed",
        "personalPhoto": "uploads/mona.png",
        "email": "mona.ahmed@example.com",
        "mobile": "01012345678",
        "linkedin": "https://www.linkedin.com/in/mona-ahmed",
        "cityOfBirth": "Cairo",
    }


@pytest.fixture
def enrollment_state() -> dict[str, Any]:
    return {
        "faculty": "Engineering",
        "university": "Cairo University",
        "trackName": "Open Source Application Development",
        "branch": "Smart Village",
        "program": "Professional Training Program - (9 Months)",
        "itiGraduationYear": 2020,
        "intake": 43,
    }


@pytest.fixture
def teaching_state() -> dict[str, Any]:
    return {
        "preferredTeachingBranches": ["Alexandria", "Smart Village"],
        "preferredCoursesToTeach": ["Python", "Data-Science_101"],
        "interestedInTeaching": "Both",
    }


@pytest.fixture
def employment_state() -> dict[str, Any]:
    return {
        "isEmployed": True,
        "fullJobTitle": "Software Engineer",
        "companyName": "Acme_Corp",
        "yearsOfExperience": 5,
        "hasFreelanceExperience": False,
    }
