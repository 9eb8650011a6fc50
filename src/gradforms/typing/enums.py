"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return every member value in declaration order.

        Returns:
            tuple[str, ...]: Member values.
        """
        return tuple(member.value for member in cls)

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class Program(_EnumMixin):
    """Training program an applicant graduated from."""

    PROFESSIONAL_TRAINING = "Professional Training Program - (9 Months)"
    INTENSIVE_CODE_CAMP = "Intensive Code Camp - (4 Months)"


class TeachingPreference(_EnumMixin):
    """Kind of teaching an applicant is interested in."""

    BUSINESS_SESSIONS = "Business sessions"
    COURSES = "Courses"
    BOTH = "Both"


class ErrorKind(_EnumMixin):
    """Failure category reported for a field rule."""

    PATTERN_MISMATCH = "pattern_mismatch"
    REQUIRED = "required"
    OUT_OF_RANGE = "out_of_range"
    NOT_IN_SET = "not_in_set"
    CONDITIONAL_REQUIRED = "conditional_required"
    CONDITIONAL_CONSTRAINT = "conditional_constraint"
