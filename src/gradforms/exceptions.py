"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class UnknownStepError(PackageError):
    """Raised when a step number has no validation schema."""

    step: object
    step_count: int

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown form step '{self.step}': expected an integer between 1 and {self.step_count}"


@dataclass(frozen=True)
class FormStateError(PackageError):
    """Raised when a raw form state cannot be read."""

    message: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message
