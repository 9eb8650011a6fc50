"""gradforms package."""

from gradforms.exceptions import (
    FormStateError,
    PackageError,
    SettingsError,
    UnknownStepError,
)
from gradforms.intake import intake_year_options
from gradforms.logging import configure_logging, get_logger
from gradforms.settings import Settings, get_settings
from gradforms.validator import StepValidator

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("gradforms")

__all__ = [
    "FormStateError",
    "PackageError",
    "Settings",
    "SettingsError",
    "StepValidator",
    "UnknownStepError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "intake_year_options",
    "logger",
]
