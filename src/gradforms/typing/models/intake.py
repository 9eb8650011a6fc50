"""Intake selection models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IntakeOption(BaseModel):
    """Selectable intake cohort."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: int = Field(ge=1)
    label: str
