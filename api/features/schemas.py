"""
Pydantic schemas for the feature backlog.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.validation import blank_to_none

FeatureStatus = Literal["backlog", "planned", "in_progress", "done"]


class FeatureIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=10_000)
    status: FeatureStatus = "backlog"

    @field_validator("description", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)


class FeatureStatusIn(BaseModel):
    status: FeatureStatus
