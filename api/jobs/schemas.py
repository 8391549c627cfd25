"""
Pydantic schemas for job endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.validation import blank_to_none, parse_iso_date


class JobIn(BaseModel):
    """
    Body for both create and update; update replaces every field.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    motorcycle_id: int | None = None
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=10_000)
    date: str = Field(..., min_length=1)
    mileage: int | None = Field(default=None, ge=0)
    cost: float | None = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("motorcycle_id", "description", "mileage", "cost", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("date")
    @classmethod
    def _valid_date(cls, value: str) -> str:
        return parse_iso_date(value)
