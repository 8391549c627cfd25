"""
Pydantic schemas for motorcycle endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.validation import blank_to_none, max_model_year


class MotorcycleIn(BaseModel):
    """
    Text fields of a motorcycle create/update, from a form or a JSON body.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int | None = Field(default=None, ge=1900)
    registration_number: str | None = Field(default=None, max_length=20)
    current_mileage: int | None = Field(default=None, ge=0)

    @field_validator("year", "registration_number", "current_mileage", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)

    @field_validator("year")
    @classmethod
    def _not_too_new(cls, value: int | None) -> int | None:
        if value is not None and value > max_model_year():
            raise ValueError("cannot be more than one year in the future")
        return value
