"""
Pydantic schemas for shopping list endpoints.

The UI sends `itemName` when adding and `item_name` when editing; both are
accepted everywhere.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core.validation import blank_to_none

_ITEM_NAME = AliasChoices("item_name", "itemName")


class ShoppingItemCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    item_name: str = Field(..., min_length=1, max_length=200, validation_alias=_ITEM_NAME)
    quantity: int = Field(default=1, ge=1)

    @field_validator("quantity", mode="before")
    @classmethod
    def _default_quantity(cls, value):
        value = blank_to_none(value)
        return 1 if value is None else value


class ShoppingItemUpdate(BaseModel):
    """
    Partial update: omitted fields keep their stored values.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    item_name: str | None = Field(default=None, min_length=1, max_length=200, validation_alias=_ITEM_NAME)
    quantity: int | None = Field(default=None, ge=1)

    @field_validator("item_name", "quantity", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return blank_to_none(value)
