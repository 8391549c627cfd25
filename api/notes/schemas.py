from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class NoteIn(BaseModel):
    content: str = Field(..., min_length=1, max_length=10_000)

    # Content is free text: reject blank notes but store the text as written.
    @field_validator("content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Note content is required.")
        return value
