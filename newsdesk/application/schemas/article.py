"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from newsdesk.domain.entities import GENERIC_FACTION, MAX_DATE, MIN_DATE, NO_DATE


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, examples=["Hello"])
    desc: str = Field(..., min_length=1, examples=["Hello world!"])
    faction: str = Field(..., min_length=1, examples=["Empire", GENERIC_FACTION])
    date: int = Field(NO_DATE, ge=MIN_DATE, le=MAX_DATE, examples=[0, 603000000])

    @field_validator("date", mode="before")
    @classmethod
    def _reject_boolean_date(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise pass as 0/1
        if isinstance(value, bool):
            raise ValueError("date must be an integer timestamp, not a boolean")
        return value


class ArticleView(BaseModel):
    """Read-only projection of a stored article returned to callers."""

    id: int
    title: str | None
    desc: str | None
    faction: str | None
    date: int

    model_config = {"from_attributes": True, "frozen": True}
