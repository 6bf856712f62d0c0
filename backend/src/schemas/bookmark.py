"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    # Stored exactly as submitted (no URL normalization)
    link: str = Field(min_length=1)


class BookmarkUpdate(BaseModel):
    """
    Schema for updating an existing bookmark.

    Only fields present in the request body are applied; there is no owner
    field, so a bookmark can never be moved to another user.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    link: str | None = Field(default=None, min_length=1)

    @field_validator("title", "link")
    @classmethod
    def reject_explicit_null(cls, v: str | None) -> str:
        """Required columns may be omitted from an update but not cleared."""
        # Validators don't run for omitted fields, so None here was sent explicitly
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
