"""Category schemas."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    icon: str | None = Field(None, max_length=255)


class CategoryUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    icon: str | None = Field(None, max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v: str | None) -> str:
        # name may be omitted, but not cleared
        if v is None:
            raise ValueError("name may not be null")
        return v


class CategoryResponse(BaseModel):
    id: int
    name: str
    icon: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
