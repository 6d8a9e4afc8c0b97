"""Currency schemas."""
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class CurrencyCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=10)
    name: str = Field(..., min_length=1, max_length=255)
    rate_to_base: Decimal | None = None
    is_base_currency: bool = False

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("code may not be blank")
        return v


class CurrencyUpdate(BaseModel):
    """code and name are replaced on every update; the rest only when sent."""

    code: str = Field(..., min_length=1, max_length=10)
    name: str = Field(..., min_length=1, max_length=255)
    rate_to_base: Decimal | None = None
    is_base_currency: bool | None = None

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("code may not be blank")
        return v


class CurrencyResponse(BaseModel):
    id: int
    code: str
    name: str
    rate_to_base: Decimal | None
    is_base_currency: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
