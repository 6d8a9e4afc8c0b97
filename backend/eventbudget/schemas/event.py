"""Event schemas.

Requests use the form vocabulary of the web client (country, total,
client_website, commended_*, online_drive); responses use the stored
column names.
"""
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, field_validator


def format_amount(v: Decimal | None) -> str | None:
    """Plain decimal string without the column scale's trailing zeros."""
    if v is None:
        return None
    return format(v.normalize(), "f")


class EventBase(BaseModel):
    description: str | None = None
    end_date: date | None = None
    client_name: str | None = None
    country: str | None = Field(None, max_length=255)
    venue_name: str | None = Field(None, max_length=255)
    client_website: str | None = Field(None, max_length=500)
    commended_name: str | None = Field(None, max_length=255)
    commended_website: str | None = Field(None, max_length=500)
    online_drive: str | None = Field(None, max_length=500)
    base_total: Decimal | None = None
    # Legacy name for base_total
    total: Decimal | None = None
    currency_code: str | None = Field(None, max_length=10)

    @field_validator("currency_code", mode="before")
    @classmethod
    def strip_currency_code(cls, v):
        return v.strip() if isinstance(v, str) else v


class EventCreate(EventBase):
    name: str = Field(..., min_length=1, max_length=255)
    start_date: date


class EventUpdate(EventBase):
    name: str | None = Field(None, min_length=1, max_length=255)
    start_date: date | None = None

    @field_validator("name", "start_date")
    @classmethod
    def required_not_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class EventResponse(BaseModel):
    id: int
    name: str
    description: str | None
    start_date: date
    end_date: date | None
    client_name: str | None
    location: str | None
    venue_name: str | None
    venue_url: str | None
    accommodation_name: str | None
    accommodation_url: str | None
    drive_link: str | None
    base_total: Decimal | None
    currency_code: str
    total_budget: Decimal | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_serializer("base_total", "total_budget")
    def serialize_amount(self, v: Decimal | None) -> str | None:
        return format_amount(v)

    class Config:
        from_attributes = True
