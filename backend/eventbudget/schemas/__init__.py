"""Pydantic schemas."""
from eventbudget.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from eventbudget.schemas.currency import CurrencyCreate, CurrencyResponse, CurrencyUpdate
from eventbudget.schemas.event import EventCreate, EventResponse, EventUpdate

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "CurrencyCreate",
    "CurrencyResponse",
    "CurrencyUpdate",
    "EventCreate",
    "EventResponse",
    "EventUpdate",
]
