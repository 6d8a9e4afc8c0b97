"""SQLAlchemy models."""
from eventbudget.models.category import Category
from eventbudget.models.currency import Currency
from eventbudget.models.event import Event

__all__ = [
    "Category",
    "Currency",
    "Event",
]
