"""Event field mapping and currency/total policy."""
import logging
from decimal import Decimal
from typing import Any

from eventbudget.models.event import Event
from eventbudget.schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)

# Client form field -> events column. total/base_total/currency_code are
# resolved separately.
FIELD_MAP = {
    "name": "name",
    "description": "description",
    "start_date": "start_date",
    "end_date": "end_date",
    "client_name": "client_name",
    "country": "location",
    "venue_name": "venue_name",
    "client_website": "venue_url",
    "commended_name": "accommodation_name",
    "commended_website": "accommodation_url",
    "online_drive": "drive_link",
}


def map_event_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Rename client form fields to event columns, dropping unknown keys."""
    return {FIELD_MAP[k]: v for k, v in data.items() if k in FIELD_MAP}


def resolve_currency_code(
    supplied: str | None,
    existing: str | None = None,
    default: str = "THB",
) -> str:
    """Supplied code, else the stored one, else the default; upper-cased."""
    if supplied and supplied.strip():
        code = supplied
    else:
        code = existing or default
    return code.strip().upper()


def resolve_base_total(data: dict[str, Any], existing: Decimal | None = None) -> Decimal | None:
    """base_total wins over the legacy total; otherwise keep what is stored."""
    if data.get("base_total") is not None:
        return data["base_total"]
    if data.get("total") is not None:
        return data["total"]
    return existing


def build_event(data: EventCreate, default_currency_code: str = "THB") -> Event:
    values = data.model_dump()
    amount = resolve_base_total(values)
    return Event(
        **map_event_fields(values),
        base_total=amount,
        total_budget=amount,
        currency_code=resolve_currency_code(values.get("currency_code"), default=default_currency_code),
    )


def apply_event_update(event: Event, data: EventUpdate, default_currency_code: str = "THB") -> Event:
    """Apply the fields present in the payload; omitted fields keep stored values."""
    values = data.model_dump(exclude_unset=True)
    for column, value in map_event_fields(values).items():
        setattr(event, column, value)

    # Rows written before base_total existed only carry total_budget
    stored_total = event.base_total if event.base_total is not None else event.total_budget
    amount = resolve_base_total(values, existing=stored_total)
    event.base_total = amount
    event.total_budget = amount

    event.currency_code = resolve_currency_code(
        values.get("currency_code"),
        existing=event.currency_code,
        default=default_currency_code,
    )
    logger.debug("Event %s resolved to %s %s", event.id, event.base_total, event.currency_code)
    return event
