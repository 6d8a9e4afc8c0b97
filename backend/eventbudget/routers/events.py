"""Event API routes."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventbudget.config import Settings, get_settings
from eventbudget.database import get_db
from eventbudget.models.event import Event
from eventbudget.schemas.event import EventCreate, EventResponse, EventUpdate
from eventbudget.services.currency_service import currency_code_exists
from eventbudget.services.event_service import apply_event_update, build_event, resolve_currency_code

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


async def _check_registry(db: AsyncSession, settings: Settings, code: str) -> None:
    if not settings.enforce_currency_registry:
        return
    if not await currency_code_exists(db, code):
        logger.warning("Rejected event with unregistered currency %s", code)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[{
                "loc": ["body", "currency_code"],
                "msg": f"Currency '{code}' is not registered",
                "type": "value_error",
            }],
        )


@router.get("", response_model=list[EventResponse])
async def list_events(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Event).order_by(Event.start_date.desc(), Event.id.desc()))
    return [EventResponse.model_validate(e) for e in result.scalars().all()]


@router.post("", response_model=EventResponse, status_code=201)
async def create_event(
    data: EventCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    event = build_event(data, settings.default_currency_code)
    await _check_registry(db, settings, event.currency_code)
    db.add(event)
    await db.flush()
    await db.refresh(event)
    logger.info("Created event %s (%s)", event.id, event.name)
    return EventResponse.model_validate(event)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: int,
    data: EventUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    event = await db.get(Event, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    # Only a newly sent code is checked; stored codes stay editable
    if data.currency_code:
        await _check_registry(db, settings, resolve_currency_code(data.currency_code))
    apply_event_update(event, data, settings.default_currency_code)
    await db.flush()
    await db.refresh(event)
    logger.info("Updated event %s", event.id)
    return EventResponse.model_validate(event)


@router.delete("/{event_id}", status_code=204)
async def delete_event(
    event_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    event = await db.get(Event, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    await db.delete(event)
    logger.info("Deleted event %s", event_id)
    return None
