"""Currency registry API routes."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventbudget.database import get_db
from eventbudget.models.currency import Currency
from eventbudget.schemas.currency import CurrencyCreate, CurrencyResponse, CurrencyUpdate
from eventbudget.services.currency_service import get_currency_by_code, get_other_base_currency

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/currencies", tags=["currencies"])


async def _get_currency_or_404(db: AsyncSession, currency_id: int) -> Currency:
    currency = await db.get(Currency, currency_id)
    if not currency:
        raise HTTPException(status_code=404, detail="Currency not found")
    return currency


async def _check_unique(
    db: AsyncSession,
    code: str,
    is_base_currency: bool | None,
    currency_id: int | None = None,
) -> None:
    if await get_currency_by_code(db, code, exclude_id=currency_id):
        raise HTTPException(status_code=400, detail=f"Currency code '{code}' already exists")
    if is_base_currency:
        other = await get_other_base_currency(db, exclude_id=currency_id)
        if other:
            logger.warning("Rejected second base currency %s; %s is already base", code, other.code)
            raise HTTPException(
                status_code=400,
                detail=f"Currency '{other.code}' is already the base currency",
            )


@router.get("", response_model=list[CurrencyResponse])
async def list_currencies(db: Annotated[AsyncSession, Depends(get_db)]):
    result = await db.execute(select(Currency).order_by(Currency.code))
    return [CurrencyResponse.model_validate(c) for c in result.scalars().all()]


@router.post("", response_model=CurrencyResponse, status_code=201)
async def create_currency(
    data: CurrencyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await _check_unique(db, data.code, data.is_base_currency)
    currency = Currency(
        code=data.code,
        name=data.name,
        rate_to_base=data.rate_to_base,
        is_base_currency=data.is_base_currency,
    )
    db.add(currency)
    await db.flush()
    await db.refresh(currency)
    logger.info("Created currency %s (%s)", currency.id, currency.code)
    return CurrencyResponse.model_validate(currency)


@router.get("/{currency_id}", response_model=CurrencyResponse)
async def get_currency(
    currency_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return CurrencyResponse.model_validate(await _get_currency_or_404(db, currency_id))


@router.put("/{currency_id}", response_model=CurrencyResponse)
async def update_currency(
    currency_id: int,
    data: CurrencyUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    currency = await _get_currency_or_404(db, currency_id)
    await _check_unique(db, data.code, data.is_base_currency, currency_id=currency.id)
    values = data.model_dump(exclude_unset=True)
    if values.get("is_base_currency") is None:
        values.pop("is_base_currency", None)
    for k, v in values.items():
        setattr(currency, k, v)
    await db.flush()
    await db.refresh(currency)
    logger.info("Updated currency %s (%s)", currency.id, currency.code)
    return CurrencyResponse.model_validate(currency)


@router.delete("/{currency_id}", status_code=204)
async def delete_currency(
    currency_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    currency = await _get_currency_or_404(db, currency_id)
    await db.delete(currency)
    logger.info("Deleted currency %s (%s)", currency_id, currency.code)
    return None
