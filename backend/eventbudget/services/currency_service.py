"""Currency registry lookups and seeding."""
import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventbudget.models.currency import Currency

logger = logging.getLogger(__name__)

# code, name, rate_to_base, is_base_currency
DEFAULT_CURRENCIES = [
    ("THB", "Thai Baht", Decimal("1"), True),
    ("USD", "US Dollar", None, False),
    ("EUR", "Euro", None, False),
]


async def get_currency_by_code(
    db: AsyncSession, code: str, exclude_id: int | None = None
) -> Currency | None:
    stmt = select(Currency).where(Currency.code == code.strip().upper())
    if exclude_id is not None:
        stmt = stmt.where(Currency.id != exclude_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def currency_code_exists(db: AsyncSession, code: str) -> bool:
    """Whether the code is registered. Events only reference codes loosely."""
    return await get_currency_by_code(db, code) is not None


async def get_other_base_currency(db: AsyncSession, exclude_id: int | None = None) -> Currency | None:
    """Return a base currency other than exclude_id, if one is flagged."""
    stmt = select(Currency).where(Currency.is_base_currency.is_(True))
    if exclude_id is not None:
        stmt = stmt.where(Currency.id != exclude_id)
    result = await db.execute(stmt)
    return result.scalars().first()


async def seed_currencies(db: AsyncSession) -> list[Currency]:
    """Insert the default currencies whose codes are missing. Returns the new rows."""
    created = []
    has_base = await get_other_base_currency(db) is not None
    for code, name, rate, is_base in DEFAULT_CURRENCIES:
        if await get_currency_by_code(db, code):
            continue
        currency = Currency(
            code=code,
            name=name,
            rate_to_base=rate,
            is_base_currency=is_base and not has_base,
        )
        db.add(currency)
        created.append(currency)
        has_base = has_base or currency.is_base_currency
    await db.flush()
    logger.info("Seeded %d currencies", len(created))
    return created
