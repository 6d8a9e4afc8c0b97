"""Seed the default currencies (THB as base, USD, EUR)."""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from eventbudget.database import async_session_maker, init_db
from eventbudget.services.currency_service import seed_currencies


async def seed():
    await init_db()
    async with async_session_maker() as db:
        created = await seed_currencies(db)
        await db.commit()
    print(f"Seeded {len(created)} currencies: {', '.join(c.code for c in created) or 'none'}")


if __name__ == "__main__":
    asyncio.run(seed())
