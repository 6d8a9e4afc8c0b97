"""Shared pytest fixtures for the event budget API."""
import os

# Point the module-level engine at SQLite before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import eventbudget.models  # noqa: F401
from eventbudget.config import Settings, get_settings
from eventbudget.database import Base, get_db
from eventbudget.main import app


@pytest_asyncio.fixture
async def session_maker(tmp_path):
    """A fresh SQLite database file per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def settings(tmp_path):
    return Settings(display_events_path=str(tmp_path / "events.json"))


@pytest_asyncio.fixture
async def client(session_maker, settings):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
