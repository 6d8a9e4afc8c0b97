"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventbudget.config import get_settings
from eventbudget.database import init_db
from eventbudget.routers import categories, currencies, display, events

settings = get_settings()

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Event budget API started (%s)", settings.app_env)
    yield


app = FastAPI(
    title="Event Budget API",
    description="Events, budget categories and currencies for event budgeting",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router)
app.include_router(categories.router)
app.include_router(currencies.router)
app.include_router(display.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
