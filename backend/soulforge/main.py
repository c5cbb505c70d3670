"""Soulforge API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SoulforgeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and collection seeded on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (ADR: import fan-out < 10)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import soulforge.infrastructure.database as database
from soulforge.api.error_handlers import register_error_handlers
from soulforge.api.routes import admin, collection, crafting, health, minting, transfers
from soulforge.config import get_settings
from soulforge.infrastructure.observability import setup_logging
from soulforge.services.collection_bootstrap import ensure_collection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    async with database.db_manager.session() as db:
        await ensure_collection(db, settings)
    logger.info("Soulforge API started")
    yield
    await database.db_manager.engine.dispose()
    logger.info("Soulforge API shutting down")


app = FastAPI(
    title="Soulforge API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration (no convention-over-config)
app.include_router(health.router)
app.include_router(collection.router)
app.include_router(minting.router)
app.include_router(crafting.router)
app.include_router(transfers.router)
app.include_router(admin.router)

register_error_handlers(app)
