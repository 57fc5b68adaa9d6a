"""Jeep Sales API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure in the same envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Run with:
    uvicorn jeep_sales.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jeep_sales.api.error_handlers import register_error_handlers
from jeep_sales.api.routes import health, jeeps
from jeep_sales.config import get_settings
from jeep_sales.infrastructure.database import close_db, init_db
from jeep_sales.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Jeep Sales API started")
    yield
    await close_db()
    logger.info("Jeep Sales API shutting down")


app = FastAPI(
    title="Jeep Sales API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(jeeps.router)

register_error_handlers(app)
