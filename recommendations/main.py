"""Recommendations API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map RecommendationsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and tables created on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recommendations.api.error_handlers import register_error_handlers
from recommendations.api.routes import health, recommendations
from recommendations.config import get_settings
from recommendations.infrastructure.database import init_db
from recommendations.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_tables()
    logger.info("Recommendations API started")
    yield
    await manager.close()
    logger.info("Recommendations API shutting down")


app = FastAPI(
    title="Recommendations API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(recommendations.router, prefix=settings.api_prefix)

register_error_handlers(app)
