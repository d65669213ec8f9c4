"""Agency Site API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AgencyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, render cache and bootstrap admin initialized in the lifespan
    - /admin requests pass through AdminGateMiddleware before any route

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers registered by api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agency.api.admin_gate import AdminGateMiddleware
from agency.api.error_handlers import register_error_handlers
from agency.api.routes import (
    admin, admin_auth, analytics, blog, contact, health, newsletter, pages,
    projects, revalidate, sitemap,
)
from agency.config import get_settings
from agency.core.errors import DatabaseError
from agency.infrastructure import database
from agency.infrastructure.observability import setup_logging
from agency.infrastructure.render_cache import init_render_cache
from agency.services.auth import bootstrap_admin

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
    init_render_cache(
        settings.render_cache_ttl_seconds, settings.render_cache_max_entries,
    )
    try:
        async with database.db_manager.session() as db:
            await bootstrap_admin(db, settings)
    except DatabaseError as e:
        logger.warning(f"Bootstrap admin skipped: {e.message}")
    logger.info("Agency API started")
    yield
    await database.db_manager.dispose()
    logger.info("Agency API shutting down")


app = FastAPI(
    title="Agency Site API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AdminGateMiddleware)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(projects.router)
app.include_router(revalidate.router)
app.include_router(contact.router)
app.include_router(newsletter.router)
app.include_router(blog.router)
app.include_router(analytics.router)
app.include_router(pages.router)
app.include_router(sitemap.router)
app.include_router(admin_auth.router)
app.include_router(admin.router)

register_error_handlers(app)
