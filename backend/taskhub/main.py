"""TaskHub Gateway — FastAPI application entry point.

Invariants:
    - Routes registered explicitly: health probes + one generated router per resource kind
    - Global error handlers map GatewayError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event
    - Three error handler layers: GatewayError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskhub.api.error_handlers import register_error_handlers
from taskhub.api.routes import health
from taskhub.api.routes.resources import build_resources_router
from taskhub.config import get_settings
from taskhub.infrastructure import database
from taskhub.infrastructure.observability import setup_logging

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
    logger.info("TaskHub gateway started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("TaskHub gateway shutting down")


app = FastAPI(
    title="TaskHub Gateway", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(build_resources_router(prefix=settings.api_prefix))

register_error_handlers(app)
