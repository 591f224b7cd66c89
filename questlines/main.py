"""Questlines API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under the configured API prefix (default /api)
    - Global error handlers map QuestlinesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager, disposed on shutdown
    - Static frontend mounted last so API routes take precedence

Design Decisions:
    - create_app() factory plus module-level `app`: uvicorn serves `app`,
      tests build apps against their own settings
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from questlines.api.error_handlers import register_error_handlers
from questlines.api.routes import health, questlines
from questlines.api.static_files import SPAStaticFiles
from questlines.config import Settings, get_settings
from questlines.infrastructure.database import init_db
from questlines.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.auto_create_schema:
        await manager.create_schema()
    logger.info("Questlines API started")
    yield
    logger.info("Questlines API shutting down")
    await manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: middleware, API routers, error handlers, frontend."""
    settings = settings or get_settings()
    app = FastAPI(title="Questlines API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
        expose_headers=["Link", "Content-Disposition"],
        max_age=300,
    )

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(questlines.router, prefix=settings.api_prefix)
    register_error_handlers(app)

    # html=True + index fallback: client-side routes resolve to the SPA shell
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/",
            SPAStaticFiles(
                directory=settings.static_dir, api_prefix=settings.api_prefix,
            ),
            name="static",
        )
    else:
        logger.warning(f"Static directory {settings.static_dir!r} not found; frontend disabled")
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "questlines.main:app", host=settings.host, port=settings.port,
    )
