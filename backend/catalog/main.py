"""Catalog API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The CatalogService is injected into create_app() or built once in the lifespan
    - Global error handlers map CatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Collaborator stored on app.state: handlers receive it through Depends,
      tests pass a fake to create_app() and skip the database entirely
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.error_handlers import register_error_handlers
from catalog.api.routes import health, products
from catalog.config import Settings, get_settings
from catalog.core.catalog_protocols import CatalogService
from catalog.infrastructure.catalog_service import SqlCatalogService
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = None
    if app.state.catalog_service is None:
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        app.state.catalog_service = SqlCatalogService(db_manager)
    try:
        if db_manager is not None and settings.database_create_schema:
            await app.state.catalog_service.create_schema()
        logger.info("Catalog API started")
        yield
        logger.info("Catalog API shutting down")
    finally:
        if db_manager is not None:
            await db_manager.dispose()
            app.state.catalog_service = None


def create_app(
    catalog_service: CatalogService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Catalog API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.catalog_service = catalog_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    run()
