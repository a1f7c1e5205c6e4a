"""Route Dependencies — resolve app-scoped collaborators for handlers.

Invariants:
    - The CatalogService comes from app.state, set by create_app() or the lifespan
    - No module-level collaborator handle exists

Design Decisions:
    - app.state over a global singleton: tests build isolated apps with fakes
"""

from fastapi import Request

from catalog.config import Settings
from catalog.core.catalog_protocols import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    service = request.app.state.catalog_service
    if service is None:
        raise RuntimeError("Catalog service not initialized")
    return service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
