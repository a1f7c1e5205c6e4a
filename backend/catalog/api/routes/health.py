"""Health Probe — reports whether the catalog store answers a ping in time.

Invariants:
    - GET /health always returns 200; the body carries OK or KO
    - KO when ping fails or exceeds settings.health_check_timeout_seconds
"""

import logging

from fastapi import APIRouter, Depends, status

from catalog.api.dependencies import get_app_settings, get_catalog_service
from catalog.config import Settings
from catalog.core.catalog_protocols import CatalogService
from catalog.core.health import check_health

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health(
    service: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_app_settings),
):
    result = await check_health(
        service.ping, settings.health_check_timeout_seconds,
    )
    return {"status": result.value}
