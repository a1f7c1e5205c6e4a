"""Product Routes — list, fetch and create catalog products.

Invariants:
    - GET /products preserves the collaborator's order
    - GET /product/{itemId} answers 404 when the product is absent (never hangs)
    - itemId may contain "/" (path convertor), so every stored product is addressable
    - POST /product answers 201 with an empty body; duplicates → 409
    - Collaborator errors propagate to the global handlers (never swallowed, never retried)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from catalog.api.dependencies import get_catalog_service
from catalog.api.responses import PrettyJSONResponse
from catalog.core.catalog_protocols import CatalogService
from catalog.core.domain_types import ItemId
from catalog.core.errors import ProductNotFoundError
from catalog.schemas.product import ProductCreate

logger = logging.getLogger(__name__)
router = APIRouter(tags=["products"])


@router.get("/products", response_class=PrettyJSONResponse)
async def list_products(
    service: CatalogService = Depends(get_catalog_service),
):
    """All products known to the catalog, in store order."""
    products = await service.get_products()
    logger.info("Listed products", extra={"count": len(products)})
    return PrettyJSONResponse([p.to_document() for p in products])


@router.get("/product/{item_id:path}", response_class=PrettyJSONResponse)
async def get_product(
    item_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Single product by itemId."""
    product = await service.get_product(ItemId(item_id))
    if product is None:
        logger.info("Product not found", extra={"item_id": item_id})
        raise ProductNotFoundError(item_id)
    return PrettyJSONResponse(product.to_document())


@router.post("/product", status_code=status.HTTP_201_CREATED)
async def add_product(
    body: ProductCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    """Create a product from the request document."""
    product = body.to_product()
    await service.add_product(product)
    logger.info("Product created", extra={"item_id": product.item_id})
    return Response(status_code=status.HTTP_201_CREATED)
