"""Boundary Protocols — contract between the API layer and the catalog store.

Invariants:
    - API layer NEVER imports a concrete store — it depends on CatalogService only
    - All store operations are async (implementations do IO)
    - Failures are raised, never returned as sentinel values (except "not found" → None)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from catalog.core.domain_types import ItemId
from catalog.core.product import Product


class CatalogService(Protocol):
    """Contract for product storage — implemented by infrastructure or tests."""
    async def get_products(self) -> list[Product]: ...
    async def get_product(self, item_id: ItemId) -> Product | None: ...
    async def add_product(self, product: Product) -> None: ...
    async def ping(self) -> None: ...
