"""SQL Catalog Service — CatalogService implementation over async SQLAlchemy.

Invariants:
    - get_products() returns products in insertion order (ProductRecord.id)
    - add_product() never overwrites: duplicate itemId → ProductConflictError
    - ping() raises on failure (DatabaseError), returns None on success
    - Each call uses its own AsyncSession — safe for concurrent requests

Design Decisions:
    - Stored document is the product's full to_document() form, so reads
      rebuild the Product with Product.from_document (lossless round-trip)
    - create_schema() for development and SQLite only (production: alembic)
"""

import logging

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError

from catalog.core.domain_types import ItemId
from catalog.core.errors import ProductConflictError
from catalog.core.product import Product
from catalog.db.base import Base
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.models.product import ProductRecord

logger = logging.getLogger(__name__)


class SqlCatalogService:
    """Product storage backed by a relational database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create_schema(self) -> None:
        async with self._db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Catalog schema ensured")

    async def get_products(self) -> list[Product]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProductRecord).order_by(ProductRecord.id),
            )
            records = result.scalars().all()
        return [Product.from_document(r.document) for r in records]

    async def get_product(self, item_id: ItemId) -> Product | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProductRecord).where(ProductRecord.item_id == item_id),
            )
            record = result.scalar_one_or_none()
        if record is None:
            return None
        return Product.from_document(record.document)

    async def add_product(self, product: Product) -> None:
        async with self._db.session() as db:
            db.add(ProductRecord(
                item_id=product.item_id, document=product.to_document(),
            ))
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                raise ProductConflictError(product.item_id)

    async def ping(self) -> None:
        async with self._db.session() as db:
            await db.execute(text("SELECT 1"))
