"""Product ORM — one row per catalog product, document stored as JSON.

Invariants:
    - item_id is unique (duplicate insert → IntegrityError → ProductConflictError)
    - id is autoincrement and defines the listing order (insertion order)
    - document holds the full product JSON, itemId included

Design Decisions:
    - JSON column over per-attribute columns: products have no fixed schema
    - item_id denormalized out of document: indexed lookups without JSON operators
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base


class ProductRecord(Base):
    """Persisted catalog product."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    item_id: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True,
    )
    document: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
