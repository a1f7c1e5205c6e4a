"""Product — the catalog entity, keyed by itemId with open attributes.

Invariants:
    - item_id is a non-empty string and never changes after construction
    - attributes never contain the itemId key (it lives in item_id only)
    - to_document() / from_document() round-trip losslessly

Design Decisions:
    - Frozen dataclass over ORM object: core stays free of persistence types
    - Open attributes dict: the catalog does not enforce a product schema
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from catalog.core.domain_types import ITEM_ID_FIELD, ItemId
from catalog.core.errors import InvalidProductError


@dataclass(frozen=True)
class Product:
    item_id: ItemId
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Any) -> "Product":
        """Build a Product from a JSON document (inbound body or stored row)."""
        if not isinstance(document, Mapping):
            raise InvalidProductError(
                "Product document must be a JSON object", ITEM_ID_FIELD,
            )
        item_id = document.get(ITEM_ID_FIELD)
        if not isinstance(item_id, str) or not item_id.strip():
            raise InvalidProductError(
                f"'{ITEM_ID_FIELD}' must be a non-empty string", ITEM_ID_FIELD,
            )
        attributes = {k: v for k, v in document.items() if k != ITEM_ID_FIELD}
        return cls(item_id=ItemId(item_id), attributes=attributes)

    def to_document(self) -> dict[str, Any]:
        return {ITEM_ID_FIELD: self.item_id, **self.attributes}
