"""Product Schemas — Pydantic model validating the create-product body.

Invariants:
    - Body must be a JSON object with a non-empty string itemId
    - Every other key is accepted as-is (open product document)
    - itemId value is not transformed (no stripping) — stored exactly as sent
    - No NaN or Infinity anywhere in the document (responses are strict JSON)

Design Decisions:
    - extra="allow" over a dict body: FastAPI reports malformed JSON, non-object
      bodies and a missing itemId uniformly as RequestValidationError (400)
    - Strict str for itemId: 123 is rejected rather than coerced to "123"
"""

import math
from typing import Any

from pydantic import (
    BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator,
)

from catalog.core.domain_types import ITEM_ID_FIELD
from catalog.core.product import Product


class ProductCreate(BaseModel):
    """Create-product request body."""
    model_config = ConfigDict(extra="allow")

    item_id: StrictStr = Field(alias=ITEM_ID_FIELD, min_length=1, max_length=64)

    @field_validator("item_id")
    @classmethod
    def reject_blank_item_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("itemId cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def reject_non_finite_numbers(self) -> "ProductCreate":
        for key, value in (self.model_extra or {}).items():
            if not _is_finite(value):
                raise ValueError(f"'{key}' contains NaN or Infinity")
        return self

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_product(self) -> Product:
        return Product.from_document(self.to_document())


def _is_finite(value: Any) -> bool:
    """NaN/Infinity are accepted by the body parser but cannot be re-encoded."""
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_is_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_is_finite(v) for v in value)
    return True
