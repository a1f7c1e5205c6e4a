"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps str — the single product identity
    - HealthStatus values are the literal wire values ("OK" / "KO")

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


ItemId = NewType("ItemId", str)

ITEM_ID_FIELD = "itemId"


class HealthStatus(str, Enum):
    """Outcome of a health probe — always reported with HTTP 200."""
    OK = "OK"
    KO = "KO"
