"""ORM Models — persistence shapes for the SQL collaborator."""

from catalog.models.product import ProductRecord

__all__ = ["ProductRecord"]
