"""Django ORM implementation of the Product repository.

Error handling follows the Null Object pattern: a missing product is
``None``, never an HTTP-level exception.  Storage faults
propagate; the Service Layer maps them.
"""

from __future__ import annotations

from typing import Optional

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_slug(self, slug: str) -> Optional[Product]:
        """Single query: the product joined with its category."""
        return Product.objects.select_related("category").filter(slug=slug).first()
