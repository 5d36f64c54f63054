"""Product repository interface.

Narrows ``IReadRepository[Product]`` to the slug look-up used by the
storefront.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IReadRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IReadRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[Product]:
        """Retrieve a product, with its category, by exact slug.

        Visibility is **not** filtered here; that rule belongs to the
        service.
        """
