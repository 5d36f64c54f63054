"""Product service layer (Use Cases).

Resolves storefront look-ups, delegating persistence to the injected
``IProductRepository``.

Rules enforced here:
- A hidden product (``is_visible = False``) is reported exactly like a
  missing one.
- Storage faults are logged and surfaced as ``ProductLookupFailed``
  without the original error text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.products.exceptions import ProductLookupFailed, ProductNotFound

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product look-ups.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def get_visible_product_by_slug(self, slug: str) -> Product:
        """Retrieve a servable product, with its category, by slug.

        Raises:
            ProductNotFound: no product has this slug, or it is hidden.
            ProductLookupFailed: reading from the store failed (lost
                connection, a row that cannot be decoded).
        """
        log = logger.bind(slug=slug)

        try:
            product = self._repo.get_by_slug(slug)
        except Exception as exc:
            log.exception("product.lookup_failed")
            raise ProductLookupFailed("Failed to fetch product") from exc

        if product is None:
            log.debug("product.not_found", reason="missing")
            raise ProductNotFound("Product not found")
        if not product.is_visible:
            log.debug("product.not_found", reason="hidden")
            raise ProductNotFound("Product not found")

        log.info("product.retrieved", product_id=str(product.id))
        return product
