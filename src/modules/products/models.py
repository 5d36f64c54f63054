"""Catalog models: Product and its optional Category.

Both tables are maintained by the catalog back office; the storefront
only reads them.

Rules that matter to the storefront:
- ``slug`` is unique and is the public lookup key (matched verbatim).
- ``is_visible = False`` hides a product entirely; to the storefront it
  is the same as a product that does not exist.
- Every price tier is nullable.  A missing tier means "contact us".
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel

PRICE_FIELD_OPTIONS = {
    "max_digits": 12,
    "decimal_places": 2,
    "null": True,
    "blank": True,
    "default": None,
}


class Category(BaseModel):
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Product(BaseModel):
    """A sellable skincare product.

    ``bpom`` holds the BPOM (Indonesian food & drug authority)
    registration code when the product is certified.  ``photo`` is a
    secondary picture kept alongside the main ``image``.
    """

    slug = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    image = models.URLField(max_length=1024, null=True, blank=True, default=None)  # noqa: DJ01
    photo = models.URLField(max_length=1024, null=True, blank=True, default=None)  # noqa: DJ01
    bpom = models.CharField(max_length=64, null=True, blank=True, default=None)  # noqa: DJ01

    general_price = models.DecimalField(**PRICE_FIELD_OPTIONS)
    consultant_price = models.DecimalField(**PRICE_FIELD_OPTIONS)
    supervisor_price = models.DecimalField(**PRICE_FIELD_OPTIONS)
    manager_price = models.DecimalField(**PRICE_FIELD_OPTIONS)
    director_price = models.DecimalField(**PRICE_FIELD_OPTIONS)

    is_bundling = models.BooleanField(default=False)
    is_visible = models.BooleanField(default=True)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_visible"], name="products_visible_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.slug} - {self.name}"
