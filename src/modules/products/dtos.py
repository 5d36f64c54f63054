"""Product DTOs shared by the lookup endpoint and the storefront.

Framework-agnostic data transfer objects using Pydantic v2.  The
endpoint serializes products with ``ProductSerializer``; storefront
clients validate that JSON envelope into these models.  DTOs are
immutable (``frozen=True``).

- ``CategoryDTO``: the product's optional category.
- ``ProductDetailDTO``: the full product payload.
- ``ProductEnvelope``: the ``{success, data | error}`` transport wrapper.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator


class CategoryDTO(BaseModel):
    """Immutable category reference."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    slug: str
    description: Optional[str] = None


class ProductDetailDTO(BaseModel):
    """Immutable product payload, category inlined or ``None``."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    slug: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    photo: Optional[str] = None
    bpom: Optional[str] = None
    general_price: Optional[Decimal] = None
    consultant_price: Optional[Decimal] = None
    supervisor_price: Optional[Decimal] = None
    manager_price: Optional[Decimal] = None
    director_price: Optional[Decimal] = None
    is_bundling: bool = False
    is_visible: bool = True
    category_id: Optional[UUID] = None
    category: Optional[CategoryDTO] = None
    created_at: datetime
    updated_at: datetime


class ProductEnvelope(BaseModel):
    """Response wrapper of ``GET /api/products/{slug}``."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[ProductDetailDTO] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def data_required_on_success(self) -> ProductEnvelope:
        if self.success and self.data is None:
            raise ValueError("A successful envelope must carry data.")
        return self
