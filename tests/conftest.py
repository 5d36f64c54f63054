from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.dtos import ProductDetailDTO
from modules.products.models import Category, Product
from modules.products.serializers import ProductSerializer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def category():
    """A persisted Category."""
    return Category.objects.create(
        name="Serum",
        slug="serum",
        description="Serum wajah",
    )


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible storefront defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "slug": "serum-x",
            "name": "Serum X",
            "description": "Serum pencerah.\nPakai malam hari.",
            "image": "https://cdn.example.com/serum-x.jpg",
            "bpom": "NA18201200001",
            "general_price": Decimal("150000"),
            "consultant_price": Decimal("120000"),
            "is_bundling": False,
            "is_visible": True,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def as_dto():
    """Convert a Product into the DTO a storefront client would receive."""

    def _convert(product: Product) -> ProductDetailDTO:
        return ProductDetailDTO.model_validate(ProductSerializer(product).data)

    return _convert
