"""Unit tests for product DTOs.

Covers:
- ProductDetailDTO validated from the endpoint's serialized payload,
  with and without category.
- DTO fields stay in step with ProductSerializer.
- Immutability (frozen).
- ProductEnvelope validation of success / failure shapes.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CategoryDTO, ProductDetailDTO, ProductEnvelope
from modules.products.serializers import CategorySerializer, ProductSerializer

pytestmark = pytest.mark.unit


class TestProductDetailDTO:
    def test_validates_serialized_product(self, make_product, category, as_dto):
        product = make_product(category=category, photo="https://cdn.example.com/b.jpg")
        dto = as_dto(product)

        assert dto.id == product.id
        assert dto.slug == "serum-x"
        assert dto.name == "Serum X"
        assert dto.photo == "https://cdn.example.com/b.jpg"
        assert dto.general_price == Decimal("150000")
        assert dto.supervisor_price is None
        assert dto.category_id == category.id
        assert dto.category == CategoryDTO(
            id=category.id, name="Serum", slug="serum", description="Serum wajah"
        )

    def test_without_category(self, make_product, as_dto):
        dto = as_dto(make_product())
        assert dto.category is None
        assert dto.category_id is None

    def test_fields_match_serializer(self):
        assert set(ProductDetailDTO.model_fields) == set(ProductSerializer().fields)
        assert set(CategoryDTO.model_fields) == set(CategorySerializer().fields)

    def test_is_frozen(self, make_product, as_dto):
        dto = as_dto(make_product())
        with pytest.raises(ValidationError):
            dto.name = "Changed"


class TestProductEnvelope:
    def test_failure_envelope(self):
        env = ProductEnvelope.model_validate(
            {"success": False, "error": "Product not found"}
        )
        assert env.success is False
        assert env.data is None
        assert env.error == "Product not found"

    def test_success_requires_data(self):
        with pytest.raises(ValidationError, match="must carry data"):
            ProductEnvelope.model_validate({"success": True})

    def test_success_parses_json_payload(self):
        env = ProductEnvelope.model_validate(
            {
                "success": True,
                "data": {
                    "id": "0190f1c2-7d3e-7a4b-8c5d-6e7f8a9b0c1d",
                    "slug": "serum-x",
                    "name": "Serum X",
                    "general_price": 150000.0,
                    "category": None,
                    "created_at": "2025-01-01T00:00:00+07:00",
                    "updated_at": "2025-01-01T00:00:00+07:00",
                },
            }
        )
        assert env.data.general_price == Decimal("150000")
        assert env.data.category is None
