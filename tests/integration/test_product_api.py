"""Integration tests for the product lookup endpoint.

Covers:
- GET /api/products/{slug}: 200 envelope with stored values.
- Hidden and unknown slugs both return the same 404 envelope.
- Storage faults, undecodable rows and serialization errors return a
  generic 500 envelope.
- The endpoint is public (no authentication).
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import OperationalError, connection

pytestmark = pytest.mark.integration

NOT_FOUND_BODY = {"success": False, "error": "Product not found"}
FAILURE_BODY = {"success": False, "error": "Failed to fetch product"}


# ===========================================================================
# 200
# ===========================================================================


class TestProductFound:
    def test_returns_envelope_with_stored_values(self, api_client, make_product, category):
        product = make_product(
            category=category,
            photo="https://cdn.example.com/serum-x-2.jpg",
            supervisor_price=Decimal("110000"),
            is_bundling=True,
        )

        response = api_client.get("/api/products/serum-x")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["id"] == str(product.id)
        assert data["slug"] == "serum-x"
        assert data["name"] == "Serum X"
        assert data["description"] == "Serum pencerah.\nPakai malam hari."
        assert data["image"] == "https://cdn.example.com/serum-x.jpg"
        assert data["photo"] == "https://cdn.example.com/serum-x-2.jpg"
        assert data["bpom"] == "NA18201200001"
        assert data["general_price"] == 150000
        assert data["consultant_price"] == 120000
        assert data["supervisor_price"] == 110000
        assert data["manager_price"] is None
        assert data["director_price"] is None
        assert data["is_bundling"] is True
        assert data["is_visible"] is True
        assert data["category_id"] == str(category.id)
        assert data["category"] == {
            "id": str(category.id),
            "name": "Serum",
            "slug": "serum",
            "description": "Serum wajah",
        }
        assert data["created_at"]
        assert data["updated_at"]

    def test_category_null_when_absent(self, api_client, make_product):
        make_product()
        body = api_client.get("/api/products/serum-x").json()
        assert body["data"]["category"] is None

    def test_no_authentication_required(self, api_client, make_product):
        make_product()
        response = api_client.get("/api/products/serum-x")
        assert response.status_code == 200


# ===========================================================================
# 404
# ===========================================================================


class TestProductNotFound:
    def test_unknown_slug(self, api_client):
        response = api_client.get("/api/products/ghost")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND_BODY

    def test_hidden_product_is_not_found(self, api_client, make_product):
        make_product(slug="hidden", is_visible=False)
        response = api_client.get("/api/products/hidden")
        assert response.status_code == 404
        assert response.json() == NOT_FOUND_BODY

    def test_hidden_and_unknown_responses_identical(self, api_client, make_product):
        make_product(slug="hidden", is_visible=False)
        hidden = api_client.get("/api/products/hidden")
        unknown = api_client.get("/api/products/ghost")
        assert hidden.status_code == unknown.status_code
        assert hidden.content == unknown.content

    def test_slug_is_matched_verbatim(self, api_client, make_product):
        make_product(slug="serum-x")
        response = api_client.get("/api/products/SERUM-X")
        assert response.status_code == 404


# ===========================================================================
# 500
# ===========================================================================


class TestStorageFailure:
    def test_query_failure_returns_generic_500(self, api_client):
        with patch(
            "modules.products.repositories.django_repository."
            "ProductDjangoRepository.get_by_slug",
            side_effect=OperationalError("FATAL: password authentication failed"),
        ):
            response = api_client.get("/api/products/serum-x")

        assert response.status_code == 500
        assert response.json() == FAILURE_BODY
        assert b"password authentication" not in response.content

    def test_undecodable_row_returns_generic_500(self, api_client, make_product):
        make_product()
        with connection.cursor() as cursor:
            cursor.execute(
                "UPDATE products SET general_price = %s WHERE slug = %s",
                ["abc", "serum-x"],
            )

        response = api_client.get("/api/products/serum-x")

        assert response.status_code == 500
        assert response.json() == FAILURE_BODY

    def test_serialization_failure_returns_generic_500(self, api_client, make_product):
        make_product()
        with patch(
            "modules.products.views.ProductSerializer",
            side_effect=TypeError("unexpected value"),
        ):
            response = api_client.get("/api/products/serum-x")

        assert response.status_code == 500
        assert response.json() == FAILURE_BODY
