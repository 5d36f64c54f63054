"""Product lookup API view.

Exposes ``ProductService.get_visible_product_by_slug`` as
``GET /api/products/{slug}`` wrapped in a ``{success, data | error}``
envelope.  Domain exceptions are translated into status codes, and a
record that cannot be serialized is logged and answered like any other
lookup failure, so the client always receives the envelope.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import structlog
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.products.exceptions import ProductLookupFailed, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

NOT_FOUND_MESSAGE = "Product not found"
FAILURE_MESSAGE = "Failed to fetch product"


def _error(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def lookup_product(service: ProductService, slug: str) -> Tuple[Dict[str, Any], int]:
    """Run the look-up and return ``(body, status_code)``."""
    try:
        product = service.get_visible_product_by_slug(slug)
    except ProductNotFound:
        return _error(NOT_FOUND_MESSAGE), status.HTTP_404_NOT_FOUND
    except ProductLookupFailed:
        return _error(FAILURE_MESSAGE), status.HTTP_500_INTERNAL_SERVER_ERROR

    try:
        data = ProductSerializer(product).data
    except Exception:
        logger.exception("product.serialization_failed", slug=slug)
        return _error(FAILURE_MESSAGE), status.HTTP_500_INTERNAL_SERVER_ERROR
    return {"success": True, "data": data}, status.HTTP_200_OK


_error_schema = inline_serializer(
    name="ProductErrorEnvelope",
    fields={
        "success": serializers.BooleanField(),
        "error": serializers.CharField(),
    },
)


class ProductBySlugView(APIView):
    """Public product detail look-up."""

    authentication_classes: list = []
    permission_classes: list = []

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @extend_schema(
        responses={
            200: inline_serializer(
                name="ProductEnvelope",
                fields={
                    "success": serializers.BooleanField(),
                    "data": ProductSerializer(),
                },
            ),
            404: _error_schema,
            500: _error_schema,
        },
    )
    def get(self, request: Request, slug: str) -> Response:
        """GET /api/products/{slug}"""
        body, status_code = lookup_product(self._service, slug)
        return Response(body, status=status_code)
