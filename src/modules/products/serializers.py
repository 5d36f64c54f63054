"""Product DRF serializers for the lookup endpoint (read-only).

The serializer operates at the Interface layer (API Views).  Lookup
rules live in the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Category, Product


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description"]
        read_only_fields = fields


class ProductSerializer(serializers.ModelSerializer):
    """Full product record with the category inlined (or ``null``)."""

    category = CategorySerializer(read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "slug",
            "name",
            "description",
            "image",
            "photo",
            "bpom",
            "general_price",
            "consultant_price",
            "supervisor_price",
            "manager_price",
            "director_price",
            "is_bundling",
            "is_visible",
            "category_id",
            "category",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
