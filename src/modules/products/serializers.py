"""Product DRF serializers for API output.

Input never goes through these: views build ``ProductRequestDTO``
instead and the service layer applies the business rules.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product
from modules.skus.serializers import SKUSerializer


class ProductSerializer(serializers.ModelSerializer):
    """Flat representation used in listings."""

    category_id = serializers.UUIDField(read_only=True)
    category_name = serializers.CharField(source="category.name", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "category_id",
            "category_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductDetailSerializer(ProductSerializer):
    """Single-product representation with its SKUs embedded."""

    skus = SKUSerializer(many=True, read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ["skus"]
        read_only_fields = fields
