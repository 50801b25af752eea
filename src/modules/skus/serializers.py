"""SKU DRF serializers (output only)."""

from __future__ import annotations

from rest_framework import serializers

from modules.skus.models import SKU


class SKUSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)
    category_name = serializers.CharField(source="product.category.name", read_only=True)

    class Meta:
        model = SKU
        fields = [
            "id",
            "product_id",
            "product_name",
            "category_name",
            "color",
            "size",
            "price",
            "stock_quantity",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
