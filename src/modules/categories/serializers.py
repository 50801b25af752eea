"""Category DRF serializers (output only; input goes through DTOs)."""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    product_count = serializers.SerializerMethodField()

    class Meta:
        model = Category
        fields = ["id", "name", "active", "product_count", "created_at", "updated_at"]
        read_only_fields = fields

    def get_product_count(self, obj: Category) -> int:
        annotated = getattr(obj, "product_count", None)
        if annotated is not None:
            return annotated
        return obj.products.count()
