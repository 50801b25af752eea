"""Django ORM implementation of the SKU repository.

Missing or malformed IDs yield ``None`` / ``False`` (Null Object
pattern); the SKU checker decides how to report them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.skus.models import SKU
from modules.skus.repositories.interfaces import ISKURepository

logger = structlog.get_logger(__name__)


class SKUDjangoRepository(ISKURepository):
    """Concrete SKU repository backed by Django ORM."""

    def get_by_id(self, id: str, with_product_and_category: bool = False) -> Optional[SKU]:
        queryset = SKU.objects.all()
        if with_product_and_category:
            queryset = queryset.select_related("product__category")
        try:
            return queryset.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet[SKU]:
        queryset = SKU.objects.select_related("product__category")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def list_by_product(self, product_id: str) -> models.QuerySet[SKU]:
        return self.list({"product_id": product_id})

    def color_size_exists_for_product(
        self,
        product_id: str,
        color: str,
        size: str,
        exclude_id: Optional[str] = None,
    ) -> bool:
        queryset = SKU.objects.filter(product_id=product_id, color=color, size=size)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        try:
            return queryset.exists()
        except (ValueError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: SKU) -> SKU:
        entity.save()
        logger.info(
            "sku.saved",
            sku_id=str(entity.id),
            product_id=str(entity.product_id),
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        sku = self.get_by_id(id)
        if not sku:
            return False
        sku.delete()
        logger.info("sku.deleted", sku_id=str(id))
        return True
