"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) for missing or malformed IDs instead of raising; the
Service Layer decides how to report a missing entity.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product (with its category) by primary key."""
        try:
            return Product.objects.select_related("category").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_with_skus(self, id: str) -> Optional[Product]:
        try:
            return (
                Product.objects.select_related("category")
                .prefetch_related("skus")
                .filter(id=id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Product]:
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"category_id": "0190..."}
            {"name__icontains": "shirt"}
        """
        queryset = Product.objects.select_related("category")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def name_exists_in_category(self, name: str, category_id: str) -> bool:
        try:
            return Product.objects.filter(name=name, category_id=category_id).exists()
        except (ValueError, ValidationError):
            return False

    def has_skus(self, id: str) -> bool:
        try:
            return Product.objects.filter(id=id, skus__isnull=False).exists()
        except (ValueError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            category_id=str(entity.category_id),
        )
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a product; ``False`` when it does not exist."""
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=str(id))
        return True
