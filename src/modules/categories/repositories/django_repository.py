"""Django ORM implementation of the Category repository.

Look-ups follow the Null Object pattern: a missing or malformed ID
yields ``None`` / ``False``, and the Service Layer decides what that
means.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Category]:
        try:
            return Category.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Category]:
        try:
            return Category.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet[Category]:
        queryset = Category.objects.annotate(product_count=models.Count("products"))
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        queryset = Category.objects.filter(name=name.strip())
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def has_products(self, id: str) -> bool:
        try:
            return Category.objects.filter(id=id, products__isnull=False).exists()
        except (ValueError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        entity.save()
        logger.info("category.saved", category_id=str(entity.id), name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Hard-delete a category; ``False`` when it does not exist."""
        category = self.get_by_id(id)
        if not category:
            return False
        category.delete()
        logger.info("category.deleted", category_id=str(id))
        return True
