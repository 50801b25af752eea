"""Category model: top-level grouping of the catalog.

- Category names are unique system-wide.
- ``active`` gates *new or changed* product associations only; products
  already filed under a category are unaffected by deactivation.
- A category cannot be deleted while it owns products (``PROTECT`` on
  ``Product.category`` backs up the service-level check).
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Category(BaseModel):
    name = models.CharField(max_length=50, unique=True)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"
        indexes = [
            models.Index(fields=["active"], name="categories_active_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)
        if is_new:
            logger.info("category_created", category_id=str(self.id), name=self.name)

    def __str__(self) -> str:
        return self.name
