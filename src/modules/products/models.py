"""Product model: a named item filed under exactly one Category.

Rules backed by the schema:
- Product names are unique *within* their category
  (``products_name_category_uniq``).
- ``category`` uses ``PROTECT`` so a category that owns products cannot
  be removed, and the reverse ``skus`` relation of ``SKU.product`` does
  the same for products that own SKUs.
- ``description`` is nullable: ``None`` (not supplied) and ``""``
  (supplied blank) are different inputs to the description filter.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "category"],
                name="products_name_category_uniq",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=str(self.id),
                category_id=str(self.category_id),
                name=self.name,
            )

    def __str__(self) -> str:
        return self.name
