"""SKU model: a sellable colour × size variant of a Product.

Rules backed by the schema:
- ``(product, color, size)`` is unique (``skus_product_color_size_uniq``).
- ``price > 0`` with at most two decimal places (``DecimalField(10, 2)``
  plus the ``skus_price_positive`` check).
- ``0 <= stock_quantity <= 999999``.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)

MAX_STOCK_QUANTITY = 999_999


class SKU(BaseModel):
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="skus",
    )
    color = models.CharField(max_length=50)
    size = models.CharField(max_length=10)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock_quantity = models.PositiveIntegerField(
        default=0,
        validators=[MaxValueValidator(MAX_STOCK_QUANTITY)],
    )

    class Meta:
        db_table = "skus"
        ordering = ["product_id", "color", "size"]
        verbose_name = "SKU"
        verbose_name_plural = "SKUs"
        constraints = [
            models.UniqueConstraint(
                fields=["product", "color", "size"],
                name="skus_product_color_size_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="skus_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock_quantity__lte=MAX_STOCK_QUANTITY),
                name="skus_stock_quantity_max",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "sku_created",
                sku_id=str(self.id),
                product_id=str(self.product_id),
                color=self.color,
                size=self.size,
            )

    def __str__(self) -> str:
        return f"{self.color}/{self.size}"
