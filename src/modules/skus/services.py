"""SKU service layer (Use Cases).

Each command runs the ``SKUValidationService`` check and the write in one
``transaction.atomic`` block.

Business rules enforced:
- A SKU belongs to an existing product.
- ``(color, size)`` is unique within a product, including after moving a
  SKU to another product.
- Price and stock ranges are validated by ``SKURequestDTO``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import ResourceNotFound
from modules.skus.exceptions import DuplicateColorAndSize
from modules.skus.models import SKU
from modules.skus.validation import SKUValidationService

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.products.repositories.interfaces import IProductRepository
    from modules.skus.dtos import SKURequestDTO
    from modules.skus.repositories.interfaces import ISKURepository

logger = structlog.get_logger(__name__)


class SKUService:
    """Application service for SKU use-cases."""

    def __init__(
        self,
        repository: ISKURepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = repository
        self._product_repo = product_repository
        self._validator = SKUValidationService(
            sku_repository=repository,
            product_repository=product_repository,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_sku(self, dto: SKURequestDTO) -> SKU:
        product = self._validator.validate_creation(dto)

        sku = SKU(
            product=product,
            color=dto.color,
            size=dto.size,
            price=dto.price,
            stock_quantity=dto.stock_quantity,
        )
        sku = self._save(sku)
        logger.info("sku.created", sku_id=str(sku.id), product_id=str(product.id))
        return sku

    @transaction.atomic
    def update_sku(self, id: str, dto: SKURequestDTO) -> SKU:
        sku, product = self._validator.validate_update(id, dto)

        if sku.product_id != product.id:
            logger.info(
                "sku.reassigned",
                sku_id=str(sku.id),
                old_product_id=str(sku.product_id),
                new_product_id=str(product.id),
            )
        sku.product = product
        sku.color = dto.color
        sku.size = dto.size
        sku.price = dto.price
        sku.stock_quantity = dto.stock_quantity

        sku = self._save(sku)
        logger.info("sku.updated", sku_id=str(sku.id))
        return sku

    @transaction.atomic
    def delete_sku(self, id: str) -> None:
        sku = self._validator.validate_deletion(id)
        self._repo.delete(str(sku.id))
        logger.info("sku.deleted", sku_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_sku(self, id: str) -> SKU:
        """Raises ``ResourceNotFound`` when the SKU does not exist."""
        sku = self._repo.get_by_id(id, with_product_and_category=True)
        if not sku:
            raise ResourceNotFound("SKU", "id", id)
        return sku

    def list_skus(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[SKU]:
        return self._repo.list(filters)

    def list_skus_for_product(self, product_id: str) -> QuerySet[SKU]:
        """Raises ``ResourceNotFound`` when the product does not exist."""
        if not self._product_repo.get_by_id(product_id):
            raise ResourceNotFound("Product", "id", product_id)
        return self._repo.list_by_product(product_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _save(self, sku: SKU) -> SKU:
        try:
            return self._repo.save(sku)
        except IntegrityError as exc:
            raise DuplicateColorAndSize(sku.color, sku.size, sku.product_id) from exc
