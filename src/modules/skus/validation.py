"""SKU admission rules.

``SKUValidationService`` checks existence of the referenced entities and
the ``(color, size)`` uniqueness of a SKU within its product.  Like the
product checker it raises the first violated rule, otherwise returns the
entities it resolved, and expects to run inside the caller's
``transaction.atomic`` block (the owning product row is locked).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import structlog

from modules.core.exceptions import ResourceNotFound
from modules.skus.exceptions import DuplicateColorAndSize

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository
    from modules.skus.dtos import SKURequestDTO
    from modules.skus.models import SKU
    from modules.skus.repositories.interfaces import ISKURepository

logger = structlog.get_logger(__name__)


class SKUValidationService:
    """Decides whether a SKU mutation is admissible."""

    def __init__(
        self,
        sku_repository: ISKURepository,
        product_repository: IProductRepository,
    ) -> None:
        self._skus = sku_repository
        self._products = product_repository

    def validate_creation(self, dto: SKURequestDTO) -> Product:
        """Check a create request; returns the (locked) owning product.

        Raises:
            ResourceNotFound: the product does not exist.
            DuplicateColorAndSize: the product already has this colour/size.
        """
        product = self._products.get_for_update(str(dto.product_id))
        if not product:
            raise ResourceNotFound("Product", "id", dto.product_id)

        if self._skus.color_size_exists_for_product(str(product.id), dto.color, dto.size):
            logger.warning(
                "sku.duplicate_color_size",
                product_id=str(product.id),
                color=dto.color,
                size=dto.size,
            )
            raise DuplicateColorAndSize(dto.color, dto.size, product.id)

        return product

    def validate_update(self, sku_id: str, dto: SKURequestDTO) -> Tuple[SKU, Product]:
        """Check an update request; returns ``(sku, target_product)``.

        Moving the SKU to another product re-checks uniqueness against the
        destination.  Staying on the same product re-checks only when the
        colour or size actually changes, excluding the SKU itself.

        Raises:
            ResourceNotFound: the SKU or the destination product is missing.
            DuplicateColorAndSize: the colour/size is taken on the target.
        """
        sku = self._skus.get_by_id(sku_id, with_product_and_category=True)
        if not sku:
            raise ResourceNotFound("SKU", "id", sku_id)

        log = logger.bind(sku_id=str(sku.id), product_id=str(dto.product_id))

        if sku.product_id != dto.product_id:
            target = self._products.get_for_update(str(dto.product_id))
            if not target:
                raise ResourceNotFound("Product", "id", dto.product_id)
            conflict = self._skus.color_size_exists_for_product(
                str(target.id), dto.color, dto.size
            )
        else:
            target = self._products.get_for_update(str(sku.product_id)) or sku.product
            changed = (sku.color, sku.size) != (dto.color, dto.size)
            conflict = changed and self._skus.color_size_exists_for_product(
                str(target.id), dto.color, dto.size, exclude_id=str(sku.id)
            )

        if conflict:
            log.warning("sku.duplicate_color_size", color=dto.color, size=dto.size)
            raise DuplicateColorAndSize(dto.color, dto.size, target.id)

        return sku, target

    def validate_deletion(self, sku_id: str) -> SKU:
        """Raises ``ResourceNotFound`` when the SKU does not exist."""
        sku = self._skus.get_by_id(sku_id)
        if not sku:
            raise ResourceNotFound("SKU", "id", sku_id)
        return sku
