"""Product service layer (Use Cases).

Orchestrates product commands: every command runs the matching
``ProductValidationService`` check and the write inside one
``transaction.atomic`` block, so the state a rule was evaluated against
cannot change before the write lands.

Business rules enforced (via ``ProductValidationService``):
- Products are created only in existing, active categories.
- Product names are unique within a category.
- A product's category can change only while it owns no SKUs.
- A product that owns SKUs cannot be deleted.
- Descriptions pass the content filter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import ResourceNotFound
from modules.products.exceptions import DuplicateNameInCategory
from modules.products.models import Product
from modules.products.validation import ProductValidationService

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import ProductRequestDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._validator = ProductValidationService(
            product_repository=repository,
            category_repository=category_repository,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductRequestDTO) -> Product:
        """Create a product in an active category."""
        category = self._validator.validate_creation(dto)

        product = Product(
            name=dto.name,
            description=dto.description,
            category=category,
        )
        product = self._save(product)
        logger.info(
            "product.created",
            product_id=str(product.id),
            category_id=str(category.id),
        )
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductRequestDTO) -> Product:
        """Replace name, description and category of a product."""
        product, category = self._validator.validate_update(id, dto)

        product.name = dto.name
        product.description = dto.description
        product.category = category

        product = self._save(product)
        logger.info(
            "product.updated",
            product_id=str(product.id),
            category_id=str(category.id),
        )
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Delete a product that owns no SKUs."""
        product = self._validator.validate_deletion(id)
        self._repo.delete(str(product.id))
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Product]:
        """Return products, optionally filtered (e.g. by category and name)."""
        return self._repo.list(filters)

    def get_product(self, id: str) -> Product:
        """Retrieve a product with its SKUs.

        Raises:
            ResourceNotFound: if the product does not exist.
        """
        product = self._repo.get_with_skus(id)
        if not product:
            raise ResourceNotFound("Product", "id", id)
        logger.info("product.retrieved", product_id=str(id))
        return product

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _save(self, product: Product) -> Product:
        try:
            return self._repo.save(product)
        except IntegrityError as exc:
            # the unique (name, category) constraint caught a concurrent writer
            raise DuplicateNameInCategory(product.name, product.category_id) from exc
