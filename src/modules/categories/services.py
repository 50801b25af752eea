"""Category service layer (Use Cases).

Business rules enforced here:
- Category names are unique.
- A category that owns products cannot be deleted.
- ``active`` may be toggled at any time; it only gates future product
  associations (see ``ProductValidationService``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.categories.exceptions import CategoryAlreadyExists, CategoryHasProducts
from modules.categories.models import Category
from modules.core.exceptions import ResourceNotFound

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.categories.dtos import CategoryRequestDTO
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CategoryRequestDTO) -> Category:
        """Create a category.

        Raises:
            CategoryAlreadyExists: the name is taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.name_exists(dto.name):
            log.warning("category.duplicate_name")
            raise CategoryAlreadyExists(dto.name)

        category = Category(
            name=dto.name,
            active=True if dto.active is None else dto.active,
        )
        category = self._save(category)
        log.info("category.created", category_id=str(category.id))
        return category

    @transaction.atomic
    def update_category(self, id: str, dto: CategoryRequestDTO) -> Category:
        """Rename and/or (de)activate a category.

        Raises:
            ResourceNotFound: the category does not exist.
            CategoryAlreadyExists: the new name is taken by another category.
        """
        category = self._repo.get_for_update(id)
        if not category:
            raise ResourceNotFound("Category", "id", id)

        log = logger.bind(category_id=str(id))

        if dto.name != category.name and self._repo.name_exists(
            dto.name, exclude_id=str(category.id)
        ):
            log.warning("category.duplicate_name", name=dto.name)
            raise CategoryAlreadyExists(dto.name)

        category.name = dto.name
        if dto.active is not None:
            category.active = dto.active

        category = self._save(category)
        log.info("category.updated", active=category.active)
        return category

    @transaction.atomic
    def delete_category(self, id: str) -> None:
        """Delete a category that owns no products.

        Raises:
            ResourceNotFound: the category does not exist.
            CategoryHasProducts: the category still owns products.
        """
        category = self._repo.get_for_update(id)
        if not category:
            raise ResourceNotFound("Category", "id", id)
        if self._repo.has_products(str(category.id)):
            logger.warning("category.delete_blocked", category_id=str(id))
            raise CategoryHasProducts(category.id)
        self._repo.delete(str(category.id))
        logger.info("category.deleted", category_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Category]:
        return self._repo.list(filters)

    def get_category(self, id: str) -> Category:
        """Raises ``ResourceNotFound`` when the category does not exist."""
        category = self._repo.get_by_id(id)
        if not category:
            raise ResourceNotFound("Category", "id", id)
        return category

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _save(self, category: Category) -> Category:
        try:
            return self._repo.save(category)
        except IntegrityError as exc:
            # lost a race against a concurrent create/rename
            raise CategoryAlreadyExists(category.name) from exc
