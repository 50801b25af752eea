"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the product
invariants need: per-category name uniqueness and SKU ownership.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_with_skus(self, id: str) -> Optional[Product]:
        """Retrieve a product with its category and SKUs eagerly loaded."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Returns ``None`` if the product does not exist.
        """

    @abstractmethod
    def name_exists_in_category(self, name: str, category_id: str) -> bool:
        """Whether a product called ``name`` is filed under ``category_id``."""

    @abstractmethod
    def has_skus(self, id: str) -> bool:
        """Whether the product owns at least one SKU."""
