"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category aggregate."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Category]:
        """Retrieve a category holding a row-level lock (SELECT FOR UPDATE).

        Product create/update lock the target category so concurrent
        mutations against it serialize.
        """

    @abstractmethod
    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        """Whether a category (other than ``exclude_id``) uses ``name``."""

    @abstractmethod
    def has_products(self, id: str) -> bool:
        """Whether the category owns at least one product."""
