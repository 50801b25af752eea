"""SKU repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.skus.models import SKU


class ISKURepository(IRepository["SKU"]):
    """Repository contract for SKUs."""

    @abstractmethod
    def get_by_id(self, id: str, with_product_and_category: bool = False) -> Optional[SKU]:
        """Retrieve a SKU, optionally joining its product and category."""

    @abstractmethod
    def color_size_exists_for_product(
        self,
        product_id: str,
        color: str,
        size: str,
        exclude_id: Optional[str] = None,
    ) -> bool:
        """Whether ``product_id`` already has a SKU with this colour and size."""

    @abstractmethod
    def list_by_product(self, product_id: str) -> models.QuerySet[SKU]:
        """SKUs belonging to one product."""
