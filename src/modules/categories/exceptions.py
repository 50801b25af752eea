"""Category errors.

Raised by the Service Layer; rendered by
``modules.core.exceptions.domain_exception_handler``.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import DomainError, ErrorKind


class CategoryAlreadyExists(DomainError):
    """Another category already uses this name."""

    kind = ErrorKind.CATEGORY_ALREADY_EXISTS

    def __init__(self, name: str) -> None:
        super().__init__(f"Category with name '{name}' already exists", name=name)


class CategoryHasProducts(DomainError):
    """The category still owns products and cannot be deleted."""

    kind = ErrorKind.CATEGORY_HAS_PRODUCTS

    def __init__(self, category_id: Any) -> None:
        super().__init__(
            f"Cannot delete category ID: {category_id}. It has associated products",
            category_id=category_id,
        )
