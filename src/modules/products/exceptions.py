"""Product errors (codes ``PROD_001`` – ``PROD_005``).

Raised by ``ProductValidationService`` when a mutation is not admissible.
The API layer renders them through ``domain_exception_handler``.
"""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import DomainError, ErrorKind


class DuplicateNameInCategory(DomainError):
    kind = ErrorKind.DUPLICATE_NAME_IN_CATEGORY

    def __init__(self, name: str, category_id: Any) -> None:
        super().__init__(
            f"Product with name '{name}' already exists in category ID: {category_id}",
            name=name,
            category_id=category_id,
        )


class CategoryNotActive(DomainError):
    kind = ErrorKind.CATEGORY_NOT_ACTIVE

    def __init__(self, category_id: Any) -> None:
        super().__init__(
            f"Cannot create product. Category ID: {category_id} is not active",
            category_id=category_id,
        )


class HasActiveSKUs(DomainError):
    kind = ErrorKind.HAS_ACTIVE_SKUS

    def __init__(self, product_id: Any) -> None:
        super().__init__(
            f"Cannot delete product ID: {product_id}. It has active SKUs",
            product_id=product_id,
        )


class CategoryChangeWithSKUs(DomainError):
    kind = ErrorKind.CATEGORY_CHANGE_WITH_SKUS

    def __init__(self, product_id: Any, old_category_id: Any, new_category_id: Any) -> None:
        super().__init__(
            f"Cannot change category for product ID: {product_id} from "
            f"{old_category_id} to {new_category_id}. Product has active SKUs",
            product_id=product_id,
            old_category_id=old_category_id,
            new_category_id=new_category_id,
        )


class InvalidDescriptionFormat(DomainError):
    """The description failed the content filter; ``reason`` says which check."""

    kind = ErrorKind.INVALID_DESCRIPTION_FORMAT

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Invalid product description format: {reason}",
            reason=reason,
        )
        self.reason = reason
