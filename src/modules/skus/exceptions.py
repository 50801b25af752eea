"""SKU errors (codes ``SKU_001`` – ``SKU_003``).

``InsufficientStock`` and ``InvalidPriceUpdate`` are part of the
taxonomy but no current operation raises them: there is no stock
decrement path, and SKU updates accept any valid price.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from modules.core.exceptions import DomainError, ErrorKind

MAX_PRICE_REDUCTION = Decimal("0.5")


class DuplicateColorAndSize(DomainError):
    kind = ErrorKind.DUPLICATE_COLOR_AND_SIZE

    def __init__(self, color: str, size: str, product_id: Any) -> None:
        super().__init__(
            f"SKU with color '{color}' and size '{size}' already exists for "
            f"product ID: {product_id}",
            color=color,
            size=size,
            product_id=product_id,
        )


class InsufficientStock(DomainError):
    kind = ErrorKind.INSUFFICIENT_STOCK

    def __init__(self, sku_id: Any, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for SKU ID: {sku_id}. Requested: {requested}, "
            f"Available: {available}",
            sku_id=sku_id,
            requested=requested,
            available=available,
        )


class InvalidPriceUpdate(DomainError):
    kind = ErrorKind.INVALID_PRICE_UPDATE

    def __init__(self, sku_id: Any, old_price: Decimal, new_price: Decimal) -> None:
        super().__init__(
            f"Invalid price update for SKU ID: {sku_id}. Price cannot be reduced "
            f"by more than {MAX_PRICE_REDUCTION:.0%}. Old price: {old_price:.2f}, "
            f"New price: {new_price:.2f}",
            sku_id=sku_id,
            old_price=old_price,
            new_price=new_price,
            max_reduction=MAX_PRICE_REDUCTION,
        )
