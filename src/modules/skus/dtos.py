"""SKU DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

import re
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.validators import validate_price
from modules.skus.models import MAX_STOCK_QUANTITY

_COLOR_RE = re.compile(r"[a-zA-Z\s-]{2,50}", re.ASCII)
_SIZE_RE = re.compile(r"XS|S|M|L|XL|XXL|\d{1,3}(cm)?|\d{1,2}\.\d(cm)?", re.ASCII)


class SKURequestDTO(BaseModel):
    """Immutable DTO for SKU creation and (full) update requests.

    Validates:
    - ``color``: 2–50 letters, spaces or hyphens.
    - ``size``: XS/S/M/L/XL/XXL, or a number with an optional ``cm``.
    - ``price``: positive with at most 2 decimal places.
    - ``stock_quantity``: 0 to 999,999.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    color: str
    size: str
    price: Decimal
    stock_quantity: int

    @field_validator("color")
    @classmethod
    def color_format(cls, v: str) -> str:
        if not _COLOR_RE.fullmatch(v):
            raise ValueError(
                "Color must be 2-50 characters long and contain only letters, "
                "spaces, and hyphens"
            )
        return v

    @field_validator("size")
    @classmethod
    def size_format(cls, v: str) -> str:
        if not _SIZE_RE.fullmatch(v):
            raise ValueError(
                "Size must be a valid format (XS, S, M, L, XL, XXL, or a number "
                "followed by optional 'cm')"
            )
        return v

    @field_validator("price")
    @classmethod
    def price_format(cls, v: Decimal) -> Decimal:
        return validate_price(v)

    @field_validator("stock_quantity")
    @classmethod
    def stock_in_range(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity must be greater than or equal to 0")
        if v > MAX_STOCK_QUANTITY:
            raise ValueError("Stock quantity cannot exceed 999,999")
        return v
