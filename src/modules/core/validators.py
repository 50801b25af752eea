"""Field-level validators shared by the catalog DTOs.

``is_valid_*`` are pure predicates.  ``validate_*`` wrap them for use
inside pydantic ``field_validator`` hooks: they return the value
unchanged or raise ``InvalidFormat``.

A missing value (``None``) always passes; required-ness is the DTO's
job, not the validator's.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from modules.core.exceptions import InvalidFormat

PRICE_MESSAGE = (
    "Invalid price format. Price must be greater than 0 and have at most "
    "2 decimal places"
)
PRODUCT_NAME_MESSAGE = (
    "Invalid product name format. Name must start with a letter and can "
    "contain letters, numbers, spaces, hyphens, and parentheses"
)

MAX_PRICE_SCALE = 2

_PRODUCT_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9\s\-()]*[A-Za-z0-9)]", re.ASCII)
_PRODUCT_NAME_FORBIDDEN = ("  ", "--", "()", ")(")


def _as_decimal(value: Any) -> Optional[Decimal]:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return None
    try:
        # str() keeps the literal scale of floats ("10.5" not the binary expansion)
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def price_scale(value: Decimal) -> int:
    """Number of fractional digits, with ``Decimal("10.00")`` counting as 2."""
    exponent = value.as_tuple().exponent
    return max(0, -exponent)


def is_valid_price(value: Any) -> bool:
    if value is None:
        return True
    amount = _as_decimal(value)
    if amount is None or not amount.is_finite():
        return False
    return amount > 0 and price_scale(amount) <= MAX_PRICE_SCALE


def validate_price(value: Any, field: str = "price") -> Any:
    if not is_valid_price(value):
        raise InvalidFormat(field, value, PRICE_MESSAGE)
    return value


def is_valid_product_name(value: Optional[str]) -> bool:
    if value is None:
        return True
    if not _PRODUCT_NAME_RE.fullmatch(value):
        return False
    return not any(token in value for token in _PRODUCT_NAME_FORBIDDEN)


def validate_product_name(value: Optional[str], field: str = "name") -> Optional[str]:
    if not is_valid_product_name(value):
        raise InvalidFormat(field, value, PRODUCT_NAME_MESSAGE)
    return value
