"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).

Only the *shape* of a request is checked here (required fields, name
length and character class).  Rules that need store state or the
description content filter live in ``modules.products.validation``.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.validators import validate_product_name

PRODUCT_NAME_MIN = 2
PRODUCT_NAME_MAX = 100


class ProductRequestDTO(BaseModel):
    """Immutable DTO for product creation and (full) update requests.

    Validates:
    - ``name`` is 2–100 characters and passes ``validate_product_name``.
    - ``category_id`` is a UUID.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category_id: UUID
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_be_well_formed(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name is required.")
        if not PRODUCT_NAME_MIN <= len(v) <= PRODUCT_NAME_MAX:
            raise ValueError(
                f"Product name must be between {PRODUCT_NAME_MIN} and "
                f"{PRODUCT_NAME_MAX} characters."
            )
        return validate_product_name(v)
