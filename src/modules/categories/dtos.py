"""Category DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

CATEGORY_NAME_MIN = 2
CATEGORY_NAME_MAX = 50


class CategoryRequestDTO(BaseModel):
    """Input for category creation and update.

    ``active`` left as ``None`` means "default" on create (active) and
    "unchanged" on update.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        v = v.strip()
        if not CATEGORY_NAME_MIN <= len(v) <= CATEGORY_NAME_MAX:
            raise ValueError(
                f"Category name must be between {CATEGORY_NAME_MIN} and "
                f"{CATEGORY_NAME_MAX} characters."
            )
        return v
