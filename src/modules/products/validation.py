"""Product admission rules.

Two pieces live here:

``description_violation`` / ``validate_description``
    The description content filter.  A heuristic safety/quality check on
    the free-text description, evaluated in a fixed order; the first
    failing check is the one reported.

``ProductValidationService``
    The invariant checker for product create / update / delete.  It reads
    current Category/Product state through the repositories, raises the
    first violated rule and otherwise hands back the entities it resolved
    so the service does not have to look them up again.  Callers run it
    inside ``transaction.atomic`` so the look-ups (taken with
    ``SELECT ... FOR UPDATE``) and the write form one unit.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Tuple

import structlog

from modules.core.exceptions import ResourceNotFound
from modules.products.exceptions import (
    CategoryChangeWithSKUs,
    CategoryNotActive,
    DuplicateNameInCategory,
    HasActiveSKUs,
    InvalidDescriptionFormat,
)

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import ProductRequestDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Description content filter
# ---------------------------------------------------------------------------

SPECIAL_TYPE_KEYWORDS = ("set", "kit", "bundle", "collection")
MAX_DESCRIPTION_LENGTH = 1000
MIN_DESCRIPTION_WORDS = 3
MAX_REPEATED_CHARS = 4

HARMFUL_MARKERS = ("<", ">", "javascript:", "data:")
SQL_KEYWORDS = ("select", "insert", "update", "delete", "drop", "union")
SQL_CHARACTERS = ("'", '"', ";")

REASON_REQUIRED = (
    "Description is required for products with type: set, kit, bundle, or collection"
)
REASON_TOO_LONG = f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
REASON_HARMFUL = "HTML tags and potentially harmful content are not allowed"
REASON_SQL = "Invalid characters or SQL keywords detected"
REASON_TOO_FEW_WORDS = f"Description must contain at least {MIN_DESCRIPTION_WORDS} words"
REASON_REPEATED = "Description contains excessive repeated characters"

_REPEATED_RE = re.compile(r"(.)\1{%d}" % MAX_REPEATED_CHARS, re.DOTALL)


def is_special_type(name: Optional[str]) -> bool:
    """Set/kit/bundle/collection products must carry a description."""
    if name is None:
        return False
    lowered = name.lower()
    return any(keyword in lowered for keyword in SPECIAL_TYPE_KEYWORDS)


def has_repeated_characters(text: str) -> bool:
    """True when any character occurs more than four times in a row."""
    return _REPEATED_RE.search(text) is not None


def description_violation(name: Optional[str], description: Optional[str]) -> Optional[str]:
    """Return the reason ``description`` is rejected, or ``None`` if it passes.

    The checks run in a fixed order and the first failure wins:
    required-for-special-type, length, HTML/script markers, SQL keywords
    and quote characters, word count, repeated characters.
    """
    special = is_special_type(name)

    if special and (description is None or not description.strip()):
        return REASON_REQUIRED
    if description is None:
        return None

    trimmed = description.strip()
    if not trimmed:
        return None

    if len(trimmed) > MAX_DESCRIPTION_LENGTH:
        return REASON_TOO_LONG

    if any(marker in trimmed for marker in HARMFUL_MARKERS):
        return REASON_HARMFUL

    lowered = trimmed.lower()
    if any(keyword in lowered for keyword in SQL_KEYWORDS) or any(
        char in trimmed for char in SQL_CHARACTERS
    ):
        return REASON_SQL

    if len(trimmed.split()) < MIN_DESCRIPTION_WORDS:
        return REASON_TOO_FEW_WORDS

    if has_repeated_characters(trimmed):
        return REASON_REPEATED

    return None


def validate_description(name: Optional[str], description: Optional[str]) -> None:
    """Raise ``InvalidDescriptionFormat`` when the content filter rejects."""
    reason = description_violation(name, description)
    if reason is not None:
        raise InvalidDescriptionFormat(reason)


# ---------------------------------------------------------------------------
# Product invariant checker
# ---------------------------------------------------------------------------


class ProductValidationService:
    """Decides whether a product mutation is admissible.

    Receives repositories via constructor injection; holds no state of
    its own, so re-running a check against unchanged data always gives
    the same answer.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._products = product_repository
        self._categories = category_repository

    def validate_creation(self, dto: ProductRequestDTO) -> Category:
        """Check a create request; returns the (locked) target category.

        Raises:
            ResourceNotFound: the category does not exist.
            CategoryNotActive: the category is inactive.
            DuplicateNameInCategory: the name is taken in that category.
            InvalidDescriptionFormat: the description filter rejected.
        """
        log = logger.bind(category_id=str(dto.category_id), name=dto.name)

        category = self._categories.get_for_update(str(dto.category_id))
        if not category:
            raise ResourceNotFound("Category", "id", dto.category_id)

        if not category.active:
            log.warning("product.category_not_active")
            raise CategoryNotActive(dto.category_id)

        if self._products.name_exists_in_category(dto.name, str(dto.category_id)):
            log.warning("product.duplicate_name")
            raise DuplicateNameInCategory(dto.name, dto.category_id)

        self._check_description(dto, log)
        return category

    def validate_update(
        self, product_id: str, dto: ProductRequestDTO
    ) -> Tuple[Product, Category]:
        """Check an update request; returns ``(product, target_category)``.

        Raises:
            ResourceNotFound: the product or the target category is missing.
            CategoryNotActive: the target category is inactive.
            CategoryChangeWithSKUs: the category changes while SKUs exist.
            DuplicateNameInCategory: a rename collides in the target category.
            InvalidDescriptionFormat: the description filter rejected.
        """
        log = logger.bind(product_id=str(product_id), category_id=str(dto.category_id))

        product = self._products.get_for_update(product_id)
        if not product:
            raise ResourceNotFound("Product", "id", product_id)

        category = self._categories.get_for_update(str(dto.category_id))
        if not category:
            raise ResourceNotFound("Category", "id", dto.category_id)

        if not category.active:
            log.warning("product.category_not_active")
            raise CategoryNotActive(dto.category_id)

        if product.category_id != category.id and self._products.has_skus(str(product.id)):
            log.warning("product.category_change_blocked", old_category_id=str(product.category_id))
            raise CategoryChangeWithSKUs(product.id, product.category_id, category.id)

        if product.name != dto.name and self._products.name_exists_in_category(
            dto.name, str(dto.category_id)
        ):
            log.warning("product.duplicate_name", name=dto.name)
            raise DuplicateNameInCategory(dto.name, dto.category_id)

        self._check_description(dto, log)
        return product, category

    def validate_deletion(self, product_id: str) -> Product:
        """Check a delete request; returns the product to delete.

        Raises:
            ResourceNotFound: the product does not exist.
            HasActiveSKUs: the product still owns SKUs.
        """
        product = self._products.get_for_update(product_id)
        if not product:
            raise ResourceNotFound("Product", "id", product_id)

        if self._products.has_skus(str(product.id)):
            logger.warning("product.delete_blocked", product_id=str(product_id))
            raise HasActiveSKUs(product.id)

        return product

    @staticmethod
    def _check_description(dto: ProductRequestDTO, log) -> None:
        try:
            validate_description(dto.name, dto.description)
        except InvalidDescriptionFormat as exc:
            log.warning("product.invalid_description", reason=exc.reason)
            raise
