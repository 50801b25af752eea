"""Unit tests for ProductService.

Covers:
- create_product / update_product / delete_product: checker outcome is
  applied, rejected commands never write.
- IntegrityError from the store is reported as a duplicate name.
- get_product / list_products: delegation to the repository.
"""

from __future__ import annotations

import uuid
from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.core.exceptions import ResourceNotFound
from modules.products.dtos import ProductRequestDTO
from modules.products.exceptions import (
    CategoryNotActive,
    DuplicateNameInCategory,
    HasActiveSKUs,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock(spec=IProductRepository)
    repo.name_exists_in_category.return_value = False
    repo.has_skus.return_value = False
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def mock_category_repo():
    return MagicMock(spec=ICategoryRepository)


@pytest.fixture()
def service(mock_repo, mock_category_repo):
    return ProductService(repository=mock_repo, category_repository=mock_category_repo)


def _make_category(**overrides) -> Category:
    defaults = {"name": "Apparel", "active": True}
    defaults.update(overrides)
    return Category(**defaults)


def _dto(category: Category, **overrides) -> ProductRequestDTO:
    data = {
        "name": "Classic Tee",
        "category_id": category.id,
        "description": "Soft cotton tee for everyday wear",
    }
    data.update(overrides)
    return ProductRequestDTO(**data)


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo, mock_category_repo):
        category = _make_category()
        mock_category_repo.get_for_update.return_value = category

        product = service.create_product(_dto(category))

        assert product.name == "Classic Tee"
        assert product.category is category
        assert product.description == "Soft cotton tee for everyday wear"
        mock_repo.save.assert_called_once()

    def test_description_may_be_omitted(self, service, mock_category_repo):
        category = _make_category()
        mock_category_repo.get_for_update.return_value = category

        product = service.create_product(_dto(category, description=None))

        assert product.description is None

    def test_inactive_category_does_not_write(self, service, mock_repo, mock_category_repo):
        category = _make_category(active=False)
        mock_category_repo.get_for_update.return_value = category

        with pytest.raises(CategoryNotActive):
            service.create_product(_dto(category))
        mock_repo.save.assert_not_called()

    def test_integrity_error_becomes_duplicate_name(self, service, mock_repo, mock_category_repo):
        category = _make_category()
        mock_category_repo.get_for_update.return_value = category
        mock_repo.save.side_effect = IntegrityError("products_name_category_uniq")

        with pytest.raises(DuplicateNameInCategory):
            service.create_product(_dto(category))


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_success(self, service, mock_repo, mock_category_repo):
        category = _make_category()
        existing = Product(name="Classic Tee", category=category, description=None)
        mock_repo.get_for_update.return_value = existing
        mock_category_repo.get_for_update.return_value = category

        product = service.update_product(
            str(existing.id),
            _dto(category, name="Graphic Tee", description="Bold print on soft cotton"),
        )

        assert product.name == "Graphic Tee"
        assert product.description == "Bold print on soft cotton"
        mock_repo.save.assert_called_once_with(existing)

    def test_move_to_other_category(self, service, mock_repo, mock_category_repo):
        old = _make_category()
        new = _make_category(name="Outdoor")
        existing = Product(name="Classic Tee", category=old)
        mock_repo.get_for_update.return_value = existing
        mock_category_repo.get_for_update.return_value = new

        product = service.update_product(str(existing.id), _dto(new))

        assert product.category is new
        assert product.category_id == new.id

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ResourceNotFound):
            service.update_product(str(uuid.uuid4()), _dto(_make_category()))
        mock_repo.save.assert_not_called()

    def test_integrity_error_becomes_duplicate_name(self, service, mock_repo, mock_category_repo):
        old = _make_category()
        new = _make_category(name="Outdoor")
        existing = Product(name="Classic Tee", category=old)
        mock_repo.get_for_update.return_value = existing
        mock_category_repo.get_for_update.return_value = new
        mock_repo.save.side_effect = IntegrityError("products_name_category_uniq")

        with pytest.raises(DuplicateNameInCategory) as exc_info:
            service.update_product(str(existing.id), _dto(new))

        assert exc_info.value.context["category_id"] == str(new.id)
        mock_repo.name_exists_in_category.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        existing = Product(name="Classic Tee")
        mock_repo.get_for_update.return_value = existing

        service.delete_product(str(existing.id))

        mock_repo.delete.assert_called_once_with(str(existing.id))

    def test_with_skus_does_not_delete(self, service, mock_repo):
        existing = Product(name="Classic Tee")
        mock_repo.get_for_update.return_value = existing
        mock_repo.has_skus.return_value = True

        with pytest.raises(HasActiveSKUs):
            service.delete_product(str(existing.id))
        mock_repo.delete.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ResourceNotFound):
            service.delete_product("non-existent-id")


# ===========================================================================
# Queries
# ===========================================================================


class TestGetProduct:
    def test_success(self, service, mock_repo):
        existing = Product(name="Classic Tee")
        mock_repo.get_with_skus.return_value = existing

        assert service.get_product(str(existing.id)) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_with_skus.return_value = None

        with pytest.raises(ResourceNotFound, match="Product not found with id: missing"):
            service.get_product("missing")


class TestListProducts:
    def test_delegates_filters(self, service, mock_repo):
        filters = {"name__icontains": "tee"}
        service.list_products(filters)
        mock_repo.list.assert_called_once_with(filters)
