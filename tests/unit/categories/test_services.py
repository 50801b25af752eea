"""Unit tests for CategoryService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.categories.dtos import CategoryRequestDTO
from modules.categories.exceptions import CategoryAlreadyExists, CategoryHasProducts
from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.categories.services import CategoryService
from modules.core.exceptions import ResourceNotFound

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock(spec=ICategoryRepository)
    repo.name_exists.return_value = False
    repo.has_products.return_value = False
    repo.save.side_effect = lambda c: c
    return repo


@pytest.fixture()
def service(mock_repo):
    return CategoryService(repository=mock_repo)


# ===========================================================================
# create_category
# ===========================================================================


class TestCreateCategory:
    def test_defaults_to_active(self, service):
        category = service.create_category(CategoryRequestDTO(name="Apparel"))
        assert category.name == "Apparel"
        assert category.active is True

    def test_inactive_on_request(self, service):
        category = service.create_category(CategoryRequestDTO(name="Apparel", active=False))
        assert category.active is False

    def test_duplicate_name(self, service, mock_repo):
        mock_repo.name_exists.return_value = True

        with pytest.raises(CategoryAlreadyExists, match="Apparel"):
            service.create_category(CategoryRequestDTO(name="Apparel"))
        mock_repo.save.assert_not_called()

    def test_integrity_error_becomes_duplicate(self, service, mock_repo):
        mock_repo.save.side_effect = IntegrityError("unique")

        with pytest.raises(CategoryAlreadyExists):
            service.create_category(CategoryRequestDTO(name="Apparel"))


# ===========================================================================
# update_category
# ===========================================================================


class TestUpdateCategory:
    def test_rename(self, service, mock_repo):
        existing = Category(name="Apparel")
        mock_repo.get_for_update.return_value = existing

        category = service.update_category(str(existing.id), CategoryRequestDTO(name="Clothing"))

        assert category.name == "Clothing"
        assert category.active is True
        mock_repo.name_exists.assert_called_once_with("Clothing", exclude_id=str(existing.id))

    def test_deactivate_keeps_name(self, service, mock_repo):
        existing = Category(name="Apparel")
        mock_repo.get_for_update.return_value = existing

        category = service.update_category(
            str(existing.id), CategoryRequestDTO(name="Apparel", active=False)
        )

        assert category.active is False
        mock_repo.name_exists.assert_not_called()

    def test_rename_to_taken_name(self, service, mock_repo):
        existing = Category(name="Apparel")
        mock_repo.get_for_update.return_value = existing
        mock_repo.name_exists.return_value = True

        with pytest.raises(CategoryAlreadyExists):
            service.update_category(str(existing.id), CategoryRequestDTO(name="Outdoor"))

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ResourceNotFound, match="Category not found"):
            service.update_category("missing", CategoryRequestDTO(name="Apparel"))


# ===========================================================================
# delete_category
# ===========================================================================


class TestDeleteCategory:
    def test_success(self, service, mock_repo):
        existing = Category(name="Apparel")
        mock_repo.get_for_update.return_value = existing

        service.delete_category(str(existing.id))

        mock_repo.delete.assert_called_once_with(str(existing.id))

    def test_with_products(self, service, mock_repo):
        existing = Category(name="Apparel")
        mock_repo.get_for_update.return_value = existing
        mock_repo.has_products.return_value = True

        with pytest.raises(CategoryHasProducts) as exc_info:
            service.delete_category(str(existing.id))
        assert exc_info.value.code == "CAT_002"
        mock_repo.delete.assert_not_called()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ResourceNotFound):
            service.delete_category("missing")


class TestGetCategory:
    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ResourceNotFound):
            service.get_category("missing")
