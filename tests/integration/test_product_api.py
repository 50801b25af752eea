"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Domain error mapping (400, 404, 409).
- Authentication enforcement (401 without token).
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.validation import REASON_HARMFUL, REASON_REQUIRED

pytestmark = pytest.mark.integration

URL = "/api/v1/products/"


def _payload(category, **overrides):
    data = {
        "name": "Classic Tee",
        "category_id": str(category.id),
        "description": "Soft cotton tee for everyday wear",
    }
    data.update(overrides)
    return data


# ===========================================================================
# Authentication
# ===========================================================================


class TestProductAPIAuth:
    def test_unauthenticated_returns_401(self, api_client):
        assert api_client.get(URL).status_code == 401


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestProductList:
    def test_list_empty(self, auth_client):
        response = auth_client.get(URL)
        assert response.status_code == 200
        assert response.data["results"] == []

    def test_list_returns_products(self, auth_client, make_product):
        make_product()
        response = auth_client.get(URL)
        assert len(response.data["results"]) == 1
        assert response.data["results"][0]["category_name"] == "Apparel"

    def test_filter_by_category(self, auth_client, make_category, make_product):
        outdoor = make_category("Outdoor")
        make_product()
        make_product(name="Rain Jacket", category=outdoor)

        response = auth_client.get(URL, {"category": str(outdoor.id)})

        assert [p["name"] for p in response.data["results"]] == ["Rain Jacket"]


class TestProductRetrieve:
    def test_includes_skus(self, auth_client, make_sku):
        sku = make_sku()
        response = auth_client.get(f"{URL}{sku.product_id}/")
        assert response.status_code == 200
        assert response.data["skus"][0]["color"] == "Black"

    def test_not_found(self, auth_client):
        response = auth_client.get(f"{URL}0190a000-0000-7000-8000-000000000000/")
        assert response.status_code == 404
        assert response.data["kind"] == "resource_not_found"


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create(self, auth_client, make_category):
        category = make_category()
        response = auth_client.post(URL, _payload(category), format="json")
        assert response.status_code == 201
        assert response.data["category_id"] == str(category.id)
        assert Product.objects.count() == 1

    def test_inactive_category_returns_400(self, auth_client, make_category):
        category = make_category(active=False)
        response = auth_client.post(URL, _payload(category), format="json")
        assert response.status_code == 400
        assert response.data["code"] == "PROD_002"
        assert Product.objects.count() == 0

    def test_duplicate_name_returns_409(self, auth_client, make_product):
        product = make_product()
        response = auth_client.post(URL, _payload(product.category), format="json")
        assert response.status_code == 409
        assert response.data["code"] == "PROD_001"

    def test_lost_race_still_returns_409(self, auth_client, make_product):
        product = make_product()
        with patch.object(
            ProductDjangoRepository, "name_exists_in_category", return_value=False
        ):
            response = auth_client.post(URL, _payload(product.category), format="json")

        assert response.status_code == 409
        assert response.data["code"] == "PROD_001"
        assert Product.objects.count() == 1

    def test_special_type_without_description(self, auth_client, make_category):
        category = make_category()
        response = auth_client.post(
            URL, _payload(category, name="Great Product Set", description=None), format="json"
        )
        assert response.status_code == 400
        assert response.data["code"] == "PROD_005"
        assert response.data["context"]["reason"] == REASON_REQUIRED

    def test_harmful_description(self, auth_client, make_category):
        category = make_category()
        response = auth_client.post(
            URL, _payload(category, description="This has <script>x</script>"), format="json"
        )
        assert response.status_code == 400
        assert response.data["context"]["reason"] == REASON_HARMFUL

    def test_missing_category_id_returns_400(self, auth_client):
        response = auth_client.post(URL, {"name": "Classic Tee"}, format="json")
        assert response.status_code == 400
        assert "category_id" in response.data["validation_errors"]

    def test_unknown_category_returns_404(self, auth_client):
        response = auth_client.post(
            URL,
            {"name": "Classic Tee", "category_id": "0190a000-0000-7000-8000-000000000000"},
            format="json",
        )
        assert response.status_code == 404


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_rename(self, auth_client, make_product):
        product = make_product()
        response = auth_client.put(
            f"{URL}{product.id}/", _payload(product.category, name="Graphic Tee"), format="json"
        )
        assert response.status_code == 200
        product.refresh_from_db()
        assert product.name == "Graphic Tee"

    def test_move_without_skus(self, auth_client, make_category, make_product):
        product = make_product()
        outdoor = make_category("Outdoor")
        response = auth_client.put(f"{URL}{product.id}/", _payload(outdoor), format="json")
        assert response.status_code == 200
        product.refresh_from_db()
        assert product.category_id == outdoor.id

    def test_move_into_category_with_same_name_returns_409(
        self, auth_client, make_category, make_product
    ):
        product = make_product()
        outdoor = make_category("Outdoor")
        make_product(category=outdoor)

        response = auth_client.put(f"{URL}{product.id}/", _payload(outdoor), format="json")

        assert response.status_code == 409
        assert response.data["code"] == "PROD_001"
        product.refresh_from_db()
        assert product.category.name == "Apparel"

    def test_move_with_skus_returns_409(self, auth_client, make_category, make_sku):
        sku = make_sku()
        outdoor = make_category("Outdoor")
        response = auth_client.put(f"{URL}{sku.product_id}/", _payload(outdoor), format="json")
        assert response.status_code == 409
        assert response.data["code"] == "PROD_004"

    def test_existing_product_in_deactivated_category(self, auth_client, make_product):
        product = make_product()
        product.category.active = False
        product.category.save()

        response = auth_client.put(
            f"{URL}{product.id}/", _payload(product.category), format="json"
        )

        assert response.status_code == 400
        assert response.data["code"] == "PROD_002"
        assert Product.objects.filter(id=product.id).exists()


# ===========================================================================
# DELETE
# ===========================================================================


class TestProductDelete:
    def test_delete(self, auth_client, make_product):
        product = make_product()
        response = auth_client.delete(f"{URL}{product.id}/")
        assert response.status_code == 204
        assert not Product.objects.filter(id=product.id).exists()

    def test_delete_with_skus_returns_409(self, auth_client, make_sku):
        sku = make_sku()
        response = auth_client.delete(f"{URL}{sku.product_id}/")
        assert response.status_code == 409
        assert response.data["code"] == "PROD_003"

    def test_delete_missing_returns_404(self, auth_client):
        response = auth_client.delete(f"{URL}0190a000-0000-7000-8000-000000000000/")
        assert response.status_code == 404
