from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product
from modules.skus.models import SKU


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(username="catalog", password="testpass123")
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Persisted catalog builders
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_category():
    def _make(name: str = "Apparel", active: bool = True) -> Category:
        return Category.objects.create(name=name, active=active)

    return _make


@pytest.fixture()
def make_product(make_category):
    def _make(
        name: str = "Classic Tee",
        category: Category | None = None,
        description: str | None = "Soft cotton tee for everyday wear",
    ) -> Product:
        if category is None:
            category = Category.objects.filter(name="Apparel").first() or make_category()
        return Product.objects.create(name=name, category=category, description=description)

    return _make


@pytest.fixture()
def make_sku(make_product):
    def _make(
        product: Product | None = None,
        color: str = "Black",
        size: str = "M",
        price: Decimal = Decimal("19.99"),
        stock_quantity: int = 10,
    ) -> SKU:
        if product is None:
            product = make_product()
        return SKU.objects.create(
            product=product,
            color=color,
            size=size,
            price=price,
            stock_quantity=stock_quantity,
        )

    return _make
