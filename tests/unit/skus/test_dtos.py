"""Unit tests for SKURequestDTO."""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.skus.dtos import SKURequestDTO

pytestmark = pytest.mark.unit


def _data(**overrides):
    data = {
        "product_id": str(uuid.uuid4()),
        "color": "Black",
        "size": "M",
        "price": "19.99",
        "stock_quantity": 10,
    }
    data.update(overrides)
    return data


class TestSKURequestDTO:
    def test_valid(self):
        dto = SKURequestDTO(**_data())
        assert dto.price == Decimal("19.99")
        assert isinstance(dto.product_id, uuid.UUID)

    @pytest.mark.parametrize("color", ["Red", "Navy Blue", "Off-White", "ab"])
    def test_valid_colors(self, color):
        assert SKURequestDTO(**_data(color=color)).color == color

    @pytest.mark.parametrize("color", ["R", "Red2", "Blue!", "A" * 51])
    def test_invalid_colors(self, color):
        with pytest.raises(ValidationError, match="Color must be"):
            SKURequestDTO(**_data(color=color))

    @pytest.mark.parametrize("size", ["XS", "S", "M", "L", "XL", "XXL", "42", "100cm", "9.5", "10.5cm"])
    def test_valid_sizes(self, size):
        assert SKURequestDTO(**_data(size=size)).size == size

    @pytest.mark.parametrize("size", ["XXXL", "m", "1000", "9.55", "42 cm", ""])
    def test_invalid_sizes(self, size):
        with pytest.raises(ValidationError, match="Size must be"):
            SKURequestDTO(**_data(size=size))

    @pytest.mark.parametrize("price", ["0", "-1", "10.005"])
    def test_invalid_prices(self, price):
        with pytest.raises(ValidationError, match="Invalid price format"):
            SKURequestDTO(**_data(price=price))

    def test_price_with_trailing_zeros(self):
        assert SKURequestDTO(**_data(price="10.00")).price == Decimal("10.00")

    @pytest.mark.parametrize("stock", [0, 999_999])
    def test_stock_bounds(self, stock):
        assert SKURequestDTO(**_data(stock_quantity=stock)).stock_quantity == stock

    def test_negative_stock(self):
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            SKURequestDTO(**_data(stock_quantity=-1))

    def test_stock_over_max(self):
        with pytest.raises(ValidationError, match="cannot exceed 999,999"):
            SKURequestDTO(**_data(stock_quantity=1_000_000))

    def test_product_id_must_be_uuid(self):
        with pytest.raises(ValidationError):
            SKURequestDTO(**_data(product_id="nope"))
