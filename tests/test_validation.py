import pytest

from agri_pricing.core import (
    InvalidProductError,
    NegativeOrZeroQuantityError,
    validate_catalog_row,
    validate_product,
    validate_quantity,
)
from agri_pricing.models import Product


def test_validate_product_returns_base_unit(ammonium_sulfate):
    assert validate_product(ammonium_sulfate).id == "sack-50kg"


def test_validate_product_rejects_missing_or_empty():
    with pytest.raises(InvalidProductError):
        validate_product(None)
    with pytest.raises(InvalidProductError):
        validate_product(Product(id="empty", name="Nothing"))


def test_validate_quantity():
    assert validate_quantity(0.25) == 0.25
    with pytest.raises(NegativeOrZeroQuantityError):
        validate_quantity(None)
    with pytest.raises(NegativeOrZeroQuantityError):
        validate_quantity(-3, "p")


def test_validate_catalog_row():
    good = {
        "product_id": "p",
        "units": [{"id": "kg", "conversion_factor": 1, "is_base_unit": False, "price": 30}],
    }
    assert validate_catalog_row(good) is True
    assert validate_catalog_row("not a row") is False
    assert validate_catalog_row({"product_id": "p", "units": []}) is False
    assert validate_catalog_row(
        {"product_id": "p", "units": [{"id": "kg", "conversion_factor": 0, "is_base_unit": False, "price": 1}]}
    ) is False
    assert validate_catalog_row(
        {"product_id": "p", "units": [{"id": "kg", "conversion_factor": 1, "is_base_unit": False}]}
    ) is False
