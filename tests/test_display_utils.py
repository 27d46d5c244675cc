import pytest

from agri_pricing.core import add_to_cart
from agri_pricing.models import Product, Unit
from agri_pricing.utils import line_display_text, pricing_display_text


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (10, "₱30.00 per 1kg"),
        (49, "₱30.00 per 1kg"),
        (0.25, "₱30.00 per 1kg"),
        (50, "₱1400.00 per 50kg"),
        (60, "₱1400.00 per 50kg + ₱30.00 per 1kg"),
        (101, "₱1400.00 per 50kg + ₱30.00 per 1kg"),
    ],
)
def test_pricing_display_branches(ammonium_sulfate, quantity, expected):
    assert pricing_display_text(ammonium_sulfate, quantity) == expected


def test_display_with_smaller_base_unit(make_product):
    product = make_product("test-product", "Test Product", 25, 750.0, 30.0)

    assert pricing_display_text(product, 10) == "₱30.00 per 1kg"
    assert pricing_display_text(product, 25) == "₱750.00 per 25kg"
    assert pricing_display_text(product, 30) == "₱750.00 per 25kg + ₱30.00 per 1kg"


def test_display_without_base_unit():
    product = Product(
        id="flat",
        name="Loose seed",
        price=12.5,
        units=[Unit(id="kg", label="1kg", conversion_factor=1, price=40)],
    )
    assert pricing_display_text(product, 3) == "₱12.50 per unit"


def test_line_display_text(ammonium_sulfate, empty_cart):
    cart = add_to_cart(empty_cart, ammonium_sulfate, ammonium_sulfate.base_unit())
    cart = add_to_cart(cart, ammonium_sulfate, ammonium_sulfate.get_unit("kg-1kg"))

    assert line_display_text(cart.find_line("ammonium-sulfate", True)) == "₱1400.00 per 50kg"
    assert line_display_text(cart.find_line("ammonium-sulfate", False)) == "₱30.00 per 1kg"
