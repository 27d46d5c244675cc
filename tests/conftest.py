import logging

import pytest

from agri_pricing.models import Product, Unit, Cart

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def _sack_and_kg(product_id, name, sack_kg, sack_price, kg_price, min_sellable=0.25):
    return Product(
        id=product_id,
        name=name,
        units=[
            Unit(
                id=f"sack-{sack_kg}kg",
                name="Sack",
                label=f"{sack_kg}kg",
                conversion_factor=float(sack_kg),
                is_base_unit=True,
                price=sack_price,
                min_sellable_quantity=min_sellable,
                pricing_method="base_unit",
            ),
            Unit(
                id="kg-1kg",
                name="Kilogram",
                label="1kg",
                conversion_factor=1.0,
                is_base_unit=False,
                price=kg_price,
                min_sellable_quantity=min_sellable,
            ),
        ],
    )


@pytest.fixture
def ammonium_sulfate():
    return _sack_and_kg("ammonium-sulfate", "Ammonium Sulfate 21-0-0", 50, 1400.0, 30.0)


@pytest.fixture
def growth_promoter():
    return _sack_and_kg("growth-promoter", "Growth Promoter Liquid", 50, 1800.0, 38.0)


@pytest.fixture
def suregrow_layer():
    return _sack_and_kg("suregrow-layer", "Suregrow Layer 2", 25, 1150.0, 50.0)


@pytest.fixture
def make_product():
    return _sack_and_kg


@pytest.fixture
def empty_cart():
    return Cart(session_id="test-session")
