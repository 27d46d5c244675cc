import pytest

from agri_pricing.core import (
    InvalidProductError,
    NegativeOrZeroQuantityError,
    price,
    price_breakdown,
    per_measure_rate,
    resolve_units,
)
from agri_pricing.models import Product, Unit


def test_ammonium_sulfate_scenarios(ammonium_sulfate):
    assert price(ammonium_sulfate, 50) == 1400
    assert price(ammonium_sulfate, 60) == pytest.approx(1700)
    assert price(ammonium_sulfate, 25) == pytest.approx(750)


def test_growth_promoter_mixed_quantity(growth_promoter):
    breakdown = price_breakdown(growth_promoter, 60)

    assert breakdown.method == "mixed"
    assert breakdown.base_units == 1
    assert breakdown.remainder == pytest.approx(10)
    assert breakdown.base_total == 1800
    assert breakdown.remainder_total == pytest.approx(380)
    assert breakdown.total == pytest.approx(2180)


def test_exact_base_measure_returns_base_price_exactly(ammonium_sulfate):
    breakdown = price_breakdown(ammonium_sulfate, 50.005)

    assert breakdown.method == "base_unit"
    assert breakdown.total == 1400


@pytest.mark.parametrize("n", [1, 2, 3, 7, 20])
def test_exact_multiples_of_base_unit(ammonium_sulfate, n):
    assert price(ammonium_sulfate, n * 50) == n * 1400


@pytest.mark.parametrize("q1, q2", [(0.25, 0.5), (1, 10), (12.5, 30), (0.25, 49.5), (3, 3)])
def test_linear_below_base_unit(ammonium_sulfate, q1, q2):
    assert price(ammonium_sulfate, q1) + price(ammonium_sulfate, q2) == pytest.approx(
        price(ammonium_sulfate, q1 + q2)
    )


@pytest.mark.parametrize("n, r", [(1, 10), (2, 0.25), (3, 49), (1, 25.5)])
def test_mixed_tier_decomposition(ammonium_sulfate, n, r):
    assert price(ammonium_sulfate, n * 50 + r) == pytest.approx(n * 1400 + r * 30)


def test_price_curve_is_not_smooth_at_base_boundary(ammonium_sulfate):
    # 49kg loose costs more than a 50kg sack
    assert price(ammonium_sulfate, 49) > price(ammonium_sulfate, 50)


def test_per_measure_rate_uses_smallest_catalog_unit(ammonium_sulfate):
    assert per_measure_rate(ammonium_sulfate) == pytest.approx(30)


def test_pre_resolved_units_give_same_price(ammonium_sulfate):
    units = resolve_units(ammonium_sulfate)
    assert price(ammonium_sulfate, 75, units=units) == price(ammonium_sulfate, 75)


def test_results_are_not_rounded():
    product = Product(
        id="p",
        name="Odd rate",
        units=[
            Unit(id="sack", label="50kg", conversion_factor=50, is_base_unit=True, price=1000),
            Unit(id="kg", label="1kg", conversion_factor=1, price=33.333),
        ],
    )
    assert price(product, 3) == pytest.approx(99.999)


def test_no_base_unit_falls_back_to_flat_price(caplog):
    product = Product(
        id="flat",
        name="Loose seed",
        price=12.5,
        units=[Unit(id="kg", label="1kg", conversion_factor=1, price=40)],
    )
    with caplog.at_level("WARNING"):
        breakdown = price_breakdown(product, 4)

    assert breakdown.method == "flat"
    assert breakdown.total == pytest.approx(50)
    assert "flat price" in caplog.text


def test_product_without_units_is_rejected():
    with pytest.raises(InvalidProductError):
        price(Product(id="empty", name="Nothing"), 1)


def test_missing_product_is_rejected():
    with pytest.raises(InvalidProductError):
        price(None, 1)


@pytest.mark.parametrize("quantity", [0, -1, -0.25])
def test_non_positive_quantity_is_rejected(ammonium_sulfate, quantity):
    with pytest.raises(NegativeOrZeroQuantityError) as exc_info:
        price(ammonium_sulfate, quantity)

    assert exc_info.value.product_id == "ammonium-sulfate"
    assert exc_info.value.retry_possible is False


@pytest.mark.parametrize("base_measure", [22.7, 4.6, 2.2, 0.3, 13.75])
@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_exact_multiples_of_fractional_base_measure(make_product, base_measure, n):
    product = make_product("frac", "Fractional sack", base_measure, 1000.0, 50.0, min_sellable=0.25)
    breakdown = price_breakdown(product, n * base_measure)

    assert breakdown.total == n * 1000.0
    assert breakdown.base_units == n
    assert breakdown.remainder == 0.0
    assert breakdown.method == "base_unit"


def test_fractional_base_measure_with_remainder(make_product):
    product = make_product("frac", "Fractional sack", 22.7, 1000.0, 50.0)
    breakdown = price_breakdown(product, 3 * 22.7 + 2)

    assert breakdown.method == "mixed"
    assert breakdown.base_units == 3
    assert breakdown.remainder == pytest.approx(2)
    assert breakdown.total == pytest.approx(3100.0)
