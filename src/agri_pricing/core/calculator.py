"""
Tiered price calculator.

Exact base-unit quantities get the fixed base price, quantities above the
base measure get whole base units plus a per-measure remainder, and
anything below the base measure is priced linearly from the smallest unit.
Results are not rounded; round at display or storage time.
"""

import logging
from typing import List, Optional

from agri_pricing.models.pricing import PriceBreakdown
from agri_pricing.models.product import Product, Unit
from .config import DEFAULT_CONFIG, PricingConfig
from .errors import InvalidProductError
from .resolver import resolve_units, smallest_catalog_unit
from .validation import validate_product, validate_quantity

logger = logging.getLogger(__name__)


def per_measure_rate(
    product: Product,
    units: Optional[List[Unit]] = None,
    config: Optional[PricingConfig] = None,
) -> Optional[float]:
    """Price of one base-measure unit (e.g. per kg), from the smallest unit in the catalog."""
    if units is None:
        units = resolve_units(product, config)
    smallest = smallest_catalog_unit(units)
    if smallest is None:
        return None
    return smallest.price / smallest.conversion_factor


def price_breakdown(
    product: Product,
    quantity: float,
    config: Optional[PricingConfig] = None,
    units: Optional[List[Unit]] = None,
    strict: bool = False,
) -> PriceBreakdown:
    """
    Price a base-measure quantity of a product.

    Args:
        product: Product with configured units
        quantity: Requested quantity in the base measure (e.g. kg)
        config: Pricing configuration
        units: Already resolved unit catalog, to skip resolving again
        strict: Raise on ambiguous base units instead of warning

    Returns:
        PriceBreakdown whose `total` is the full-precision price
    """
    config = config or DEFAULT_CONFIG
    validate_quantity(quantity, product.id if product is not None else None)
    base_unit = validate_product(product, strict=strict)

    if units is None:
        units = resolve_units(product, config, strict=strict)
    rate = per_measure_rate(product, units, config)

    if base_unit is None or rate is None:
        logger.warning(
            f"[PRICING] Product {product.id} has no base unit; using flat price {product.price}"
        )
        return PriceBreakdown(
            quantity=quantity,
            method="flat",
            remainder=quantity,
            remainder_total=quantity * product.price,
            total=quantity * product.price,
        )

    base_measure = base_unit.conversion_factor
    base_price = base_unit.price

    if config.quantities_match(quantity, base_measure):
        return PriceBreakdown(
            quantity=quantity,
            method="base_unit",
            base_units=1,
            base_total=base_price,
            total=base_price,
            base_unit_id=base_unit.id,
            per_measure_rate=rate,
        )

    if quantity >= base_measure:
        whole, remainder = divmod(quantity, base_measure)
        whole = int(whole)
        # Float division can leave a full base measure (or dust) as remainder
        if config.quantities_match(remainder, base_measure):
            whole += 1
            remainder = 0.0
        elif config.quantities_match(remainder, 0.0):
            remainder = 0.0
        base_total = whole * base_price
        remainder_total = remainder * rate
        return PriceBreakdown(
            quantity=quantity,
            method="mixed" if remainder > 0 else "base_unit",
            base_units=whole,
            remainder=remainder,
            base_total=base_total,
            remainder_total=remainder_total,
            total=base_total + remainder_total,
            base_unit_id=base_unit.id,
            per_measure_rate=rate,
        )

    return PriceBreakdown(
        quantity=quantity,
        method="per_measure",
        remainder=quantity,
        remainder_total=quantity * rate,
        total=quantity * rate,
        base_unit_id=base_unit.id,
        per_measure_rate=rate,
    )


def price(
    product: Product,
    quantity: float,
    config: Optional[PricingConfig] = None,
    units: Optional[List[Unit]] = None,
    strict: bool = False,
) -> float:
    """Total price for `quantity` (base measure) of `product`."""
    if product is None:
        raise InvalidProductError("Product is missing")
    breakdown = price_breakdown(product, quantity, config=config, units=units, strict=strict)
    logger.debug(
        f"[PRICING] {product.id} x {quantity}: {breakdown.total} ({breakdown.method})"
    )
    return breakdown.total
