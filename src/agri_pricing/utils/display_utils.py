"""
Display helpers for cart and product pricing text.
"""

from typing import List, Optional

from agri_pricing.core.calculator import per_measure_rate
from agri_pricing.core.config import DEFAULT_CONFIG, PricingConfig
from agri_pricing.core.resolver import resolve_units
from agri_pricing.core.validation import validate_product, validate_quantity
from agri_pricing.models.cart import CartLineItem
from agri_pricing.models.product import Product, Unit


def pricing_display_text(
    product: Product,
    quantity: float,
    config: Optional[PricingConfig] = None,
    units: Optional[List[Unit]] = None,
) -> str:
    """
    Pricing description for a quantity, mirroring the calculator's branches.

    Below the base measure only the per-measure rate is shown, at exactly
    the base measure only the base unit price, above it both.
    """
    config = config or DEFAULT_CONFIG
    validate_quantity(quantity, product.id)
    base_unit = validate_product(product)

    if units is None:
        units = resolve_units(product, config)
    rate = per_measure_rate(product, units, config)

    if base_unit is None or rate is None:
        return f"{config.format_money(product.price)} per unit"

    per_measure = f"{config.format_money(rate)} per 1{config.measure_suffix}"
    per_base = f"{config.format_money(base_unit.price)} per {base_unit.label}"

    if config.quantities_match(quantity, base_unit.conversion_factor):
        return per_base
    if quantity < base_unit.conversion_factor:
        return per_measure
    return f"{per_base} + {per_measure}"


def line_display_text(line: CartLineItem, config: Optional[PricingConfig] = None) -> str:
    """e.g. "₱1400.00 per 50kg" for a base-unit line, "₱30.00 per 1kg" for a sub-unit line."""
    config = config or DEFAULT_CONFIG
    if line.is_base_unit_tier:
        return f"{config.format_money(line.unit_price)} per {line.selected_unit.label}"
    return f"{config.format_money(line.unit_price)} per 1{config.measure_suffix}"
