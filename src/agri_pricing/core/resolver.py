"""
Unit catalog resolver.
Expands a product's configured units with dynamic denominations from the
unit ladder, down to the product's minimum sellable quantity.
"""

import logging
from typing import List, Optional

from agri_pricing.models.product import Product, Unit
from .config import DEFAULT_CONFIG, PricingConfig, format_quantity
from .validation import validate_product

logger = logging.getLogger(__name__)


def min_sellable_quantity(product: Product, config: Optional[PricingConfig] = None) -> float:
    config = config or DEFAULT_CONFIG
    if not product.units:
        return config.default_min_sellable_quantity
    return min(u.min_sellable_quantity for u in product.units)


def _dynamic_unit(
    quantity: float,
    base_unit: Optional[Unit],
    smallest_unit: Unit,
    floor: float,
    config: PricingConfig,
) -> Unit:
    method = "smallest_unit"
    unit_price = smallest_unit.price_per_measure * quantity

    if base_unit is not None and quantity >= base_unit.conversion_factor:
        multiple = quantity / base_unit.conversion_factor
        if config.quantities_match(multiple, round(multiple)):
            unit_price = base_unit.price * round(multiple)
            method = "base_unit"

    return Unit(
        id=f"dynamic_{format_quantity(quantity)}",
        name=f"{format_quantity(quantity)}{config.measure_suffix}",
        label=config.unit_label(quantity),
        conversion_factor=quantity,
        is_base_unit=False,
        price=unit_price,
        min_sellable_quantity=floor,
        is_dynamic=True,
        pricing_method=method,
    )


def resolve_units(
    product: Product,
    config: Optional[PricingConfig] = None,
    strict: bool = False,
) -> List[Unit]:
    """
    Resolve the full set of purchasable units for a product.

    Args:
        product: Product with its configured units
        config: Pricing configuration (ladder, tolerance, labels)
        strict: Raise on ambiguous base units instead of warning

    Returns:
        Configured and dynamic units, de-duplicated by conversion factor,
        largest first. Empty if the product has no configured units.
    """
    config = config or DEFAULT_CONFIG

    if not product.units:
        logger.warning(f"[RESOLVER] Product {product.id} has no units; treating as unsellable")
        return []

    base_unit = validate_product(product, strict=strict)
    smallest_unit = product.smallest_unit()
    floor = min_sellable_quantity(product, config)

    dynamic_units = [
        _dynamic_unit(step, base_unit, smallest_unit, floor, config)
        for step in config.unit_ladder
        if step >= floor
    ]

    configured_units = []
    for unit in product.units:
        if unit.conversion_factor < floor:
            logger.warning(
                f"[RESOLVER] Dropping unit {unit.id} of product {product.id}: "
                f"{unit.conversion_factor} is below minimum sellable quantity {floor}"
            )
            continue
        configured_units.append(unit)

    # Configured units come first so they win on collision
    resolved: List[Unit] = []
    for unit in configured_units + dynamic_units:
        if any(config.quantities_match(u.conversion_factor, unit.conversion_factor) for u in resolved):
            continue
        resolved.append(unit)

    resolved.sort(key=lambda u: u.conversion_factor, reverse=True)

    logger.debug(
        f"[RESOLVER] Product {product.id}: {len(resolved)} units "
        f"({len(resolved) - len(configured_units)} dynamic), floor {floor}"
    )
    return resolved


def smallest_catalog_unit(units: List[Unit]) -> Optional[Unit]:
    """Unit with the minimum conversion factor in a resolved catalog."""
    smallest = None
    for unit in units:
        if smallest is None or unit.conversion_factor < smallest.conversion_factor:
            smallest = unit
    return smallest


def find_catalog_unit(units: List[Unit], unit: Unit) -> Optional[Unit]:
    """
    Catalog entry identical to `unit`, if any.

    Every field must match, so a unit with an edited price or tier flag is
    not in the catalog even when its id and denomination are.
    """
    for candidate in units:
        if candidate.id != unit.id:
            continue
        if candidate == unit:
            return candidate
        logger.warning(
            f"[RESOLVER] Unit {unit.id} differs from its catalog entry "
            f"(price {unit.price} vs {candidate.price}, "
            f"base {unit.is_base_unit} vs {candidate.is_base_unit})"
        )
        return None
    return None
