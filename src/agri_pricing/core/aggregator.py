"""
Cart line aggregator.

Lines are partitioned by (product, tier): base-unit selections merge into
one line counted in whole base units, sub-unit selections merge into one
line counted in the base measure and priced per base-measure unit. Every
function returns a new Cart; the input cart is never mutated.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from agri_pricing.models.cart import Cart, CartLineItem
from agri_pricing.models.product import Product, Unit
from .calculator import per_measure_rate, price
from .config import DEFAULT_CONFIG, PricingConfig, round_money
from .errors import (
    CartLineNotFoundError,
    FractionalBaseUnitQuantityError,
    InvalidProductError,
    NegativeOrZeroQuantityError,
    UnitNotFoundInCatalogError,
)
from .resolver import find_catalog_unit, resolve_units
from .validation import validate_product, validate_quantity

logger = logging.getLogger(__name__)


def _with_items(cart: Cart, items: List[CartLineItem]) -> Cart:
    return cart.model_copy(
        update={"items": items, "last_updated": datetime.now(timezone.utc)}
    )


def add_to_cart(
    cart: Cart,
    product: Product,
    selected_unit: Unit,
    count: int = 1,
    config: Optional[PricingConfig] = None,
    units: Optional[List[Unit]] = None,
) -> Cart:
    """
    Add `count` instances of `selected_unit` of `product` to the cart.

    Args:
        cart: Current cart snapshot
        product: Product being added
        selected_unit: Unit chosen by the customer; must be in the resolved catalog
        count: Number of instances of the unit to add
        config: Pricing configuration
        units: Already resolved unit catalog for the product

    Returns:
        Updated cart with the (product, tier) line created or merged
    """
    config = config or DEFAULT_CONFIG
    if product is None:
        raise InvalidProductError("Product is missing")
    validate_product(product)
    if count <= 0:
        raise NegativeOrZeroQuantityError(count, product.id)
    if not float(count).is_integer():
        raise FractionalBaseUnitQuantityError(count, product.id)

    if units is None:
        units = resolve_units(product, config)
    catalog_unit = find_catalog_unit(units, selected_unit) if selected_unit is not None else None
    if catalog_unit is None:
        unit_id = selected_unit.id if selected_unit is not None else None
        logger.error(f"[CART] Unit {unit_id} not in catalog of product {product.id}")
        raise UnitNotFoundInCatalogError(unit_id, product.id)
    selected_unit = catalog_unit

    is_base_unit_tier = selected_unit.is_base_unit
    if is_base_unit_tier:
        quantity_delta = count
        incoming_unit_price = selected_unit.price
    else:
        quantity_delta = selected_unit.conversion_factor * count
        incoming_unit_price = per_measure_rate(product, units, config)

    items = list(cart.items)
    existing = cart.find_line(product.id, is_base_unit_tier)

    if existing is not None:
        # First write wins for the line's unit price
        new_quantity = existing.quantity + quantity_delta
        merged = existing.model_copy(
            update={
                "quantity": new_quantity,
                "line_total": new_quantity * existing.unit_price,
                "selected_unit": selected_unit,
            }
        )
        items[items.index(existing)] = merged
        logger.info(
            f"[CART] Merged {selected_unit.label} into line {existing.id} "
            f"({product.id}, {'base' if is_base_unit_tier else 'sub'}): qty {new_quantity}"
        )
    else:
        line = CartLineItem(
            product_id=product.id,
            is_base_unit_tier=is_base_unit_tier,
            quantity=quantity_delta,
            unit_price=incoming_unit_price,
            line_total=quantity_delta * incoming_unit_price,
            selected_unit=selected_unit,
        )
        items.append(line)
        logger.info(
            f"[CART] New line {line.id} ({product.id}, "
            f"{'base' if is_base_unit_tier else 'sub'}): qty {quantity_delta}"
        )

    return _with_items(cart, items)


def update_quantity(cart: Cart, line_id: str, quantity: float) -> Cart:
    """Set a line's quantity (in the line's own tier units) and recompute its total."""
    line = cart.get_line(line_id)
    if line is None:
        raise CartLineNotFoundError(line_id)
    validate_quantity(quantity, line.product_id)
    if line.is_base_unit_tier and not float(quantity).is_integer():
        raise FractionalBaseUnitQuantityError(quantity, line.product_id)

    updated = line.model_copy(
        update={"quantity": quantity, "line_total": quantity * line.unit_price}
    )
    items = [updated if i.id == line_id else i for i in cart.items]
    logger.info(f"[CART] Line {line_id} quantity set to {quantity}")
    return _with_items(cart, items)


def remove_from_cart(cart: Cart, line_id: str) -> Cart:
    if cart.get_line(line_id) is None:
        raise CartLineNotFoundError(line_id)
    logger.info(f"[CART] Removed line {line_id}")
    return _with_items(cart, [i for i in cart.items if i.id != line_id])


def clear_cart(cart: Cart) -> Cart:
    return _with_items(cart, [])


def cart_total(cart: Cart) -> float:
    """Cart total rounded for display."""
    return round_money(cart.subtotal)


def reprice_line(
    line: CartLineItem,
    product: Product,
    config: Optional[PricingConfig] = None,
    units: Optional[List[Unit]] = None,
) -> float:
    """Tiered price of the line's base-measure quantity against the current catalog."""
    if line.product_id != product.id:
        raise InvalidProductError(
            f"Line {line.id} belongs to product {line.product_id}, not {product.id}",
            product.id,
        )
    return price(product, line.measure_quantity, config=config, units=units)
