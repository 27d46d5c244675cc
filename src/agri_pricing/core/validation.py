"""
Boundary validation for products, quantities and raw catalog rows.
Rejects bad input before it reaches the resolver, calculator or cart.
"""

import logging
from typing import Optional

from agri_pricing.models.product import Product, Unit
from .errors import (
    AmbiguousBaseUnitError,
    InvalidProductError,
    NegativeOrZeroQuantityError,
)

logger = logging.getLogger(__name__)


def validate_product(product: Product, strict: bool = False) -> Optional[Unit]:
    """
    Check that a product can be priced.

    Args:
        product: Product to check
        strict: Raise on more than one base unit instead of warning

    Returns:
        The product's base unit (first flagged one), or None if it has none
    """
    if product is None:
        raise InvalidProductError("Product is missing")

    if not product.units:
        raise InvalidProductError(f"Product {product.id} has no units", product.id)

    base_units = product.base_units()
    if len(base_units) > 1:
        unit_ids = [u.id for u in base_units]
        if strict:
            raise AmbiguousBaseUnitError(
                f"Product {product.id} has {len(base_units)} base units: {unit_ids}",
                product.id,
                unit_ids,
            )
        logger.warning(
            f"[VALIDATION] Product {product.id} has multiple base units {unit_ids}; "
            f"using {unit_ids[0]}"
        )

    return base_units[0] if base_units else None


def validate_quantity(quantity: float, product_id: Optional[str] = None) -> float:
    if quantity is None or quantity <= 0:
        raise NegativeOrZeroQuantityError(quantity, product_id)
    return quantity


def validate_catalog_row(row: dict) -> bool:
    """Validate a raw product row from the catalog service."""
    if not isinstance(row, dict):
        logger.error(f"[VALIDATION] Catalog row is not a dict: {type(row)}")
        return False

    if row.get("product_id", row.get("id")) is None:
        return False

    units = row.get("units")
    if not isinstance(units, list) or not units:
        return False

    required_unit_keys = {"id", "conversion_factor", "is_base_unit"}
    for unit in units:
        if not isinstance(unit, dict) or not all(k in unit for k in required_unit_keys):
            return False

        if (unit.get("conversion_factor") or 0) <= 0:
            return False

        price = unit.get("price", unit.get("price_per_unit"))
        if price is None or price < 0:
            return False

    return True
