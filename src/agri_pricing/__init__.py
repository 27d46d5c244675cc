"""
Tiered unit pricing and cart line-merging engine for multi-unit products.
"""

import logging

from .models import Unit, Product, CartLineItem, Cart, PriceBreakdown, OrderLine, OrderPayload
from .core import (
    PricingConfig,
    DEFAULT_CONFIG,
    UNIT_MATCH_EPSILON,
    resolve_units,
    price,
    price_breakdown,
    add_to_cart,
    update_quantity,
    remove_from_cart,
    clear_cart,
    cart_total,
    PricingError,
    InvalidProductError,
    AmbiguousBaseUnitError,
    NegativeOrZeroQuantityError,
    UnitNotFoundInCatalogError,
    CartLineNotFoundError,
    EmptyCartError,
    FractionalBaseUnitQuantityError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Unit",
    "Product",
    "CartLineItem",
    "Cart",
    "PriceBreakdown",
    "OrderLine",
    "OrderPayload",
    "PricingConfig",
    "DEFAULT_CONFIG",
    "UNIT_MATCH_EPSILON",
    "resolve_units",
    "price",
    "price_breakdown",
    "add_to_cart",
    "update_quantity",
    "remove_from_cart",
    "clear_cart",
    "cart_total",
    "PricingError",
    "InvalidProductError",
    "AmbiguousBaseUnitError",
    "NegativeOrZeroQuantityError",
    "UnitNotFoundInCatalogError",
    "CartLineNotFoundError",
    "EmptyCartError",
    "FractionalBaseUnitQuantityError",
]
