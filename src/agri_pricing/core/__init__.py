"""
Core module initialization.
"""

from .config import (
    PricingConfig,
    DEFAULT_CONFIG,
    UNIT_MATCH_EPSILON,
    DEFAULT_UNIT_LADDER,
    DEFAULT_MIN_SELLABLE_QUANTITY,
    round_money,
)

from .errors import (
    PricingError,
    InvalidProductError,
    AmbiguousBaseUnitError,
    NegativeOrZeroQuantityError,
    UnitNotFoundInCatalogError,
    CartLineNotFoundError,
    EmptyCartError,
    FractionalBaseUnitQuantityError,
)

from .validation import validate_product, validate_quantity, validate_catalog_row

from .resolver import resolve_units, min_sellable_quantity, smallest_catalog_unit
from .calculator import price, price_breakdown, per_measure_rate
from .aggregator import (
    add_to_cart,
    update_quantity,
    remove_from_cart,
    clear_cart,
    cart_total,
    reprice_line,
)

__all__ = [
    # Configuration
    "PricingConfig",
    "DEFAULT_CONFIG",
    "UNIT_MATCH_EPSILON",
    "DEFAULT_UNIT_LADDER",
    "DEFAULT_MIN_SELLABLE_QUANTITY",
    "round_money",
    # Errors
    "PricingError",
    "InvalidProductError",
    "AmbiguousBaseUnitError",
    "NegativeOrZeroQuantityError",
    "UnitNotFoundInCatalogError",
    "CartLineNotFoundError",
    "EmptyCartError",
    "FractionalBaseUnitQuantityError",
    # Validation
    "validate_product",
    "validate_quantity",
    "validate_catalog_row",
    # Resolver
    "resolve_units",
    "min_sellable_quantity",
    "smallest_catalog_unit",
    # Calculator
    "price",
    "price_breakdown",
    "per_measure_rate",
    # Cart
    "add_to_cart",
    "update_quantity",
    "remove_from_cart",
    "clear_cart",
    "cart_total",
    "reprice_line",
]
