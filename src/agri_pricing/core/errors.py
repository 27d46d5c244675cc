"""
Pricing and cart error taxonomy.
All of these are caller-input errors: none is transient, none is retried.
"""

from typing import Optional


class PricingError(Exception):
    """Base exception for pricing and cart errors."""

    retry_possible = False

    def __init__(self, message: str, product_id: Optional[str] = None):
        self.message = message
        self.product_id = product_id
        super().__init__(self.message)


class InvalidProductError(PricingError):
    """Product has no sellable units."""
    pass


class AmbiguousBaseUnitError(PricingError):
    """More than one unit is flagged as the base unit."""

    def __init__(self, message: str, product_id: Optional[str] = None, unit_ids=None):
        super().__init__(message, product_id)
        self.unit_ids = list(unit_ids or [])


class NegativeOrZeroQuantityError(PricingError):
    """Requested quantity is not positive."""

    def __init__(self, quantity: float, product_id: Optional[str] = None):
        self.quantity = quantity
        super().__init__(f"Quantity must be positive, got {quantity}", product_id)


class UnitNotFoundInCatalogError(PricingError):
    """Selected unit is not part of the product's resolved catalog."""

    def __init__(self, unit_id: str, product_id: Optional[str] = None):
        self.unit_id = unit_id
        super().__init__(f"Unit {unit_id!r} not in catalog of product {product_id!r}", product_id)


class CartLineNotFoundError(PricingError):
    """Quantity edit or removal referenced an unknown cart line."""

    def __init__(self, line_id: str):
        self.line_id = line_id
        super().__init__(f"Cart line {line_id!r} not found")


class EmptyCartError(PricingError):
    """Checkout was attempted on a cart with no lines."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Cart {session_id!r} is empty")


class FractionalBaseUnitQuantityError(PricingError):
    """Base-unit lines count whole base units; a fractional count was given."""

    def __init__(self, quantity: float, product_id: Optional[str] = None):
        self.quantity = quantity
        super().__init__(
            f"Base-unit quantity must be a whole number, got {quantity}", product_id
        )
