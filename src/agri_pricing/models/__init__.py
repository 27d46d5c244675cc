"""
Models package - validated records for units, products, carts and orders.
"""

# Product models
from .product import Unit, Product

# Cart models
from .cart import CartLineItem, Cart

# Pricing models
from .pricing import PriceBreakdown

# Order models
from .order import OrderLine, OrderPayload

__all__ = [
    # Product
    "Unit",
    "Product",
    # Cart
    "CartLineItem",
    "Cart",
    # Pricing
    "PriceBreakdown",
    # Order
    "OrderLine",
    "OrderPayload",
]
