"""
Utils module initialization.
"""

from .cache import CatalogCache
from .display_utils import pricing_display_text, line_display_text
from .order_utils import build_order_payload, to_order_line
from .memory_utils import CartStore

__all__ = [
    # Catalog cache
    "CatalogCache",
    # Display
    "pricing_display_text",
    "line_display_text",
    # Orders
    "build_order_payload",
    "to_order_line",
    # Session carts
    "CartStore",
]
