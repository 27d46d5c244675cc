"""
Order payload utilities - flatten a cart for the order service.
"""

import logging

from agri_pricing.core.config import round_money
from agri_pricing.core.errors import EmptyCartError
from agri_pricing.models.cart import Cart, CartLineItem
from agri_pricing.models.order import OrderLine, OrderPayload

logger = logging.getLogger(__name__)


def to_order_line(line: CartLineItem) -> OrderLine:
    return OrderLine(
        product_id=line.product_id,
        unit_id=line.selected_unit.id,
        quantity=line.quantity,
        unit_price=round_money(line.unit_price),
        line_total=round_money(line.line_total),
        measure_quantity=line.measure_quantity,
    )


def build_order_payload(cart: Cart, currency: str = "PHP") -> OrderPayload:
    """
    Flatten a cart into the order submission body.

    Money is rounded to 2 decimals here; the total is the rounded sum of
    the unrounded line totals.

    Raises:
        EmptyCartError: If the cart has no lines
    """
    if not cart.items:
        raise EmptyCartError(cart.session_id)

    payload = OrderPayload(
        session_id=cart.session_id,
        lines=[to_order_line(line) for line in cart.items],
        total=round_money(cart.subtotal),
        currency=currency,
    )
    logger.info(
        f"[ORDER] Built payload for session {cart.session_id}: "
        f"{len(payload.lines)} lines, total {payload.total}"
    )
    return payload
