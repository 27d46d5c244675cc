"""
Memory utilities - in-memory, per-session cart store.

The core cart functions are pure; this store serializes the
read-modify-write of one session's cart so concurrent requests for the
same session (e.g. two browser tabs) cannot lose an update.
"""

import logging
import threading
from typing import Callable, Dict, List

from agri_pricing.models.cart import Cart

logger = logging.getLogger(__name__)


class CartStore:
    """Caller-owned store of the latest cart snapshot per session."""

    def __init__(self):
        self._carts: Dict[str, Cart] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    def get(self, session_id: str) -> Cart:
        """Latest cart for the session; an empty cart if none was stored yet."""
        with self._lock_for(session_id):
            cart = self._carts.get(session_id)
            if cart is None:
                cart = Cart(session_id=session_id)
                self._carts[session_id] = cart
                logger.info(f"[MEMORY] New cart for session {session_id}")
            return cart

    def apply(self, session_id: str, operation: Callable[..., Cart], *args, **kwargs) -> Cart:
        """
        Run a cart operation against the latest snapshot and store the result.

        Args:
            session_id: Session whose cart is updated
            operation: Function taking the cart first (e.g. add_to_cart)
            *args, **kwargs: Remaining arguments for the operation

        Returns:
            The stored updated cart
        """
        with self._lock_for(session_id):
            cart = self._carts.get(session_id) or Cart(session_id=session_id)
            updated = operation(cart, *args, **kwargs)
            self._carts[session_id] = updated
            return updated

    def drop(self, session_id: str) -> bool:
        """Forget a session; waits for any operation running on it to finish."""
        # The session lock is kept so callers queued on it stay serialized after the drop
        with self._lock_for(session_id):
            removed = self._carts.pop(session_id, None) is not None
        if removed:
            logger.info(f"[MEMORY] Dropped cart for session {session_id}")
        return removed

    def sessions(self) -> List[str]:
        return list(self._carts)
