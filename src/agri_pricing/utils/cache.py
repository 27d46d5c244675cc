"""
Caller-owned cache of resolved unit catalogs.

Construct one per consumer and pass it where it is needed; nothing in the
package keeps a module-level instance.
"""

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Dict, List, Optional, Tuple

from agri_pricing.core.config import PricingConfig
from agri_pricing.core.resolver import resolve_units
from agri_pricing.models.product import Product, Unit

logger = logging.getLogger(__name__)


class CatalogCache:
    """TTL + max-size (least recently used) cache keyed by product id."""

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_size: int = 256,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.ttl_seconds = ttl_seconds
        self.max_size = max_size
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, List[Unit]]]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, product_id: str) -> bool:
        return self.get(product_id) is not None

    def get(self, product_id: str) -> Optional[List[Unit]]:
        with self._lock:
            entry = self._entries.get(product_id)
            if entry is None:
                self.misses += 1
                return None

            stored_at, units = entry
            if self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[product_id]
                self.misses += 1
                logger.debug(f"[CACHE] Expired catalog for {product_id}")
                return None

            self._entries.move_to_end(product_id)
            self.hits += 1
            return list(units)

    def set(self, product_id: str, units: List[Unit]) -> None:
        with self._lock:
            self._entries[product_id] = (self._clock(), list(units))
            self._entries.move_to_end(product_id)
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self.evictions += 1
                logger.debug(f"[CACHE] Evicted catalog for {evicted}")

    def get_or_resolve(self, product: Product, config: Optional[PricingConfig] = None) -> List[Unit]:
        """Cached catalog for the product, resolving and storing it on a miss."""
        units = self.get(product.id)
        if units is None:
            units = resolve_units(product, config)
            self.set(product.id, units)
        return units

    def invalidate(self, product_id: str) -> bool:
        with self._lock:
            return self._entries.pop(product_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("[CACHE] Cleared")

    def stats(self) -> Dict[str, int]:
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
        }
