"""
Shopping cart models.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime, timezone
import uuid

from .product import Unit


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CartLineItem(BaseModel):
    """
    One cart row for a (product, tier) pair.

    For a base-unit-tier line `quantity` counts whole base units (sacks);
    for a sub-unit-tier line it is the summed base-measure quantity (kg).
    """
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    product_id: str
    is_base_unit_tier: bool
    quantity: float
    unit_price: float  # per base unit, or per base-measure unit for sub-unit tier
    line_total: float
    selected_unit: Unit  # display only

    model_config = ConfigDict(frozen=True)

    @field_validator("quantity")
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Must be positive")
        return v

    @property
    def measure_quantity(self) -> float:
        """Quantity expressed in the base measure (e.g. 2 sacks of 50kg -> 100)."""
        if self.is_base_unit_tier:
            return self.quantity * self.selected_unit.conversion_factor
        return self.quantity


class Cart(BaseModel):
    """Shopping cart value. Core functions return new carts instead of mutating."""
    session_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    items: List[CartLineItem] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    last_updated: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(frozen=True)

    @property
    def subtotal(self) -> float:
        return sum(i.line_total for i in self.items)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def find_line(self, product_id: str, is_base_unit_tier: bool) -> Optional[CartLineItem]:
        for item in self.items:
            if item.product_id == product_id and item.is_base_unit_tier == is_base_unit_tier:
                return item
        return None

    def get_line(self, line_id: str) -> Optional[CartLineItem]:
        for item in self.items:
            if item.id == line_id:
                return item
        return None

    def lines_for_product(self, product_id: str) -> List[CartLineItem]:
        return [i for i in self.items if i.product_id == product_id]
