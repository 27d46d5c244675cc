"""
Order payload models handed to the order service at checkout.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List


class OrderLine(BaseModel):
    """Flattened cart line."""
    product_id: str
    unit_id: str
    quantity: float
    unit_price: float
    line_total: float
    measure_quantity: float  # base-measure quantity, for inventory reservation

    @field_validator("quantity", "measure_quantity")
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Must be positive")
        return v


class OrderPayload(BaseModel):
    """Order submission body built from a cart."""
    session_id: str
    lines: List[OrderLine] = Field(default_factory=list)
    total: float = 0.0
    currency: str = "PHP"
