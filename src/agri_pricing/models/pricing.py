"""
Price calculation result models.
"""

from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional


class PriceBreakdown(BaseModel):
    """How a requested quantity was priced."""
    quantity: float
    method: Literal["per_measure", "base_unit", "mixed", "flat"]
    base_units: int = 0  # whole base units charged at the fixed base price
    remainder: float = 0.0  # base-measure quantity charged per measure
    base_total: float = 0.0
    remainder_total: float = 0.0
    total: float
    base_unit_id: Optional[str] = None
    per_measure_rate: Optional[float] = None

    model_config = ConfigDict(frozen=True)
