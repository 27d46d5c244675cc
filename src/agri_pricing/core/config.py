"""
Pricing engine configuration: tolerances, the dynamic unit ladder and
display settings.
"""

import logging
import os
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

# Two quantities closer than this are the same denomination
UNIT_MATCH_EPSILON = 0.01

# Denominations offered for every product, in base-measure units
DEFAULT_UNIT_LADDER: Tuple[float, ...] = (50, 25, 10, 5, 1, 0.5, 0.25)

DEFAULT_MIN_SELLABLE_QUANTITY = 0.25
MONEY_DECIMAL_PLACES = 2
DEFAULT_CURRENCY_SYMBOL = "₱"
DEFAULT_MEASURE_SUFFIX = "kg"

_ENV_PREFIX = "AGRI_PRICING_"


class PricingConfig(BaseModel):
    """Injectable settings shared by the resolver, calculator and display helpers."""
    unit_ladder: Tuple[float, ...] = DEFAULT_UNIT_LADDER
    match_epsilon: float = UNIT_MATCH_EPSILON
    default_min_sellable_quantity: float = DEFAULT_MIN_SELLABLE_QUANTITY
    measure_suffix: str = DEFAULT_MEASURE_SUFFIX
    fraction_labels: Dict[float, str] = {0.5: "1/2", 0.25: "1/4"}
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    model_config = ConfigDict(frozen=True)

    @field_validator("unit_ladder")
    @classmethod
    def check_ladder(cls, v):
        if not v:
            raise ValueError("Unit ladder must not be empty")
        if any(step <= 0 for step in v):
            raise ValueError("Unit ladder entries must be positive")
        return tuple(sorted(v, reverse=True))

    @field_validator("match_epsilon", "default_min_sellable_quantity")
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Must be positive")
        return v

    def quantities_match(self, a: float, b: float) -> bool:
        return abs(a - b) < self.match_epsilon

    def unit_label(self, quantity: float) -> str:
        """Display label for a ladder denomination ("50kg", "1/2", "1/4")."""
        if quantity < 1:
            for fraction, label in self.fraction_labels.items():
                if self.quantities_match(quantity, fraction):
                    return label
        return f"{format_quantity(quantity)}{self.measure_suffix}"

    def format_money(self, amount: float) -> str:
        return f"{self.currency_symbol}{amount:.{MONEY_DECIMAL_PLACES}f}"

    @classmethod
    def from_env(cls) -> "PricingConfig":
        """Build a config from AGRI_PRICING_* environment variables."""
        overrides = {}

        ladder = os.getenv(f"{_ENV_PREFIX}UNIT_LADDER")
        if ladder:
            overrides["unit_ladder"] = tuple(
                float(step) for step in ladder.split(",") if step.strip()
            )

        epsilon = os.getenv(f"{_ENV_PREFIX}EPSILON")
        if epsilon:
            overrides["match_epsilon"] = float(epsilon)

        suffix = os.getenv(f"{_ENV_PREFIX}MEASURE_SUFFIX")
        if suffix:
            overrides["measure_suffix"] = suffix

        currency = os.getenv(f"{_ENV_PREFIX}CURRENCY")
        if currency:
            overrides["currency_symbol"] = currency

        if overrides:
            logger.info(f"[CONFIG] Environment overrides: {sorted(overrides)}")
        return cls(**overrides)


def format_quantity(quantity: float) -> str:
    """Render 50.0 as "50" and 2.5 as "2.5"."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"


def round_money(amount: float) -> float:
    return round(amount, MONEY_DECIMAL_PLACES)


DEFAULT_CONFIG = PricingConfig()
