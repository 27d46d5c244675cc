"""
Product and unit models for multi-unit (bulk + loose) products.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional


class Unit(BaseModel):
    """A purchasable denomination of a product (e.g. a 50kg sack or 1kg loose)."""
    id: str
    name: str = ""
    label: str
    conversion_factor: float  # base-measure quantity one of this unit equals
    is_base_unit: bool = False
    price: float
    min_sellable_quantity: float = 0.25
    is_dynamic: bool = False
    pricing_method: Literal["base_unit", "smallest_unit"] = "smallest_unit"

    model_config = ConfigDict(frozen=True)

    @field_validator("conversion_factor", "min_sellable_quantity")
    @classmethod
    def check_positive(cls, v):
        if v <= 0:
            raise ValueError("Must be positive")
        return v

    @field_validator("price")
    @classmethod
    def check_non_negative(cls, v):
        if v < 0:
            raise ValueError("Must be non-negative")
        return v

    @property
    def price_per_measure(self) -> float:
        return self.price / self.conversion_factor

    @classmethod
    def from_catalog_row(cls, row: dict) -> "Unit":
        """Build a unit from a product catalog row (unit_name / unit_label / ...)."""
        price = row.get("price")
        if price is None:
            price = row.get("price_per_unit", 0.0)
        is_base_unit = bool(row.get("is_base_unit", False))
        return cls(
            id=str(row["id"]),
            name=row.get("unit_name") or "",
            label=row.get("unit_label") or row.get("unit_name") or str(row["id"]),
            conversion_factor=row["conversion_factor"],
            is_base_unit=is_base_unit,
            price=price,
            min_sellable_quantity=row.get("min_sellable_quantity") or 0.25,
            is_dynamic=bool(row.get("is_dynamic", False)),
            pricing_method="base_unit" if is_base_unit else "smallest_unit",
        )


class Product(BaseModel):
    """A product with its configured sellable units."""
    id: str
    name: str
    sku: Optional[str] = None
    price: float = 0.0  # flat price, used only when tiering is impossible
    units: List[Unit] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("price")
    @classmethod
    def check_non_negative(cls, v):
        if v < 0:
            raise ValueError("Must be non-negative")
        return v

    def base_units(self) -> List[Unit]:
        return [u for u in self.units if u.is_base_unit]

    def base_unit(self) -> Optional[Unit]:
        """First unit flagged as base unit, in configured order."""
        for unit in self.units:
            if unit.is_base_unit:
                return unit
        return None

    def smallest_unit(self) -> Optional[Unit]:
        """Unit with the minimum conversion factor; first one wins on ties."""
        smallest = None
        for unit in self.units:
            if smallest is None or unit.conversion_factor < smallest.conversion_factor:
                smallest = unit
        return smallest

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    @classmethod
    def from_catalog_row(cls, row: dict) -> "Product":
        """Build a product (and its units) from a catalog service row."""
        product_id = row.get("product_id", row.get("id"))
        return cls(
            id=str(product_id),
            name=row.get("name", ""),
            sku=row.get("sku"),
            price=row.get("price") or 0.0,
            units=[Unit.from_catalog_row(u) for u in row.get("units") or []],
        )
