"""
Food Item Model
Pantry food items with usage and restock thresholds.

Also defines QuantityUnit, the unit enum shared by every model that stores
a quantity (food, shopping list, waste).
"""

from sqlalchemy import Column, String, Float, Enum as SQLEnum
import enum

from homestock.models.base import OwnedModel


class QuantityUnit(str, enum.Enum):
    """Units a quantity can be expressed in."""
    KG = "kg"
    G = "g"
    LITER = "liter"
    ML = "ml"
    PACKS = "packs"
    COUNT = "count"


class FoodItem(OwnedModel):
    """
    Food item tracked in the pantry.

    Fields:
        name: Item name (trimmed on input)
        quantity: Current stock in `unit`
        category: Category name
        usage_quantity: Typical consumption per use
        restock_quantity: Stock level at which the item should be restocked
        unit: QuantityUnit (default: count)
    """
    __tablename__ = "food_items"

    name = Column(String(255), nullable=False, index=True)
    quantity = Column(Float, nullable=False)
    category = Column(String(100), nullable=False)
    usage_quantity = Column(Float, nullable=False)
    restock_quantity = Column(Float, nullable=False)

    unit = Column(
        SQLEnum(QuantityUnit, name="quantity_unit"),
        default=QuantityUnit.COUNT,
        nullable=False
    )

    def __repr__(self):
        return f"<FoodItem(id={self.id}, name='{self.name}')>"
