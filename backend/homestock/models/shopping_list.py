"""
Shopping List Model
Items the user needs to buy.
"""

from sqlalchemy import Column, String, Float, Enum as SQLEnum

from homestock.models.base import OwnedModel
from homestock.models.food import QuantityUnit


class ShoppingListItem(OwnedModel):
    __tablename__ = "shopping_list_items"

    item_name = Column(String(255), nullable=False, index=True)

    # Optional amount to buy, as value + unit
    quantity = Column(Float, nullable=True)
    unit = Column(
        SQLEnum(QuantityUnit, name="quantity_unit"),
        default=QuantityUnit.COUNT,
        nullable=False
    )

    def __repr__(self):
        return f"<ShoppingListItem(id={self.id}, item_name='{self.item_name}')>"
