"""
Shopping List Schemas
"""

from pydantic import Field
from typing import Optional

from homestock.models.food import QuantityUnit
from homestock.schemas.common import CamelModel, OwnedResponse


class ShoppingListItemCreate(CamelModel):
    item_name: str = Field(..., min_length=1, max_length=255)
    quantity: Optional[float] = Field(None, ge=0)
    unit: QuantityUnit = QuantityUnit.COUNT


class ShoppingListItemUpdate(CamelModel):
    item_name: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[QuantityUnit] = None


class ShoppingListItemResponse(OwnedResponse):
    item_name: str
    quantity: Optional[float] = None
    unit: QuantityUnit
