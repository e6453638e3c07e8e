"""
Waste Schemas

Waste endpoints accept JSON or multipart/form-data. Form values arrive as
strings; quantity is coerced to a number and category/reason/unit are
checked against their enums, same as for JSON bodies.
"""

from pydantic import Field
from typing import Optional

from homestock.models.food import QuantityUnit
from homestock.models.waste import WasteCategory, WasteReason
from homestock.schemas.common import CamelModel, OwnedResponse


class WasteCreate(CamelModel):
    item_name: str = Field(..., min_length=1, max_length=255)
    category: WasteCategory
    quantity: float = Field(..., ge=0)
    unit: QuantityUnit = QuantityUnit.COUNT
    reason: WasteReason
    date: str = Field(..., min_length=1, max_length=50, examples=["2024-02-14"])
    image_url: Optional[str] = Field(None, max_length=500)


class WasteUpdate(CamelModel):
    item_name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[WasteCategory] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[QuantityUnit] = None
    reason: Optional[WasteReason] = None
    date: Optional[str] = Field(None, min_length=1, max_length=50)
    image_url: Optional[str] = Field(None, max_length=500)


class WasteResponse(OwnedResponse):
    item_name: str
    category: WasteCategory
    quantity: float
    unit: QuantityUnit
    reason: WasteReason
    date: str
    image_url: Optional[str] = None
