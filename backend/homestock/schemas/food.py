"""
Food Item Schemas
Pydantic models for pantry food items.
"""

from pydantic import Field, field_validator
from typing import Optional

from homestock.models.food import QuantityUnit
from homestock.schemas.common import CamelModel, OwnedResponse


class FoodItemCreate(CamelModel):
    """Schema for creating a food item"""
    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    usage_quantity: float = Field(..., ge=0)
    restock_quantity: float = Field(..., ge=0)
    unit: QuantityUnit = QuantityUnit.COUNT

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class FoodItemUpdate(CamelModel):
    """Schema for updating a food item"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    quantity: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    usage_quantity: Optional[float] = Field(None, ge=0)
    restock_quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[QuantityUnit] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class FoodItemResponse(OwnedResponse):
    name: str
    quantity: float
    category: str
    usage_quantity: float
    restock_quantity: float
    unit: QuantityUnit
