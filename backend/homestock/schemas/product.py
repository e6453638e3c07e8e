"""
Product Schemas
Pydantic models for Product API request/response validation.
"""

from pydantic import Field
from typing import Optional

from homestock.schemas.common import CamelModel, OwnedResponse


class ProductCreate(CamelModel):
    """Schema for creating a product"""
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    price: float = Field(..., ge=0)
    manufacture_date: Optional[str] = Field(None, max_length=50, examples=["2024-01-10"])
    expiry_date: Optional[str] = Field(None, max_length=50, examples=["2024-03-10"])
    image: Optional[str] = Field(None, max_length=500)


class ProductUpdate(CamelModel):
    """Schema for updating a product (only provided fields overwrite)"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    quantity: Optional[float] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    manufacture_date: Optional[str] = Field(None, max_length=50)
    expiry_date: Optional[str] = Field(None, max_length=50)
    image: Optional[str] = Field(None, max_length=500)


class ProductResponse(OwnedResponse):
    name: str
    category: str
    quantity: float
    price: float
    manufacture_date: Optional[str] = None
    expiry_date: Optional[str] = None
    image: Optional[str] = None
