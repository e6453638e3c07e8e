"""
Category Schemas
Pydantic models for Category API request/response validation.
"""

from pydantic import Field
from typing import Optional

from homestock.models.category import CategoryStatus
from homestock.schemas.common import CamelModel, OwnedResponse


class CategoryCreate(CamelModel):
    """Schema for creating a category"""
    name: str = Field(..., min_length=1, max_length=100, description="Category name")
    description: Optional[str] = Field(None, max_length=500, description="Category description")
    status: CategoryStatus = Field(CategoryStatus.ACTIVE, description="Active or Inactive")


class CategoryUpdate(CamelModel):
    """Schema for updating a category"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    status: Optional[CategoryStatus] = None


class CategoryResponse(OwnedResponse):
    """Schema for category response"""
    name: str
    description: Optional[str] = None
    status: CategoryStatus
