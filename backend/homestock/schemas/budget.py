"""
Budget Schemas
Pydantic models for Budget API request/response validation.
"""

from pydantic import Field
from typing import Optional

from homestock.schemas.common import CamelModel, OwnedResponse


class BudgetCreate(CamelModel):
    """Schema for creating a budget"""
    budget_name: str = Field(..., min_length=1, max_length=255)
    total_amount: float = Field(..., ge=0)
    start_date: str = Field(..., min_length=1, max_length=50, examples=["2024-01-01"])
    end_date: str = Field(..., min_length=1, max_length=50, examples=["2024-01-31"])
    category: str = Field(..., min_length=1, max_length=100)
    payment_method: str = Field(..., min_length=1, max_length=100, examples=["Card"])


class BudgetUpdate(CamelModel):
    """Schema for updating a budget"""
    budget_name: Optional[str] = Field(None, min_length=1, max_length=255)
    total_amount: Optional[float] = Field(None, ge=0)
    start_date: Optional[str] = Field(None, min_length=1, max_length=50)
    end_date: Optional[str] = Field(None, min_length=1, max_length=50)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    payment_method: Optional[str] = Field(None, min_length=1, max_length=100)


class BudgetResponse(OwnedResponse):
    budget_name: str
    total_amount: float
    start_date: str
    end_date: str
    category: str
    payment_method: str
