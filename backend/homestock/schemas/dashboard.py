"""
Dashboard Schemas
Per-user aggregate summary returned by GET /api/dashboard.
"""

from typing import Dict

from homestock.schemas.common import CamelModel


class ProductSummary(CamelModel):
    count: int
    total_quantity: float
    total_value: float


class FoodSummary(CamelModel):
    count: int
    low_stock: int  # quantity at or below restock threshold


class CountSummary(CamelModel):
    count: int


class BudgetSummary(CamelModel):
    count: int
    total_amount: float


class CategorySummary(CamelModel):
    count: int
    active: int


class WasteSummary(CamelModel):
    count: int
    by_category: Dict[str, int]
    by_reason: Dict[str, int]


class DashboardResponse(CamelModel):
    products: ProductSummary
    foods: FoodSummary
    shopping_list: CountSummary
    budgets: BudgetSummary
    categories: CategorySummary
    waste: WasteSummary
