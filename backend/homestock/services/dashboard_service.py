"""
Dashboard Service
Aggregate read composition over the caller's own resources.
"""

from typing import Dict
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from homestock.models.budget import Budget
from homestock.models.category import Category, CategoryStatus
from homestock.models.food import FoodItem
from homestock.models.product import Product
from homestock.models.shopping_list import ShoppingListItem
from homestock.models.waste import WasteRecord
from homestock.services.resource_service import ResourceService


class DashboardService:

    @staticmethod
    def _waste_breakdown(db: Session, owner_id: UUID, column) -> Dict[str, int]:
        rows = (
            db.query(column, func.count(WasteRecord.id))
            .filter(WasteRecord.user_id == owner_id)
            .group_by(column)
            .all()
        )
        return {key.value: count for key, count in rows}

    @staticmethod
    def get_summary(db: Session, owner_id: UUID) -> Dict:
        """
        Build the dashboard summary for one user.

        Returns:
            Dict matching DashboardResponse
        """
        product_count, total_quantity, total_value = (
            db.query(
                func.count(Product.id),
                func.coalesce(func.sum(Product.quantity), 0.0),
                func.coalesce(func.sum(Product.price * Product.quantity), 0.0),
            )
            .filter(Product.user_id == owner_id)
            .one()
        )

        total_budget = (
            db.query(func.coalesce(func.sum(Budget.total_amount), 0.0))
            .filter(Budget.user_id == owner_id)
            .scalar()
        )

        return {
            "products": {
                "count": product_count,
                "total_quantity": float(total_quantity),
                "total_value": round(float(total_value), 2),
            },
            "foods": {
                "count": ResourceService.count(db, FoodItem, owner_id),
                "low_stock": ResourceService.count(
                    db, FoodItem, owner_id,
                    FoodItem.quantity <= FoodItem.restock_quantity
                ),
            },
            "shopping_list": {
                "count": ResourceService.count(db, ShoppingListItem, owner_id),
            },
            "budgets": {
                "count": ResourceService.count(db, Budget, owner_id),
                "total_amount": round(float(total_budget), 2),
            },
            "categories": {
                "count": ResourceService.count(db, Category, owner_id),
                "active": ResourceService.count(
                    db, Category, owner_id,
                    Category.status == CategoryStatus.ACTIVE
                ),
            },
            "waste": {
                "count": ResourceService.count(db, WasteRecord, owner_id),
                "by_category": DashboardService._waste_breakdown(db, owner_id, WasteRecord.category),
                "by_reason": DashboardService._waste_breakdown(db, owner_id, WasteRecord.reason),
            },
        }
