"""
Dashboard API Endpoint
Aggregate summary of the caller's inventory, budgets and waste.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from homestock.api.v1.deps import get_owner_id
from homestock.db.session import get_db
from homestock.schemas.dashboard import DashboardResponse
from homestock.services.dashboard_service import DashboardService


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    """
    Counts and totals per entity for the authenticated user.

    Example response:
        {
            "products": {"count": 3, "totalQuantity": 7.0, "totalValue": 21.5},
            "foods": {"count": 2, "lowStock": 1},
            "shoppingList": {"count": 4},
            "budgets": {"count": 1, "totalAmount": 300.0},
            "categories": {"count": 5, "active": 4},
            "waste": {"count": 2, "byCategory": {"Dairy": 2}, "byReason": {"Expired": 2}}
        }
    """
    return DashboardService.get_summary(db, owner_id)
