"""
Budgets API Endpoints
CRUD operations for spending budgets.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError
from homestock.db.session import get_db
from homestock.models.budget import Budget
from homestock.schemas.budget import BudgetCreate, BudgetResponse, BudgetUpdate
from homestock.schemas.common import DeleteResponse
from homestock.services.resource_service import ResourceService


router = APIRouter(prefix="/budgets", tags=["Budgets"])


def _get_budget_or_404(db: Session, budget_id: UUID, owner_id: UUID) -> Budget:
    budget = ResourceService.get_one(db, Budget, budget_id, owner_id)
    if budget is None:
        raise NotFoundError("Budget not found")
    return budget


@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
def create_budget(
    data: BudgetCreate,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    """
    Create a budget.

    Dates are kept as the strings the client sends; ISO dates sort correctly.
    """
    return ResourceService.create(db, Budget, owner_id, data)


@router.get("", response_model=List[BudgetResponse])
def get_budgets(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.get_all(db, Budget, owner_id)


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(
    budget_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_budget_or_404(db, budget_id, owner_id)


@router.put("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: UUID,
    data: BudgetUpdate,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    budget = _get_budget_or_404(db, budget_id, owner_id)
    return ResourceService.update(db, budget, data)


@router.delete("/{budget_id}", response_model=DeleteResponse[BudgetResponse])
def delete_budget(
    budget_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    budget = _get_budget_or_404(db, budget_id, owner_id)
    deleted = BudgetResponse.model_validate(budget)
    ResourceService.delete(db, budget)
    return DeleteResponse[BudgetResponse](message="Budget deleted successfully", deleted=deleted)
