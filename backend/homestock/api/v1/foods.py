"""
Food Items API Endpoints
Pantry food items with usage and restock thresholds.

Endpoints:
- POST /food - Create food item
- GET /food - List the caller's food items
- GET /food/search?q= - Name search
- GET/PUT/DELETE /food/{id}
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError
from homestock.db.session import get_db
from homestock.models.food import FoodItem
from homestock.schemas.common import DeleteResponse
from homestock.schemas.food import FoodItemCreate, FoodItemResponse, FoodItemUpdate
from homestock.services.resource_service import ResourceService


router = APIRouter(prefix="/food", tags=["Food"])


def _get_food_or_404(db: Session, food_id: UUID, owner_id: UUID) -> FoodItem:
    food = ResourceService.get_one(db, FoodItem, food_id, owner_id)
    if food is None:
        raise NotFoundError("Food item not found")
    return food


@router.post("", response_model=FoodItemResponse, status_code=status.HTTP_201_CREATED)
def create_food(
    data: FoodItemCreate,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.create(db, FoodItem, owner_id, data)


@router.get("", response_model=List[FoodItemResponse])
def get_foods(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.get_all(db, FoodItem, owner_id)


@router.get("/search", response_model=List[FoodItemResponse])
def search_foods(
    q: str = Query(..., min_length=1, description="Case-insensitive name fragment"),
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    """Search the caller's food items by name."""
    return ResourceService.search(db, FoodItem, owner_id, FoodItem.name, q)


@router.get("/{food_id}", response_model=FoodItemResponse)
def get_food(
    food_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_food_or_404(db, food_id, owner_id)


@router.put("/{food_id}", response_model=FoodItemResponse)
def update_food(
    food_id: UUID,
    data: FoodItemUpdate,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    food = _get_food_or_404(db, food_id, owner_id)
    return ResourceService.update(db, food, data)


@router.delete("/{food_id}", response_model=DeleteResponse[FoodItemResponse])
def delete_food(
    food_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    food = _get_food_or_404(db, food_id, owner_id)
    deleted = FoodItemResponse.model_validate(food)
    ResourceService.delete(db, food)
    return DeleteResponse[FoodItemResponse](message="Food item deleted successfully", deleted=deleted)
