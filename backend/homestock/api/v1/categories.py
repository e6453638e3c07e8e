"""
Categories API Endpoints
CRUD operations for the caller's categories, plus active-only and name search lists.

Other entities refer to categories by name; renaming or deleting a
category does not touch them.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError
from homestock.db.session import get_db
from homestock.models.category import Category, CategoryStatus
from homestock.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from homestock.schemas.common import DeleteResponse
from homestock.services.resource_service import ResourceService


router = APIRouter(prefix="/category", tags=["Categories"])


def _get_category_or_404(db: Session, category_id: UUID, owner_id: UUID) -> Category:
    category = ResourceService.get_one(db, Category, category_id, owner_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    data: CategoryCreate,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.create(db, Category, owner_id, data)


@router.get("", response_model=List[CategoryResponse])
def get_categories(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.get_all(db, Category, owner_id)


@router.get("/active", response_model=List[CategoryResponse])
def get_active_categories(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    """Get the caller's categories with status Active."""
    return ResourceService.get_all(
        db, Category, owner_id,
        Category.status == CategoryStatus.ACTIVE
    )


@router.get("/search", response_model=List[CategoryResponse])
def search_categories(
    q: str = Query(..., min_length=1, description="Case-insensitive name fragment"),
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.search(db, Category, owner_id, Category.name, q)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_category_or_404(db, category_id, owner_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: UUID,
    data: CategoryUpdate,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    category = _get_category_or_404(db, category_id, owner_id)
    return ResourceService.update(db, category, data)


@router.delete("/{category_id}", response_model=DeleteResponse[CategoryResponse])
def delete_category(
    category_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    category = _get_category_or_404(db, category_id, owner_id)
    deleted = CategoryResponse.model_validate(category)
    ResourceService.delete(db, category)
    return DeleteResponse[CategoryResponse](message="Category deleted successfully", deleted=deleted)
