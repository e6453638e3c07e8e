"""
Shopping List API Endpoints
Items the caller plans to buy, with an optional quantity and unit.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError
from homestock.db.session import get_db
from homestock.models.shopping_list import ShoppingListItem
from homestock.schemas.common import DeleteResponse
from homestock.schemas.shopping_list import (
    ShoppingListItemCreate,
    ShoppingListItemResponse,
    ShoppingListItemUpdate,
)
from homestock.services.resource_service import ResourceService


# Path keeps the historical spelling used by existing clients
router = APIRouter(prefix="/shoppinList", tags=["Shopping List"])


def _get_item_or_404(db: Session, item_id: UUID, owner_id: UUID) -> ShoppingListItem:
    item = ResourceService.get_one(db, ShoppingListItem, item_id, owner_id)
    if item is None:
        raise NotFoundError("Shopping list item not found")
    return item


@router.post("", response_model=ShoppingListItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    data: ShoppingListItemCreate,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.create(db, ShoppingListItem, owner_id, data)


@router.get("", response_model=List[ShoppingListItemResponse])
def get_items(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.get_all(db, ShoppingListItem, owner_id)


@router.get("/search", response_model=List[ShoppingListItemResponse])
def search_items(
    q: str = Query(..., min_length=1),
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.search(db, ShoppingListItem, owner_id, ShoppingListItem.item_name, q)


@router.get("/{item_id}", response_model=ShoppingListItemResponse)
def get_item(
    item_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_item_or_404(db, item_id, owner_id)


@router.put("/{item_id}", response_model=ShoppingListItemResponse)
def update_item(
    item_id: UUID,
    data: ShoppingListItemUpdate,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    """
    Update a shopping list item.

    Sending "quantity": null clears the quantity.
    """
    item = _get_item_or_404(db, item_id, owner_id)
    return ResourceService.update(db, item, data)


@router.delete("/{item_id}", response_model=DeleteResponse[ShoppingListItemResponse])
def delete_item(
    item_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    item = _get_item_or_404(db, item_id, owner_id)
    deleted = ShoppingListItemResponse.model_validate(item)
    ResourceService.delete(db, item)
    return DeleteResponse[ShoppingListItemResponse](
        message="Shopping list item deleted successfully",
        deleted=deleted
    )
