"""
Products API Endpoints
CRUD operations for household products (name, category, quantity, price, dates).

Every operation is scoped to the authenticated user.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError
from homestock.db.session import get_db
from homestock.models.product import Product
from homestock.schemas.common import DeleteResponse
from homestock.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from homestock.services.resource_service import ResourceService


router = APIRouter(prefix="/products", tags=["Products"])


def _get_product_or_404(db: Session, product_id: UUID, owner_id: UUID) -> Product:
    product = ResourceService.get_one(db, Product, product_id, owner_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    Requires the x-user-id header naming the authenticated user.
    """
    return ResourceService.create(db, Product, owner_id, data)


@router.get("", response_model=List[ProductResponse])
def get_products(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    """Get the caller's products, newest first."""
    return ResourceService.get_all(db, Product, owner_id)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_product_or_404(db, product_id, owner_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: UUID,
    data: ProductUpdate,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    """
    Update a product. Only provided fields are overwritten.
    """
    product = _get_product_or_404(db, product_id, owner_id)
    return ResourceService.update(db, product, data)


@router.delete("/{product_id}", response_model=DeleteResponse[ProductResponse])
def delete_product(
    product_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    """Hard-delete a product and return the removed document."""
    product = _get_product_or_404(db, product_id, owner_id)
    deleted = ProductResponse.model_validate(product)
    ResourceService.delete(db, product)
    return DeleteResponse[ProductResponse](message="Product deleted successfully", deleted=deleted)
