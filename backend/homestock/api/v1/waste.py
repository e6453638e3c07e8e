"""
Waste API Endpoints
Records of wasted food: what, how much, why, and an optional photo.

Create and update accept a JSON body or a form (multipart or urlencoded).
A multipart "photo" file is stored under UPLOAD_DIR and its public URL
becomes imageUrl.
"""

from typing import Any, Dict, List, Optional, Tuple, Type
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel as Schema, ValidationError as SchemaValidationError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from homestock.api.v1.deps import get_create_owner_id, get_list_owner_id, get_owner_id
from homestock.core.exceptions import NotFoundError, ValidationError
from homestock.db.session import get_db
from homestock.models.waste import WasteRecord
from homestock.schemas.common import DeleteResponse
from homestock.schemas.waste import WasteCreate, WasteResponse, WasteUpdate
from homestock.services.resource_service import ResourceService
from homestock.services.upload_service import save_image


router = APIRouter(prefix="/waste", tags=["Waste"])

# Documents the accepted bodies; the handlers parse the request themselves
WASTE_BODY_DOC = {
    "requestBody": {
        "content": {
            "application/json": {"schema": {"type": "object"}},
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {"photo": {"type": "string", "format": "binary"}},
                }
            },
        },
        "required": True,
    }
}


async def _read_payload(request: Request) -> Tuple[Dict[str, Any], Optional[UploadFile]]:
    """Split the request body into plain fields and the optional photo."""
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        fields = {k: v for k, v in form.items() if not isinstance(v, UploadFile)}
        photo = form.get("photo")
        if isinstance(photo, UploadFile) and photo.filename:
            return fields, photo
        return fields, None

    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Validation failed")
    return body, None


def _validate(schema: Type[Schema], payload: Any) -> Schema:
    try:
        return schema.model_validate(payload)
    except SchemaValidationError as e:
        raise RequestValidationError(
            e.errors(include_url=False, include_context=False, include_input=False)
        )


def _get_waste_or_404(db: Session, waste_id: UUID, owner_id: UUID) -> WasteRecord:
    waste = ResourceService.get_one(db, WasteRecord, waste_id, owner_id)
    if waste is None:
        raise NotFoundError("Waste record not found")
    return waste


@router.post(
    "",
    response_model=WasteResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=WASTE_BODY_DOC
)
async def create_waste(
    request: Request,
    owner_id: UUID = Depends(get_create_owner_id),
    db: Session = Depends(get_db)
):
    """
    Record wasted food.

    Fields: itemName, category, quantity, unit, reason, date and either
    imageUrl or a multipart photo.
    """
    fields, photo = await _read_payload(request)
    data = _validate(WasteCreate, fields)

    if photo is not None:
        data.image_url = await run_in_threadpool(save_image, photo)

    return ResourceService.create(db, WasteRecord, owner_id, data)


@router.get("", response_model=List[WasteResponse])
def get_wastes(
    owner_id: UUID = Depends(get_list_owner_id),
    db: Session = Depends(get_db)
):
    return ResourceService.get_all(db, WasteRecord, owner_id)


@router.get("/{waste_id}", response_model=WasteResponse)
def get_waste(
    waste_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    return _get_waste_or_404(db, waste_id, owner_id)


@router.put("/{waste_id}", response_model=WasteResponse, openapi_extra=WASTE_BODY_DOC)
async def update_waste(
    waste_id: UUID,
    request: Request,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    """Update a waste record. A new photo replaces imageUrl."""
    waste = _get_waste_or_404(db, waste_id, owner_id)

    fields, photo = await _read_payload(request)
    data = _validate(WasteUpdate, fields)

    if photo is not None:
        data.image_url = await run_in_threadpool(save_image, photo)

    return ResourceService.update(db, waste, data)


@router.delete("/{waste_id}", response_model=DeleteResponse[WasteResponse])
def delete_waste(
    waste_id: UUID,
    owner_id: UUID = Depends(get_owner_id),
    db: Session = Depends(get_db)
):
    waste = _get_waste_or_404(db, waste_id, owner_id)
    deleted = WasteResponse.model_validate(waste)
    ResourceService.delete(db, waste)
    return DeleteResponse[WasteResponse](message="Waste record deleted successfully", deleted=deleted)
