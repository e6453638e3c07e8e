"""
Owned Resource Service
Generic CRUD operations for per-user resources (products, food items,
shopping list items, budgets, categories, waste records).

Every read and write is filtered by owner id. A record that belongs to
someone else behaves exactly like a record that does not exist.
Each operation is a single statement plus commit; there is no version
check, so concurrent updates to the same record are last-write-wins.
"""

from typing import List, Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel as Schema
from sqlalchemy.orm import Session

from homestock.models.base import OwnedModel


M = TypeVar("M", bound=OwnedModel)


class ResourceService:
    """
    Owner-scoped CRUD helpers.

    Usage:
        product = ResourceService.get_one(db, Product, product_id, owner_id)
        if product is None:
            raise NotFoundError("Product not found")
    """

    @staticmethod
    def get_all(db: Session, model: Type[M], owner_id: UUID, *criteria) -> List[M]:
        """List the owner's records, newest first. Extra criteria are ANDed."""
        query = db.query(model).filter(model.user_id == owner_id)
        if criteria:
            query = query.filter(*criteria)
        return query.order_by(model.created_at.desc()).all()

    @staticmethod
    def search(db: Session, model: Type[M], owner_id: UUID, column, term: str) -> List[M]:
        """Case-insensitive literal substring match on one column, owner scoped."""
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return ResourceService.get_all(db, model, owner_id, column.ilike(f"%{escaped}%", escape="\\"))

    @staticmethod
    def get_one(db: Session, model: Type[M], record_id: UUID, owner_id: UUID) -> Optional[M]:
        return db.query(model).filter(
            model.id == record_id,
            model.user_id == owner_id
        ).first()

    @staticmethod
    def create(db: Session, model: Type[M], owner_id: UUID, data: Schema) -> M:
        record = model(user_id=owner_id, **data.model_dump())
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def update(db: Session, record: M, data: Schema) -> M:
        """
        Overwrite only the fields present in the request.

        An explicit null clears an optional column and is ignored for a
        required one.
        """
        columns = record.__table__.columns
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and not columns[field].nullable:
                continue
            setattr(record, field, value)
        db.commit()
        db.refresh(record)
        return record

    @staticmethod
    def delete(db: Session, record: M) -> None:
        db.delete(record)
        db.commit()

    @staticmethod
    def count(db: Session, model: Type[M], owner_id: UUID, *criteria) -> int:
        query = db.query(model).filter(model.user_id == owner_id)
        if criteria:
            query = query.filter(*criteria)
        return query.count()
