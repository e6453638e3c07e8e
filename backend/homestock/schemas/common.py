"""
Shared Schema Building Blocks

CamelModel gives every request/response schema camelCase JSON names
(itemName, profilePicture, createdAt, ...) while Python code keeps
snake_case attributes. Both spellings are accepted on input.
"""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OwnedResponse(CamelModel):
    """Fields every per-user resource returns."""
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class MessageResponse(CamelModel):
    message: str


T = TypeVar("T")


class DeleteResponse(CamelModel, Generic[T]):
    """Acknowledgment of a hard delete, carrying the removed document."""
    message: str
    deleted: T
