"""
Base Model Classes
Provides common fields and functionality for all database models.

All application models inherit from BaseModel (or OwnedModel for per-user
resources) instead of Base directly. This ensures consistent ID format (UUID)
and automatic timestamp tracking.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Uuid, func
import uuid

from homestock.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - UUID primary key (no sequential guessing of IDs)
    - created_at timestamp (automatically set on insert)
    - updated_at timestamp (automatically updated on modification)
    """

    __abstract__ = True

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,  # Auto-generate UUID v4 on insert
        nullable=False
    )

    # Python-side default: sub-second precision for newest-first lists
    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False
    )

    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False
    )

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"


class OwnedModel(BaseModel):
    """
    Abstract base for per-user resources.

    user_id holds the owning user's id. It is compared by equality only:
    there is no foreign key, and deleting a user does not cascade to the
    records they own.
    """

    __abstract__ = True

    user_id = Column(
        Uuid(as_uuid=True),
        nullable=False,
        index=True,  # Every list query filters on the owner
        comment="Owning user's id"
    )
