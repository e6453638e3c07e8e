"""
User Token Model
One row per active session token.

A bearer token authenticates only while its row exists: login and register
add a row, logout deletes it.
"""

from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from homestock.models.base import BaseModel


class UserToken(BaseModel):
    __tablename__ = "user_tokens"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    token = Column(String(512), unique=True, nullable=False, index=True)

    user = relationship("User", back_populates="tokens")

    def __repr__(self):
        return f"<UserToken(id={self.id}, user_id={self.user_id})>"
