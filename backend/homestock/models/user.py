"""
User Model
Represents accounts in the home inventory system.

Each user has:
- Unique email for authentication
- Bcrypt password hash (never stored in plain text, never returned)
- Profile information (username, profile picture)
- A role: "user" (default) or "admin"
- A list of active session tokens (see UserToken)
"""

from sqlalchemy import Column, String, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from homestock.models.base import BaseModel


class UserRole(str, enum.Enum):
    """User role types."""
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    """
    User model for authentication and profile management.

    Fields:
        id (UUID): Primary key, inherited from BaseModel
        username (str): Display name
        email (str): Unique email address for login
        password_hash (str): Bcrypt hashed password
        role (UserRole): Access level (user, admin)
        profile_picture (str): URL to profile picture, empty when unset
        created_at / updated_at: Timestamps

    Relationships:
        tokens: Active session tokens; removed together with the user
    """

    __tablename__ = "users"

    username = Column(
        String(100),
        nullable=False,
        comment="User's display name"
    )

    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,  # Index for fast lookups during login
        comment="User's email address for authentication"
    )

    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    role = Column(
        SQLEnum(UserRole, name="user_role"),
        default=UserRole.USER,
        nullable=False,
        comment="User role (user, admin)"
    )

    profile_picture = Column(
        String(500),
        default="",
        nullable=False,
        comment="URL to user's profile picture"
    )

    tokens = relationship(
        "UserToken",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, username={self.username})>"

    @property
    def is_admin(self) -> bool:
        """Check if user has admin role."""
        return self.role == UserRole.ADMIN
