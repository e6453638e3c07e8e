"""
User Pydantic Schemas
Request and response models for authentication and user administration.

Password hashes never appear in any response schema.
"""

from pydantic import ConfigDict, EmailStr, Field
from typing import Optional
from uuid import UUID
from datetime import datetime

from homestock.models.user import UserRole
from homestock.schemas.common import CamelModel


# ============================================================================
# Authentication Schemas
# ============================================================================

class UserCreate(CamelModel):
    """
    Schema for user registration request.

    Example:
        {
            "username": "maria",
            "email": "maria@example.com",
            "password": "SecurePass123!",
            "profilePicture": "https://example.com/maria.png"
        }
    """
    username: str = Field(..., min_length=1, max_length=100, examples=["maria"])
    email: EmailStr = Field(..., examples=["maria@example.com"])
    password: str = Field(..., min_length=8, description="Password (minimum 8 characters)")
    role: Optional[UserRole] = Field(None, description="Requested role (admin needs ALLOW_ADMIN_REGISTRATION)")
    profile_picture: Optional[str] = Field(None, max_length=500)


class LoginRequest(CamelModel):
    """Schema for login. Credentials are checked against the stored hash."""
    email: str = Field(..., examples=["maria@example.com"])
    password: str


class TokenPayload(CamelModel):
    """
    Decoded JWT payload (internal use).

    sub: user id; jti: per-token nonce so every issued token string is unique.
    """
    sub: str
    jti: Optional[str] = None
    exp: Optional[int] = None


# ============================================================================
# User Profile Schemas
# ============================================================================

class UserResponse(CamelModel):
    """
    Public user representation.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "username": "maria",
            "email": "maria@example.com",
            "role": "user",
            "profilePicture": "",
            "createdAt": "2024-01-13T10:30:00Z",
            "updatedAt": "2024-01-13T10:30:00Z"
        }
    """
    id: UUID
    username: str
    email: str
    role: UserRole
    profile_picture: str = ""
    created_at: datetime
    updated_at: datetime


class AuthResponse(CamelModel):
    """Returned by /register and /login."""
    user: UserResponse
    token: str


class ProfileUpdate(CamelModel):
    """
    Self-service profile update.

    Only provided fields are changed. `_id`, when sent, must be the caller's
    own id. Role is not part of this schema and unknown fields are rejected,
    so users can never change their own role.
    """
    model_config = ConfigDict(extra="forbid")

    id: Optional[UUID] = Field(None, alias="_id")
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    profile_picture: Optional[str] = Field(None, max_length=500)


class AdminUserUpdate(CamelModel):
    """
    Administrative update of any user.

    Allow-list: username, email, role, profilePicture. Any other field
    fails validation with 400.
    """
    model_config = ConfigDict(extra="forbid")

    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    profile_picture: Optional[str] = Field(None, max_length=500)
