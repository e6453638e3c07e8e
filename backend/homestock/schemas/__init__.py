"""
Pydantic Schemas Module
Contains request/response schemas for API validation and serialization.

Pydantic schemas are used for:
- Validating incoming request data
- Serializing database models to JSON responses (camelCase field names)
- Auto-generating OpenAPI documentation
"""

from homestock.schemas.common import CamelModel, DeleteResponse, MessageResponse
from homestock.schemas.user import (
    UserCreate,
    LoginRequest,
    TokenPayload,
    UserResponse,
    AuthResponse,
    ProfileUpdate,
    AdminUserUpdate,
)

__all__ = [
    "CamelModel",
    "DeleteResponse",
    "MessageResponse",
    "UserCreate",
    "LoginRequest",
    "TokenPayload",
    "UserResponse",
    "AuthResponse",
    "ProfileUpdate",
    "AdminUserUpdate",
]
