"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- User authentication (bearer token verification against the active token list)
- Admin role gate
- Owner scoping for per-user resources

Dependencies are injected into FastAPI endpoints using Depends().
"""

from fastapi import Depends, Header, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from homestock.core.exceptions import AuthError, ForbiddenError, ValidationError
from homestock.db.session import get_db
from homestock.models.user import User
from homestock.services import auth_service


# Extracts "Authorization: Bearer <token>"; a missing header is turned into
# our own 401 instead of FastAPI's default 403
security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the caller from the bearer token.

    Fails closed with 401 "Please authenticate" when the header is missing,
    the signature is bad, the subject is unknown, or the token was revoked.
    On success the user and token are stored on request.state.

    Usage in endpoint:
        @router.get("/me")
        def me(current_user: User = Depends(get_current_user)):
            return current_user
    """
    if credentials is None:
        raise AuthError()

    token = credentials.credentials
    user = auth_service.resolve_token(db, token)
    if user is None:
        raise AuthError()

    request.state.user = user
    request.state.token = token
    return user


def get_current_token(
    request: Request,
    current_user: User = Depends(get_current_user)
) -> str:
    """The verified bearer token string of the current request."""
    return request.state.token


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Dependency that requires admin role."""
    if not current_user.is_admin:
        raise ForbiddenError("Admin access required")
    return current_user


def get_owner_id(current_user: User = Depends(get_current_user)) -> UUID:
    """
    Owner id for single-record operations.

    Always the authenticated user's id; records of other users are
    filtered out and surface as 404.
    """
    return current_user.id


def _check_user_header(x_user_id: Optional[str], current_user: User) -> UUID:
    try:
        header_id = UUID(x_user_id)
    except ValueError:
        raise ForbiddenError("User ID does not match authenticated user")

    if header_id != current_user.id:
        raise ForbiddenError("User ID does not match authenticated user")

    return current_user.id


def get_list_owner_id(
    x_user_id: Optional[str] = Header(None),
    current_user: User = Depends(get_current_user)
) -> UUID:
    """
    Owner id for list/search routes.

    The x-user-id header is still required by clients (400 when missing)
    and must name the authenticated user (403 otherwise).
    """
    if not x_user_id:
        raise ValidationError("User ID is required in headers")
    return _check_user_header(x_user_id, current_user)


def get_create_owner_id(
    x_user_id: Optional[str] = Header(None),
    current_user: User = Depends(get_current_user)
) -> UUID:
    """Owner id for create routes. Missing x-user-id is a 403 here."""
    if not x_user_id:
        raise ForbiddenError("User ID is required")
    return _check_user_header(x_user_id, current_user)
