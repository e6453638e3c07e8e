"""
Authentication Endpoints
Handles registration, login, logout, the caller's profile and user administration.

Endpoints:
- POST /auth/register - Create new user account and issue a token
- POST /auth/login - Authenticate and issue a token
- GET /auth/me - Current user
- PATCH /auth/profile - Update own username, email or profile picture
- POST /auth/logout - Revoke the presented token
- POST /auth/logout-all - Revoke every token of the caller
- GET/PATCH/DELETE /auth/admin/users - User administration (admin only)
- GET /auth/admin/error-logs - Recent persisted errors (admin only)
"""

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from homestock.api.v1.deps import get_current_token, get_current_user, require_admin
from homestock.core.config import settings
from homestock.core.exceptions import AuthError, ForbiddenError, NotFoundError, ValidationError
from homestock.db.session import get_db
from homestock.models.error_log import ErrorLog
from homestock.models.user import User, UserRole
from homestock.schemas.common import DeleteResponse, MessageResponse
from homestock.schemas.error_log import ErrorLogResponse
from homestock.schemas.user import (
    AdminUserUpdate,
    AuthResponse,
    LoginRequest,
    ProfileUpdate,
    UserCreate,
    UserResponse,
)
from homestock.services import auth_service
from homestock.services.error_logging import error_logger

# Logger for auth events
auth_logger = logging.getLogger("auth")


class LoginFailedError(Exception):
    """Exception for failed login attempts (for error buffer logging)."""
    pass


router = APIRouter()


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    responses={
        400: {"description": "Validation failed or email already registered"},
        403: {"description": "Admin role requested while admin registration is disabled"},
    }
)
def register(
    user_data: UserCreate,
    request: Request,
    db: Session = Depends(get_db)
) -> AuthResponse:
    """
    Register a new user account.

    Hashes the password, creates the user, and returns the user together
    with a freshly issued token stored in the user's token list.

    Example:
        POST /api/auth/register
        {
            "username": "maria",
            "email": "maria@example.com",
            "password": "SecurePass123!"
        }

        Response 201:
        {
            "user": {"id": "...", "username": "maria", "role": "user", ...},
            "token": "eyJhbGciOiJIUzI1NiIs..."
        }
    """
    if user_data.role == UserRole.ADMIN and not settings.ALLOW_ADMIN_REGISTRATION:
        auth_logger.warning(
            f"REGISTER_DENIED | email={user_data.email} | ip={_client_ip(request)} | reason=admin_role"
        )
        raise ForbiddenError("Admin access required")

    if auth_service.get_user_by_email(db, user_data.email):
        raise ValidationError("Email already registered")

    try:
        user = auth_service.create_user(db, user_data)
    except IntegrityError:
        # Concurrent registration with the same email
        db.rollback()
        raise ValidationError("Email already registered")

    token = auth_service.issue_token(db, user)

    auth_logger.info(
        f"REGISTER | email={user.email} | user_id={user.id} | role={user.role.value} | ip={_client_ip(request)}"
    )

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login user",
    responses={401: {"description": "Invalid credentials"}}
)
def login(
    credentials: LoginRequest,
    request: Request,
    db: Session = Depends(get_db)
) -> AuthResponse:
    """
    Authenticate with email and password.

    A wrong password and an unknown email produce the same 401, and no
    token is issued for either.
    """
    client_ip = _client_ip(request)
    user_agent = request.headers.get("user-agent", "unknown")

    auth_logger.info(
        f"LOGIN_ATTEMPT | email={credentials.email} | ip={client_ip} | user_agent={user_agent}"
    )

    user = auth_service.authenticate_user(db, credentials.email, credentials.password)

    if not user:
        auth_logger.warning(
            f"LOGIN_FAILED | email={credentials.email} | ip={client_ip} | "
            f"user_agent={user_agent} | reason=invalid_credentials"
        )
        error_logger.log_error(
            LoginFailedError(f"Failed login attempt for email: {credentials.email}"),
            request=request,
            severity="warning",
            context={
                "email": credentials.email,
                "reason": "invalid_credentials",
                "client_ip": client_ip,
            },
        )
        raise AuthError("Invalid credentials")

    token = auth_service.issue_token(db, user)

    auth_logger.info(
        f"LOGIN_SUCCESS | email={user.email} | user_id={user.id} | ip={client_ip}"
    )

    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch(
    "/profile",
    response_model=UserResponse,
    responses={
        400: {"description": "Unknown field, invalid value or email already registered"},
        403: {"description": "_id does not match the authenticated user"},
    }
)
def update_profile(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Update the caller's own profile.

    Accepts username, email and profilePicture. Role can't be changed here:
    the field is not part of the schema and unknown fields are rejected.
    """
    if data.id is not None and data.id != current_user.id:
        raise ForbiddenError("Not authorized to update this profile")

    if data.email and auth_service.email_taken(db, data.email, exclude_user_id=current_user.id):
        raise ValidationError("Email already registered")

    try:
        return auth_service.update_profile(db, current_user, data)
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already registered")


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    token: str = Depends(get_current_token),
    db: Session = Depends(get_db)
):
    """
    Revoke the presented token.

    Any later request with the same token fails with 401.
    """
    user = request.state.user
    auth_service.revoke_token(db, user, token)
    auth_logger.info(f"LOGOUT | user_id={user.id} | ip={_client_ip(request)}")
    return MessageResponse(message="Logged out successfully")


@router.post("/logout-all", response_model=MessageResponse)
def logout_all(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Revoke every active token of the caller."""
    revoked = auth_service.revoke_all_tokens(db, current_user)
    auth_logger.info(
        f"LOGOUT_ALL | user_id={current_user.id} | revoked={revoked} | ip={_client_ip(request)}"
    )
    return MessageResponse(message="Logged out from all sessions")


# ============================================================================
# Admin Endpoints
# ============================================================================

@router.get("/admin/users", response_model=List[UserResponse])
def list_users(
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return auth_service.list_users(db)


@router.patch(
    "/admin/users/{user_id}",
    response_model=UserResponse,
    responses={
        400: {"description": "Field outside the allow-list or email already registered"},
        404: {"description": "User not found"},
    }
)
def admin_update_user(
    user_id: UUID,
    data: AdminUserUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Update any user. Only username, email, role and profilePicture
    may be changed.
    """
    user = auth_service.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")

    if data.email and auth_service.email_taken(db, data.email, exclude_user_id=user.id):
        raise ValidationError("Email already registered")

    try:
        user = auth_service.admin_update_user(db, user, data)
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already registered")

    auth_logger.info(
        f"ADMIN_UPDATE_USER | admin_id={admin.id} | user_id={user.id} | "
        f"fields={','.join(sorted(data.model_fields_set))}"
    )
    return user


@router.delete("/admin/users/{user_id}", response_model=DeleteResponse[UserResponse])
def admin_delete_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Delete a user and their session tokens.

    Resources the user owns are not removed.
    """
    user = auth_service.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")

    deleted = UserResponse.model_validate(user)
    auth_service.delete_user(db, user)

    auth_logger.info(f"ADMIN_DELETE_USER | admin_id={admin.id} | user_id={user_id}")
    return DeleteResponse[UserResponse](message="User deleted successfully", deleted=deleted)


@router.get("/admin/error-logs", response_model=List[ErrorLogResponse])
def list_error_logs(
    limit: int = Query(100, ge=1, le=500),
    severity: Optional[str] = Query(None, description="Filter by severity (info, warning, error, critical)"),
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Most recent persisted errors, newest first."""
    query = db.query(ErrorLog)
    if severity:
        query = query.filter(ErrorLog.severity == severity)
    return query.order_by(ErrorLog.timestamp.desc()).limit(limit).all()
