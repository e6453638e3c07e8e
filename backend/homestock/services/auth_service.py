"""
Authentication Service
Handles JWT token creation, verification, revocation and user management.

This service provides core authentication functionality:
- JWT token generation and decoding
- Session token list (issue on login/register, revoke on logout)
- User authentication (login)
- User registration with password hashing
- Profile and administrative user updates
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt
from sqlalchemy import func
from sqlalchemy.orm import Session

from homestock.core.config import settings
from homestock.core.security import hash_password, verify_password
from homestock.models.user import User, UserRole
from homestock.models.user_token import UserToken
from homestock.schemas.user import AdminUserUpdate, ProfileUpdate, TokenPayload, UserCreate


# Algorithm used for signing tokens (HS256 = HMAC with SHA-256)
ALGORITHM = "HS256"


# ============================================================================
# JWT Token Functions
# ============================================================================

def create_access_token(user_id: UUID) -> str:
    """
    Create a signed JWT for a user.

    The payload carries the user id as subject and a random jti, so two
    tokens issued for the same user are never the same string. No expiry
    claim is added unless JWT_EXPIRATION is configured.

    Args:
        user_id: UUID of the user to create token for

    Returns:
        Encoded JWT token string

    Example:
        token = create_access_token(user.id)
        # Use in header: Authorization: Bearer {token}
    """
    payload = {
        "sub": str(user_id),
        "jti": uuid4().hex,
    }
    if settings.JWT_EXPIRATION:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=settings.JWT_EXPIRATION)

    return jwt.encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[TokenPayload]:
    """
    Verify signature (and expiry, when present) and decode a JWT.

    Returns:
        TokenPayload if the token is valid, None otherwise
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        # Bad signature, expired, malformed, etc.
        return None

    if not payload.get("sub"):
        return None

    return TokenPayload(
        sub=payload["sub"],
        jti=payload.get("jti"),
        exp=payload.get("exp"),
    )


# ============================================================================
# Session Token Functions
# ============================================================================

def issue_token(db: Session, user: User) -> str:
    """
    Sign a new token for the user and add it to their active token list.
    """
    token = create_access_token(user.id)
    db.add(UserToken(user_id=user.id, token=token))
    db.commit()
    return token


def resolve_token(db: Session, token: str) -> Optional[User]:
    """
    Turn a bearer token back into its user.

    Fails (returns None) when the signature is invalid, the subject is not
    a user id, the user no longer exists, or the token string is not in the
    user's active token list (never issued, or revoked by logout).
    """
    payload = decode_token(token)
    if payload is None:
        return None

    try:
        user_id = UUID(payload.sub)
    except ValueError:
        return None

    return (
        db.query(User)
        .join(UserToken, UserToken.user_id == User.id)
        .filter(User.id == user_id, UserToken.token == token)
        .first()
    )


def revoke_token(db: Session, user: User, token: str) -> bool:
    """
    Remove one token from the user's active list.

    Returns:
        True if a token was removed
    """
    deleted = (
        db.query(UserToken)
        .filter(UserToken.user_id == user.id, UserToken.token == token)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def revoke_all_tokens(db: Session, user: User) -> int:
    """
    Remove every active token of the user.

    Returns:
        Number of tokens revoked
    """
    deleted = (
        db.query(UserToken)
        .filter(UserToken.user_id == user.id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted


# ============================================================================
# User Authentication Functions
# ============================================================================

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Authenticate a user by email and password.

    Returns:
        User object if credentials are valid, None otherwise
    """
    user = get_user_by_email(db, email)
    if not user:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user


# ============================================================================
# User CRUD Functions
# ============================================================================

def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Create a new user account.

    Hashes the password before storing and creates a new user record.

    Raises:
        IntegrityError: If email already exists in database
    """
    user = User(
        username=user_data.username,
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        role=user_data.role or UserRole.USER,
        profile_picture=user_data.profile_picture or "",
    )

    db.add(user)
    db.commit()
    db.refresh(user)  # Refresh to get generated id and timestamps

    return user


def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    # Registration normalizes the domain; match the rest case-insensitively too
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


def email_taken(db: Session, email: str, exclude_user_id: Optional[UUID] = None) -> bool:
    """Check whether another account already uses this email."""
    query = db.query(User).filter(func.lower(User.email) == email.strip().lower())
    if exclude_user_id is not None:
        query = query.filter(User.id != exclude_user_id)
    return query.first() is not None


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc()).all()


def update_profile(db: Session, user: User, user_data: ProfileUpdate) -> User:
    """
    Apply a self-service profile update.

    Only provided, non-empty fields are written. The `_id` echo field is
    checked by the endpoint and never written.
    """
    update_dict = user_data.model_dump(exclude_unset=True, exclude={"id"})

    for field, value in update_dict.items():
        if value:
            setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return user


def admin_update_user(db: Session, user: User, user_data: AdminUserUpdate) -> User:
    """
    Apply an administrative update (username, email, role, profile picture).
    """
    update_dict = user_data.model_dump(exclude_unset=True)

    for field, value in update_dict.items():
        if value is not None:
            setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    """
    Hard-delete a user and their session tokens.

    Resources the user owns are left in place (owner ids are not foreign keys).
    """
    db.delete(user)
    db.commit()
