"""
Security Utilities
Handles password hashing and verification using bcrypt.

This module provides secure password hashing functionality using passlib
with bcrypt algorithm for storing user passwords safely. The work factor is
fixed per deployment (BCRYPT_ROUNDS); every hash gets its own salt.
"""

from passlib.context import CryptContext

from homestock.core.config import settings


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)

    Example:
        >>> hashed = hash_password("mySecurePassword123")
        >>> print(hashed)  # $2b$10$...
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain_password: Plain text password from user input
        hashed_password: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)
