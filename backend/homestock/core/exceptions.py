"""
API Error Types
HTTP exceptions shared by all endpoints.

Every error reaches the client as {"detail": "<message>"} with the status
code below. Handlers raise these instead of building HTTPException inline
so the same failure always maps to the same status and message.
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or invalid input (400)."""

    def __init__(self, detail: str = "Validation failed"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class AuthError(HTTPException):
    """Bad credentials, or missing/invalid/revoked token (401)."""

    def __init__(self, detail: str = "Please authenticate"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Authenticated but not allowed: role gate or owner header mismatch (403)."""

    def __init__(self, detail: str = "Admin access required"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    """Record absent, or owned by another user (404)."""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
