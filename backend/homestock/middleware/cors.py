"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for the frontend.

Allowed origins come from the CORS_ORIGINS setting.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homestock.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    The x-user-id header sent by clients on list/create calls is covered
    by allow_headers=["*"].
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],
        allow_headers=["*"],
    )
