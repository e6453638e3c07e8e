"""
Main FastAPI Application
Entry point for the HomeStock API.

This module creates and configures the FastAPI application instance,
sets up middleware, mounts uploaded images and defines the health check endpoint.
"""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from homestock import __version__
from homestock.api.v1.router import api_router
from homestock.core.config import settings
from homestock.db.session import engine, SessionLocal
from homestock.middleware.cors import setup_cors
from homestock.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from homestock.models import Base
from homestock.services.error_logging import configure_error_logging
from homestock.services.upload_service import IMAGES_URL_PREFIX, ensure_upload_dir


logger = logging.getLogger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    description="""
    HomeStock API - home inventory and food waste tracking.

    Features:
    - User accounts with bearer tokens and server-side logout
    - Products, food items, shopping list, budgets and categories per user
    - Waste records with photo upload
    - Dashboard summary and an optional inventory chat assistant
    """
)


setup_cors(app)

# Catches all unhandled exceptions and logs them
app.add_middleware(ErrorHandlerMiddleware)

register_exception_handlers(app)

# Uploaded waste photos; the directory is created at startup
app.mount(
    IMAGES_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="images"
)

app.include_router(api_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    """
    Application startup handler.

    - Create all database tables if they don't exist
    - Create the upload directory
    - Configure error logging (database + optional log files)
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    ensure_upload_dir()

    configure_error_logging(SessionLocal, settings.LOG_DIR)


@app.get("/health", tags=["Health"])
def health_check():
    """Liveness probe."""
    return {"status": "healthy", "version": __version__}


@app.get("/", tags=["Root"])
def root():
    return {
        "message": "Welcome to HomeStock API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
