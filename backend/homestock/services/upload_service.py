"""
Upload Storage
Saves uploaded waste photos to UPLOAD_DIR.

Files are named "<epoch milliseconds><ext>" and served by the static
mount at /images, so the stored URL is "/images/<filename>".
"""

import logging
import os
import shutil
import time
from pathlib import Path

from starlette.datastructures import UploadFile

from homestock.core.config import settings
from homestock.core.exceptions import ValidationError


logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}
IMAGES_URL_PREFIX = "/images"


def ensure_upload_dir() -> Path:
    """Create the upload directory if it doesn't exist."""
    path = Path(settings.UPLOAD_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_image(file: UploadFile) -> str:
    """
    Write an uploaded image to disk.

    Returns:
        Public URL of the stored image ("/images/<filename>")

    Raises:
        ValidationError: unsupported extension or write failure
    """
    ext = os.path.splitext(file.filename or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ValidationError("Error uploading file")

    upload_dir = ensure_upload_dir()
    filename = f"{int(time.time() * 1000)}{ext}"
    file_path = upload_dir / filename

    try:
        with open(file_path, "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)
    except OSError as e:
        logger.error(f"Failed to save upload {file.filename}: {e}")
        if file_path.exists():
            file_path.unlink()
        raise ValidationError("Error uploading file")

    logger.info(f"Image stored: {filename}")
    return f"{IMAGES_URL_PREFIX}/{filename}"
