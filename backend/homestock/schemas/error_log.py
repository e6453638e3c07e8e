"""
Error Log Schemas
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from homestock.schemas.common import CamelModel


class ErrorLogResponse(CamelModel):
    id: UUID
    timestamp: datetime
    error_type: str
    error_code: Optional[str] = None
    severity: str
    user_email: Optional[str] = None
    request_method: Optional[str] = None
    request_path: Optional[str] = None
    message: str
    context_data: Optional[Dict[str, Any]] = None
