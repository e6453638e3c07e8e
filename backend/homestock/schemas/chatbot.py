"""
Chat Assistant Schemas
"""

from pydantic import Field
from typing import Optional
from uuid import UUID

from homestock.schemas.common import CamelModel


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=4000)
    # Legacy clients send their id; it must match the authenticated user
    user_id: Optional[UUID] = None


class ChatResponse(CamelModel):
    reply: str
