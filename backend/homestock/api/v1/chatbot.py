"""
Chat Assistant API Endpoint
Answers questions about the caller's inventory through the configured LLM provider.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
import logging

from homestock.api.v1.deps import get_current_user
from homestock.core.exceptions import ForbiddenError
from homestock.db.session import get_db
from homestock.integrations.llm import LLMClient
from homestock.models.user import User
from homestock.schemas.chatbot import ChatRequest, ChatResponse
from homestock.services import chatbot_service


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chatbot", tags=["Chat Assistant"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={
        502: {"description": "Provider call failed"},
        503: {"description": "No provider configured"},
    }
)
async def chat(
    data: ChatRequest,
    current_user: User = Depends(get_current_user),
    client: Optional[LLMClient] = Depends(chatbot_service.get_llm_client),
    db: Session = Depends(get_db)
):
    """
    Ask the assistant a question.

    The caller's products, food items, shopping list and wasted items are
    sent as context. userId, if present, must be the caller's id.
    """
    if data.user_id is not None and data.user_id != current_user.id:
        raise ForbiddenError("User ID does not match authenticated user")

    logger.info(f"Chat request from user {current_user.id} ({len(data.message)} chars)")
    reply = await chatbot_service.answer(db, current_user.id, data.message, client)
    return ChatResponse(reply=reply)
