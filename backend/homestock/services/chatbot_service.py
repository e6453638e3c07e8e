"""
Chatbot Service
Answers inventory questions through the configured LLM provider.

The caller's products, food items, shopping list and waste records are
flattened into a short text context and sent along with the question.
"""

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from homestock.core.config import settings
from homestock.integrations.llm import LLMClient, LLMConnection, LLMProvider
from homestock.models.food import FoodItem
from homestock.models.product import Product
from homestock.models.shopping_list import ShoppingListItem
from homestock.models.waste import WasteRecord
from homestock.services.resource_service import ResourceService


logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I couldn't generate a response."


def _fmt_number(value: Optional[float]) -> str:
    if value is None:
        return ""
    return f"{value:g}"


def build_stock_context(db: Session, owner_id: UUID) -> str:
    """
    Summarize the owner's inventory as text.

    Example:
        Current Inventory:
        - Products: Rice (2), Olive oil (1)
        - Foods: Milk (3 liter)
        - Shopping List: Eggs, Bread
        - Recently Wasted: Lettuce
    """
    products = ResourceService.get_all(db, Product, owner_id)
    foods = ResourceService.get_all(db, FoodItem, owner_id)
    shopping_list = ResourceService.get_all(db, ShoppingListItem, owner_id)
    wasted = ResourceService.get_all(db, WasteRecord, owner_id)

    lines = [
        "Current Inventory:",
        "- Products: " + ", ".join(f"{p.name} ({_fmt_number(p.quantity)})" for p in products),
        "- Foods: " + ", ".join(f"{f.name} ({_fmt_number(f.quantity)} {f.unit.value})" for f in foods),
        "- Shopping List: " + ", ".join(s.item_name for s in shopping_list),
        "- Recently Wasted: " + ", ".join(w.item_name for w in wasted),
    ]
    return "\n".join(lines)


def build_system_prompt(stock_context: str, today: date) -> str:
    return (
        "You are a home inventory assistant. Help users manage their stock.\n"
        f"{stock_context}\n"
        "Rules:\n"
        "- Be factual and concise\n"
        "- Only reference items that exist in the inventory\n"
        "- Mention quantities and units when available\n"
        f"- For expiry checks, use today's date: {today.isoformat()}"
    )


def get_llm_client() -> Optional[LLMClient]:
    """
    FastAPI dependency: a client for the configured provider,
    or None when no API key is set.
    """
    connection = LLMConnection.from_settings(settings)
    if connection is None:
        return None
    return LLMClient(connection)


async def answer(db: Session, owner_id: UUID, message: str, client: Optional[LLMClient]) -> str:
    """
    Ask the configured provider about the owner's inventory.

    Raises:
        HTTPException 503: no provider configured
        HTTPException 502: provider call failed
    """
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Chat assistant is not configured"
        )

    system_prompt = build_system_prompt(build_stock_context(db, owner_id), date.today())

    async with client:
        if client.connection.provider == LLMProvider.HUGGINGFACE:
            prompt = f"{system_prompt}\n\nUser: {message}\nAI:"
            reply = await client.text_generation(prompt)
        else:
            reply = await client.chat_completion([
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ])

    if reply is None:
        logger.warning(f"Chatbot provider returned no reply for user {owner_id}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error processing your request"
        )

    return reply or FALLBACK_REPLY
