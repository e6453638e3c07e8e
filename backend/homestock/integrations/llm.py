"""
LLM Integration Module - chat assistant provider connections.

Supports two providers:
- openai: OpenAI-compatible /v1/chat/completions endpoint
- huggingface: Hugging Face Inference API text generation

The connection is built from settings; nothing is called when no API key
is configured.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import httpx

from homestock.core.config import Settings

logger = logging.getLogger(__name__)


class LLMProvider(str, Enum):
    """Supported chat providers"""
    OPENAI = "openai"
    HUGGINGFACE = "huggingface"


@dataclass
class LLMConnection:
    """
    Configuration for a single LLM connection.
    """
    provider: LLMProvider
    url: str                         # Base URL (openai) or full model URL (huggingface)
    api_key: str
    model: str = "default"           # Model name (openai only)
    timeout: float = 30.0
    temperature: float = 0.3
    max_tokens: int = 500
    extra_headers: dict = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["LLMConnection"]:
        """Build the configured connection, or None if the provider has no API key."""
        try:
            provider = LLMProvider(settings.CHATBOT_PROVIDER.lower())
        except ValueError:
            logger.error(f"Unknown chatbot provider: {settings.CHATBOT_PROVIDER}")
            return None

        if provider == LLMProvider.OPENAI:
            if not settings.OPENAI_API_KEY:
                return None
            return cls(
                provider=provider,
                url=settings.OPENAI_BASE_URL,
                api_key=settings.OPENAI_API_KEY,
                model=settings.OPENAI_MODEL,
                timeout=settings.LLM_TIMEOUT,
                temperature=settings.LLM_TEMPERATURE,
            )

        if not settings.HUGGINGFACE_API_KEY:
            return None
        return cls(
            provider=provider,
            url=settings.HUGGINGFACE_MODEL_URL,
            api_key=settings.HUGGINGFACE_API_KEY,
            timeout=settings.LLM_TIMEOUT,
            temperature=settings.LLM_TEMPERATURE,
        )


class LLMClient:
    """
    Client for the configured chat provider.

    Call close() when done, or use as an async context manager.
    """

    def __init__(self, connection: LLMConnection, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.connection = connection
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self.connection.url.rstrip('/')

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            headers = dict(self.connection.extra_headers)
            headers["Authorization"] = f"Bearer {self.connection.api_key}"
            self._client = httpx.AsyncClient(
                timeout=self.connection.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "LLMClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def chat_completion(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Optional[str]:
        """
        Send a chat completion request (OpenAI-compatible API).

        Args:
            messages: List of {"role": "system/user/assistant", "content": "..."}
            temperature: Sampling temperature (connection default if not specified)
            max_tokens: Maximum response tokens (connection default if not specified)

        Returns:
            The assistant's response text, or None on error
        """
        try:
            client = await self._get_client()

            payload = {
                "model": self.connection.model,
                "messages": messages,
                "temperature": temperature if temperature is not None else self.connection.temperature,
                "max_tokens": max_tokens or self.connection.max_tokens,
            }

            response = await client.post(
                f"{self.base_url}/v1/chat/completions",
                json=payload
            )

            if response.status_code != 200:
                logger.error(f"LLM request failed: HTTP {response.status_code} - {response.text}")
                return None

            choices = response.json().get("choices", [])
            if choices:
                return choices[0].get("message", {}).get("content")
            return None

        except httpx.TimeoutException:
            logger.error(f"LLM request timeout after {self.connection.timeout}s")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"LLM chat completion failed: {e}")
            return None

    async def text_generation(self, prompt: str) -> Optional[str]:
        """
        Send a text generation request (Hugging Face Inference API).

        The API answers either [{"generated_text": ...}] or {"generated_text": ...}.

        Returns:
            The generated text, "" when the response has none, or None on error
        """
        try:
            client = await self._get_client()
            response = await client.post(self.base_url, json={"inputs": prompt})

            if response.status_code != 200:
                logger.error(f"LLM request failed: HTTP {response.status_code} - {response.text}")
                return None

            data = response.json()
            if isinstance(data, list):
                data = data[0] if data else {}
            if not isinstance(data, dict):
                logger.error(f"LLM response has unexpected shape: {type(data).__name__}")
                return None
            return data.get("generated_text") or ""

        except httpx.TimeoutException:
            logger.error(f"LLM request timeout after {self.connection.timeout}s")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"LLM text generation failed: {e}")
            return None
