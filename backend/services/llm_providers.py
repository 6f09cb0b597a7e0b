"""Completion provider adapters sharing one interface.

Subclasses implement ``complete(system_instruction, prompt) -> str`` and
raise ProviderError (with the HTTP status when there is one) on failure.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from config import settings
from services import gemini_client
from services.exceptions import ProviderError

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Base class for language-model completion endpoints."""

    name: str = ""

    def __init__(self, model: str) -> None:
        self.model = model

    @abstractmethod
    async def complete(self, system_instruction: str, prompt: str) -> str:
        """Return the model's text answer. May return "" for an empty answer."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r})"


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self, model: str | None = None) -> None:
        super().__init__(model or settings.gemini_model)

    async def complete(self, system_instruction: str, prompt: str) -> str:
        return await gemini_client.generate_text(
            prompt, system_instruction, model=self.model
        )


def _message_content(data: object) -> str:
    """Pull ``choices[0].message.content`` out of a chat-completions body."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content.strip() if isinstance(content, str) else ""


class ChatGatewayProvider(LLMProvider):
    """Any OpenAI-compatible ``/chat/completions`` endpoint."""

    name = "gateway"

    def __init__(
        self,
        model: str | None = None,
        url: str | None = None,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(model or settings.fallback_model)
        self.url = url or settings.gateway_url
        self._api_key = settings.gateway_api_key if api_key is None else api_key
        self._client = client
        self._timeout = timeout or settings.provider_timeout_seconds

    async def _post(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            self.url,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
        )

    async def complete(self, system_instruction: str, prompt: str) -> str:
        if not self._api_key:
            raise ProviderError("GATEWAY_API_KEY is not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": prompt},
            ],
        }
        try:
            if self._client is None:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await self._post(client, payload)
            else:
                response = await self._post(self._client, payload)
        except httpx.HTTPError as e:
            logger.error("Gateway transport error: %s", e)
            raise ProviderError(f"Gateway transport error: {e}") from e

        if response.is_error:
            logger.error("Gateway API error %d: %s", response.status_code, response.text[:500])
            raise ProviderError(
                f"Gateway API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError("Gateway returned invalid JSON") from e
        return _message_content(data)
