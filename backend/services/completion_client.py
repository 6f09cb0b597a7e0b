"""Completion with a primary provider and a single fallback.

At most two provider calls per request: the primary, then (on any failure or
an empty answer) the secondary. When both fail, the last error's status code
decides what the caller sees: 429 -> RateLimited, 402 -> QuotaExhausted,
anything else -> GenerationFailure.
"""

import logging
from typing import Sequence

from models.schemas.generation_result import GenerationResult
from services.exceptions import (
    GenerationEmptyResponse,
    GenerationError,
    GenerationFailure,
    ProviderError,
    QuotaExhausted,
    RateLimited,
)
from services.llm_providers import ChatGatewayProvider, GeminiProvider, LLMProvider

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that generates WhatsApp-ready messages for a Xerox shop. "
    "Be friendly, professional, and encouraging."
)

PROVIDER_TAGS = ("primary", "secondary")


def classify_failure(error: ProviderError | None) -> GenerationError:
    status_code = error.status_code if error is not None else None
    if status_code == 429:
        return RateLimited()
    if status_code == 402:
        return QuotaExhausted()
    return GenerationFailure()


class CompletionClient:
    """Ordered provider chain; the first non-empty answer wins."""

    def __init__(self, providers: Sequence[LLMProvider]) -> None:
        if not 1 <= len(providers) <= len(PROVIDER_TAGS):
            raise ValueError(f"Expected 1-{len(PROVIDER_TAGS)} providers, got {len(providers)}")
        self._providers = list(providers)

    @property
    def providers(self) -> list[LLMProvider]:
        return list(self._providers)

    async def complete(self, prompt: str) -> GenerationResult:
        last_error: ProviderError | None = None

        for tag, provider in zip(PROVIDER_TAGS, self._providers):
            try:
                text = await provider.complete(SYSTEM_INSTRUCTION, prompt)
            except ProviderError as e:
                logger.error("%s provider (%s) failed: %s", tag, provider.name, e)
                last_error = e
                continue
            except Exception as e:
                logger.exception("%s provider (%s) raised unexpectedly", tag, provider.name)
                last_error = ProviderError(str(e))
                continue

            if not text or not text.strip():
                logger.error("%s provider (%s) returned an empty response", tag, provider.name)
                last_error = GenerationEmptyResponse(f"Empty response from {provider.name}")
                continue

            if tag != PROVIDER_TAGS[0]:
                logger.info("Message generated by fallback provider %s", provider.name)
            return GenerationResult(text=text.strip(), provider_tag=tag, model_used=provider.model)

        raise classify_failure(last_error) from last_error


_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """Default chain: Gemini first, the chat-completions gateway as fallback."""
    global _client
    if _client is None:
        _client = CompletionClient([GeminiProvider(), ChatGatewayProvider()])
    return _client
