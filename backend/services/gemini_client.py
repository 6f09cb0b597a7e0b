"""Google Gemini API wrapper with error handling."""

import logging

import httpx
from google import genai
from google.genai import errors, types

from config import settings
from services.exceptions import ProviderError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini provider disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def generate_text(
    prompt: str,
    system_instruction: str,
    model: str | None = None,
    temperature: float = 0.7,
) -> str:
    """Send a prompt to Gemini and return the raw text answer.

    Raises ProviderError carrying the HTTP status code when the API rejects
    the call, so callers can tell rate limits and quota problems apart.
    """
    client = get_client()
    if client is None:
        raise ProviderError("GEMINI_API_KEY is not configured")

    try:
        response = await client.aio.models.generate_content(
            model=model or settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=temperature,
                max_output_tokens=8192,
            ),
        )
    except errors.APIError as e:
        logger.error("Gemini API error %s: %s", e.code, e.message)
        raise ProviderError(f"Gemini API error: {e.code}", status_code=e.code) from e
    except httpx.HTTPError as e:
        logger.error("Gemini transport error: %s", e)
        raise ProviderError(f"Gemini transport error: {e}") from e

    return (response.text or "").strip()
