"""Extraction orchestrator: fetch the resume, dispatch to an extractor, bound the result.

Nothing in this layer is fatal to a generation request. Retrieval and
extraction failures become descriptive fallback text so that the prompt
builder always receives something usable.
"""

import logging
from typing import Callable

import httpx

from config import settings
from models.schemas.extraction import ExtractedDocument, ExtractionSource
from services.docx_extractor import extract_text_from_docx
from services.exceptions import ExtractionFailure, RetrievalFailure
from services.pdf_extractor import extract_text_from_pdf

logger = logging.getLogger(__name__)

MAX_PROMPT_TEXT_CHARS = 15_000
MAX_ARCHIVE_TEXT_CHARS = 50_000
MIN_EXTRACTED_CHARS = 100

EXTRACTORS: dict[str, Callable[[bytes], str]] = {
    "pdf": extract_text_from_pdf,
    "docx": extract_text_from_docx,
}


def _normalize_type(file_type: str) -> str:
    return (file_type or "").strip().lower().lstrip(".")


def retrieval_fallback(file_type: str) -> str:
    return (
        f"Resume file type: {_normalize_type(file_type).upper() or 'UNKNOWN'}. "
        "The file could not be retrieved, so its content is unavailable. "
        "Please provide general career guidance based on a typical resume structure."
    )


def extraction_fallback(file_type: str) -> str:
    return (
        f"Resume file type: {_normalize_type(file_type).upper() or 'UNKNOWN'}. "
        "Unable to extract the full text of this resume. "
        "Please provide general career guidance based on a typical resume structure."
    )


def partial_fallback(file_type: str, text: str) -> str:
    return (
        f"Limited text could be extracted from this {_normalize_type(file_type).upper() or 'UNKNOWN'} resume. "
        "Please give general guidance based on the partial content below "
        "and a typical resume structure.\n\n"
        f"PARTIAL CONTENT:\n{text}"
    )


def _bounded(text: str, source: ExtractionSource) -> ExtractedDocument:
    return ExtractedDocument(
        text=text[:MAX_PROMPT_TEXT_CHARS],
        archive_text=text[:MAX_ARCHIVE_TEXT_CHARS],
        source=source,
    )


async def _download(client: httpx.AsyncClient, file_url: str) -> bytes:
    response = await client.get(file_url)
    response.raise_for_status()
    return response.content


async def fetch_document(file_url: str, client: httpx.AsyncClient | None = None) -> bytes:
    """Download the resume file. Raises RetrievalFailure on any transport problem."""
    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=settings.fetch_timeout_seconds, follow_redirects=True
            ) as own_client:
                content = await _download(own_client, file_url)
        else:
            content = await _download(client, file_url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise RetrievalFailure(f"Failed to fetch file: {e}") from e

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise RetrievalFailure(
            f"File too large: {len(content)} bytes (max {settings.max_upload_size_mb}MB)"
        )
    return content


def extract_raw_text(data: bytes, file_type: str) -> str:
    """Run the extractor matching ``file_type``. Raises ExtractionFailure."""
    extractor = EXTRACTORS.get(_normalize_type(file_type))
    if extractor is None:
        raise ExtractionFailure(f"Unsupported file type: {file_type!r}")
    try:
        return extractor(data)
    except Exception as e:
        raise ExtractionFailure(f"{file_type} extractor failed: {e}") from e


def build_extracted_document(data: bytes, file_type: str) -> ExtractedDocument:
    """Extract, apply the quality gate and the size caps."""
    try:
        text = extract_raw_text(data, file_type)
    except ExtractionFailure as e:
        logger.error("Extraction failed: %s", e)
        return _bounded(extraction_fallback(file_type), "fallback")

    logger.info("Extracted %d characters from %s resume", len(text), _normalize_type(file_type))
    if len(text) < MIN_EXTRACTED_CHARS:
        logger.warning("Extracted text below %d characters, wrapping as partial", MIN_EXTRACTED_CHARS)
        return _bounded(partial_fallback(file_type, text), "partial")
    return _bounded(text, "extracted")


async def extract_document(
    file_url: str,
    file_type: str,
    client: httpx.AsyncClient | None = None,
) -> ExtractedDocument:
    try:
        data = await fetch_document(file_url, client=client)
    except RetrievalFailure as e:
        logger.warning("Could not retrieve %s resume: %s", _normalize_type(file_type), e)
        return _bounded(retrieval_fallback(file_type), "fallback")
    return build_extracted_document(data, file_type)


async def extract_text(
    file_url: str,
    file_type: str,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Text for the prompt: never empty, at most 15,000 characters."""
    document = await extract_document(file_url, file_type, client=client)
    return document.text
