"""Generation pipeline: one request, one sequential pass.

Flow:
    settings + template lookup
      → resolve_prompt_config()      → PromptConfig
      → extract_document()           → ExtractedDocument (archived)
      → build_message_prompt()       → prompt
      → CompletionClient.complete()  → GenerationResult (archived)
"""

import logging

import httpx

from config import settings
from models.requests import GenerateMessageRequest
from models.responses import GenerateMessageResponse
from models.schemas.generation_result import MessageRecord
from services import prompt_builder, text_extraction
from services.completion_client import CompletionClient
from services.config_resolver import build_generation_config, resolve_prompt_config
from services.record_store import RecordStore

logger = logging.getLogger(__name__)


async def _archive_extracted_text(store: RecordStore, document_id: str, text: str) -> None:
    try:
        await store.save_extracted_text(document_id, text)
    except Exception:
        logger.exception("Failed to archive extracted text for %s", document_id)


async def _archive_message(store: RecordStore, record: MessageRecord) -> None:
    try:
        await store.save_message(record)
    except Exception:
        logger.exception("Failed to archive message for %s", record.document_id)


async def generate_message(
    request: GenerateMessageRequest,
    *,
    store: RecordStore,
    completion: CompletionClient,
    owner_id: str | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> GenerateMessageResponse:
    """Run extraction, prompt assembly and completion for one resume.

    Raises GenerationError subclasses only; extraction problems are absorbed.
    """
    user_settings = await store.get_user_settings(owner_id)
    template = None
    if request.template_id:
        template = await store.get_template(request.template_id, owner_id)
        if template is None:
            logger.warning("Template %s not found, using defaults", request.template_id)

    config = build_generation_config(
        request.language, request.include_questions, user_settings, template
    )
    prompt_config = resolve_prompt_config(config)

    logger.info("Extracting text from %s resume %s", request.file_type, request.document_id)
    document = await text_extraction.extract_document(
        request.file_url, request.file_type, client=http_client
    )
    logger.info("Extracted text length: %d (%s)", len(document.text), document.source)
    await _archive_extracted_text(store, request.document_id, document.archive_text)

    prompt = prompt_builder.build_message_prompt(
        request.customer_name, document.text, prompt_config, shop_name=settings.shop_name
    )
    result = await completion.complete(prompt)

    await _archive_message(store, MessageRecord(
        document_id=request.document_id,
        language=config.language,
        generated_message=result.text,
        model_used=result.model_used,
        provider_tag=result.provider_tag,
        include_interview_questions=prompt_config.sections.interview_questions,
        template_id=template.id if template else None,
    ))

    return GenerateMessageResponse(
        message=result.text,
        provider_tag=result.provider_tag,
        model_used=result.model_used,
    )
