import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_completion_client, get_record_store
from config import settings
from models.requests import GenerateMessageRequest
from models.responses import GenerateMessageResponse
from services import message_generator
from services.completion_client import CompletionClient
from services.exceptions import GenerationError, GenerationFailure
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "gateway_configured": bool(settings.gateway_api_key),
    }


@router.post("/generate-message", response_model=GenerateMessageResponse)
@limiter.limit(settings.rate_limit)
async def generate_message(
    request: Request,
    body: GenerateMessageRequest,
    x_owner_id: str | None = Header(None),
    store: RecordStore = Depends(get_record_store),
    completion: CompletionClient = Depends(get_completion_client),
):
    try:
        return await message_generator.generate_message(
            body, store=store, completion=completion, owner_id=x_owner_id
        )
    except GenerationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
    except Exception:
        logger.exception("Error in generate-message for %s", body.document_id)
        raise HTTPException(status_code=500, detail=GenerationFailure.user_message)
