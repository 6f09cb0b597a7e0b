"""Pydantic contracts shared by the extraction and generation services."""

from models.schemas.extraction import ExtractedDocument
from models.schemas.generation_config import GenerationConfig, PromptConfig
from models.schemas.generation_result import GenerationResult, MessageRecord
from models.schemas.template import MessageTemplate, SectionFlags, UserSettings

__all__ = [
    "ExtractedDocument",
    "GenerationConfig",
    "PromptConfig",
    "GenerationResult",
    "MessageRecord",
    "MessageTemplate",
    "SectionFlags",
    "UserSettings",
]
