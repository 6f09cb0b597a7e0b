"""Completion output and the record archived after a successful generation."""

from typing import Literal

from pydantic import BaseModel

ProviderTag = Literal["primary", "secondary"]


class GenerationResult(BaseModel):
    text: str
    provider_tag: ProviderTag
    model_used: str = ""


class MessageRecord(BaseModel):
    document_id: str
    language: str
    generated_message: str
    model_used: str
    provider_tag: ProviderTag
    include_interview_questions: bool
    template_id: str | None = None
