"""Merge request flags, user settings and an optional template into a PromptConfig.

Resolution happens once, before prompt assembly. A section flag supplied by the
template always wins over the request-level default; sections the template
leaves out keep the default (every section on, interview questions following
the standalone ``include_questions`` flag).
"""

import logging
from typing import get_args

from models.schemas.generation_config import GenerationConfig, PromptConfig
from models.schemas.template import (
    SECTION_NAMES,
    CustomerType,
    Language,
    MessageTemplate,
    SectionFlags,
    Tone,
    UserSettings,
)

logger = logging.getLogger(__name__)

_TONES = frozenset(get_args(Tone))
_CUSTOMER_TYPES = frozenset(get_args(CustomerType))


def build_generation_config(
    language: Language | None,
    include_questions: bool | None,
    user_settings: UserSettings,
    template: MessageTemplate | None = None,
) -> GenerationConfig:
    """Request flags left unset fall back to the owner's saved settings."""
    if language is None:
        language = user_settings.default_language
    if include_questions is None:
        include_questions = user_settings.include_interview_questions
    return GenerationConfig(
        language=language,
        include_questions=include_questions,
        include_ats_score=user_settings.include_ats_score,
        template=template,
    )


def _resolve_sections(config: GenerationConfig) -> SectionFlags:
    defaults = {name: True for name in SECTION_NAMES}
    defaults["interview_questions"] = config.include_questions
    if config.template is None:
        return SectionFlags(**defaults)

    overrides = {
        name: bool(value)
        for name, value in config.template.include_sections.items()
        if name in defaults
    }
    return SectionFlags(**{**defaults, **overrides})


def _custom_instructions(text: str | None) -> str:
    # Whitespace-only counts as absent; anything else is passed through untouched
    if not text or not text.strip():
        return ""
    return text


def resolve_prompt_config(config: GenerationConfig) -> PromptConfig:
    template = config.template
    if template is None:
        return PromptConfig(
            language=config.language,
            sections=_resolve_sections(config),
            include_ats_score=config.include_ats_score,
        )

    tone = template.tone if template.tone in _TONES else "professional"
    if tone != template.tone:
        logger.warning("Unknown tone %r on template %s, using professional", template.tone, template.id)
    customer_type = template.customer_type if template.customer_type in _CUSTOMER_TYPES else "custom"

    return PromptConfig(
        language=config.language,
        tone=tone,
        customer_type=customer_type,
        sections=_resolve_sections(config),
        include_ats_score=config.include_ats_score,
        custom_instructions=_custom_instructions(template.custom_instructions),
    )
