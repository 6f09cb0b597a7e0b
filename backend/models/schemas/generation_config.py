"""Generation configuration before and after template resolution."""

from pydantic import BaseModel

from models.schemas.template import CustomerType, Language, MessageTemplate, SectionFlags, Tone


class GenerationConfig(BaseModel):
    """Raw inputs: request flags, user settings and an optional template."""
    language: Language = "english"
    include_questions: bool = True
    include_ats_score: bool = False
    template: MessageTemplate | None = None


class PromptConfig(BaseModel):
    """Fully resolved configuration consumed by the prompt builder."""
    language: Language = "english"
    tone: Tone = "professional"
    customer_type: CustomerType = "custom"
    sections: SectionFlags = SectionFlags()
    include_ats_score: bool = False
    custom_instructions: str = ""

    model_config = {"frozen": True}
