"""Saved message templates and per-shop generation settings."""

from typing import Literal

from pydantic import BaseModel

Language = Literal["english", "tamil", "both"]
Tone = Literal["professional", "friendly", "motivational", "formal"]
CustomerType = Literal["fresher", "experienced", "career_change", "student", "custom"]

SECTION_NAMES = (
    "appreciation",
    "feedback",
    "guidance",
    "job_roles",
    "interview_questions",
    "encouragement",
)


class SectionFlags(BaseModel):
    """Which labeled blocks the generated message should contain."""
    appreciation: bool = True
    feedback: bool = True
    guidance: bool = True
    job_roles: bool = True
    interview_questions: bool = True
    encouragement: bool = True

    model_config = {"frozen": True}


class MessageTemplate(BaseModel):
    """A named bundle of tone, section toggles and customer-type context.

    ``include_sections`` may be partial: a missing key means the template
    does not decide that section and the request-level default applies.
    Tone and customer type stay plain strings so that records written by
    older clients still load; unknown values are normalised on resolution.
    """
    id: str
    name: str = ""
    description: str | None = None
    customer_type: str = "fresher"
    tone: str = "professional"
    custom_instructions: str | None = None
    include_sections: dict[str, bool] = {name: True for name in SECTION_NAMES}
    is_default: bool = False


class UserSettings(BaseModel):
    default_language: Language = "english"
    include_interview_questions: bool = True
    include_ats_score: bool = False
