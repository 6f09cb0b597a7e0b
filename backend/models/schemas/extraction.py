from typing import Literal

from pydantic import BaseModel

ExtractionSource = Literal["extracted", "partial", "fallback"]


class ExtractedDocument(BaseModel):
    """Text recovered from a resume file.

    ``text`` is what the prompt receives (bounded to 15,000 chars);
    ``archive_text`` is the longer copy kept for history (50,000 chars).
    """
    text: str
    archive_text: str
    source: ExtractionSource = "extracted"
