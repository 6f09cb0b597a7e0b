"""Error taxonomy for the extraction and generation pipeline.

Extraction-layer errors never leave the orchestrator: they are turned into
fallback text. Only ``GenerationError`` subclasses reach the caller.
"""


class RetrievalFailure(Exception):
    """The source file could not be fetched."""


class ExtractionFailure(Exception):
    """An extractor raised or the file type is not supported."""


class ProviderError(Exception):
    """A single completion provider attempt failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GenerationEmptyResponse(ProviderError):
    """Provider answered successfully but returned no content."""


class GenerationError(Exception):
    """Terminal failure surfaced to the caller after every provider was tried."""

    status_code: int = 500
    user_message: str = "Failed to generate message"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class RateLimited(GenerationError):
    status_code = 429
    user_message = "Rate limit exceeded. Please try again in a moment."


class QuotaExhausted(GenerationError):
    status_code = 402
    user_message = "AI credits exhausted. Please add more credits."


class GenerationFailure(GenerationError):
    status_code = 500
    user_message = "Failed to generate message"
