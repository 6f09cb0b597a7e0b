from pydantic import AliasChoices, BaseModel, Field

from models.schemas.template import Language


class GenerateMessageRequest(BaseModel):
    document_id: str = Field(
        ...,
        validation_alias=AliasChoices("documentId", "resumeId", "document_id"),
        description="Opaque id of the uploaded resume record",
    )
    customer_name: str = Field(
        ..., min_length=1, max_length=200,
        validation_alias=AliasChoices("customerName", "customer_name"),
    )
    language: Language | None = Field(None, description="Defaults to the owner's saved language")
    include_questions: bool | None = Field(
        None, validation_alias=AliasChoices("includeQuestions", "include_questions"),
    )
    file_url: str = Field(
        ..., max_length=2048, validation_alias=AliasChoices("fileUrl", "file_url"),
    )
    file_type: str = Field(
        ..., max_length=10, validation_alias=AliasChoices("fileType", "file_type"),
    )
    template_id: str | None = Field(
        None, validation_alias=AliasChoices("templateId", "template_id"),
    )
