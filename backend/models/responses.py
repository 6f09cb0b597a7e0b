from pydantic import BaseModel

from models.schemas.generation_result import ProviderTag


class GenerateMessageResponse(BaseModel):
    message: str
    provider_tag: ProviderTag
    model_used: str = ""
