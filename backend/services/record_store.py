"""Lookup and archival of generation records.

Relational storage lives outside this service; ``RecordStore`` is the seam
it plugs into. ``InMemoryRecordStore`` backs the default app and the tests.
"""

import logging
from abc import ABC, abstractmethod

from models.schemas.generation_result import MessageRecord
from models.schemas.template import MessageTemplate, UserSettings

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    @abstractmethod
    async def get_user_settings(self, owner_id: str | None) -> UserSettings:
        """Settings for the shop owner, defaults when unknown."""

    @abstractmethod
    async def get_template(self, template_id: str, owner_id: str | None = None) -> MessageTemplate | None:
        """Template by id, or None if it does not exist or is not visible to the owner."""

    @abstractmethod
    async def save_extracted_text(self, document_id: str, text: str) -> None: ...

    @abstractmethod
    async def save_message(self, record: MessageRecord) -> None: ...


class InMemoryRecordStore(RecordStore):
    def __init__(self) -> None:
        self.user_settings: dict[str, UserSettings] = {}
        self.templates: dict[str, tuple[str | None, MessageTemplate]] = {}
        self.extracted_texts: dict[str, str] = {}
        self.messages: list[MessageRecord] = []

    def add_template(self, template: MessageTemplate, owner_id: str | None = None) -> None:
        self.templates[template.id] = (owner_id, template)

    def set_user_settings(self, owner_id: str, user_settings: UserSettings) -> None:
        self.user_settings[owner_id] = user_settings

    async def get_user_settings(self, owner_id: str | None) -> UserSettings:
        if owner_id is None:
            return UserSettings()
        return self.user_settings.get(owner_id, UserSettings())

    async def get_template(self, template_id: str, owner_id: str | None = None) -> MessageTemplate | None:
        entry = self.templates.get(template_id)
        if entry is None:
            return None
        template_owner, template = entry
        if template_owner is not None and template_owner != owner_id:
            return None
        return template

    async def save_extracted_text(self, document_id: str, text: str) -> None:
        self.extracted_texts[document_id] = text

    async def save_message(self, record: MessageRecord) -> None:
        self.messages.append(record)
