"""Shared dependencies for API routes."""

from services import completion_client
from services.record_store import InMemoryRecordStore, RecordStore

_store = InMemoryRecordStore()


def get_record_store() -> RecordStore:
    return _store


def get_completion_client() -> completion_client.CompletionClient:
    return completion_client.get_completion_client()
