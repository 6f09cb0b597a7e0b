"""Byte decoding and fragment combinators shared by the PDF and DOCX extractors."""

import re
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")


def decode_lossy(data: bytes) -> str:
    """Decode raw bytes as UTF-8, replacing invalid sequences instead of failing."""
    return data.decode("utf-8", errors="replace")


def dedupe_fragments(fragments: Iterable[str]) -> list[str]:
    """Drop exact duplicates, keeping the first occurrence and original order."""
    return list(dict.fromkeys(fragments))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def join_fragments(fragments: Iterable[str]) -> str:
    """Join fragments with single spaces and collapse whitespace runs."""
    return collapse_whitespace(" ".join(fragments))
