"""Heuristic PDF text recovery without a full PDF parser.

Three independent passes run over a lossy text view of the file:

1. Text-block scan: strings shown with ``Tj``/``'`` and ``TJ`` inside ``BT ... ET``.
2. Stream scan: readable parenthesized strings inside ``stream ... endstream``.
3. Keyword scan: any parenthesized string mentioning a resume keyword.

The passes overlap on purpose; duplicates are removed afterwards. Compressed
(``FlateDecode``) stream bodies are inflated and appended to the view so the
passes also see text from compressed content streams.
"""

import logging
import re
import zlib

from services.text_fragments import (
    collapse_whitespace,
    decode_lossy,
    dedupe_fragments,
    join_fragments,
)

logger = logging.getLogger(__name__)

RESUME_KEYWORDS = (
    "experience", "education", "skills", "work", "job", "project",
    "summary", "objective", "email", "phone", "address", "university",
    "college", "degree", "bachelor", "master", "engineer", "developer",
    "manager", "analyst", "intern", "certification",
)

# Caps on inflated output, per stream and across the whole file
MAX_INFLATED_BYTES = 5_000_000
MAX_INFLATED_TOTAL = 20_000_000

# A PDF literal string: escapes are consumed pairwise so "\)" does not end it,
# and one level of unescaped balanced parentheses may sit inside
_PDF_STRING_BODY = r"(?:\\.|\((?:\\.|[^\\()])*\)|[^\\()])*"
_PDF_STRING = r"\((" + _PDF_STRING_BODY + r")\)"

_TEXT_BLOCK_RE = re.compile(r"\bBT\b(.*?)\bET\b", re.DOTALL)
_SHOW_TEXT_RE = re.compile(_PDF_STRING + r"\s*(?:Tj|')", re.DOTALL)
_SHOW_ARRAY_RE = re.compile(
    r"\[((?:\(" + _PDF_STRING_BODY + r"\)|[^\]()])*)\]\s*TJ", re.DOTALL
)
_ARRAY_STRING_RE = re.compile(_PDF_STRING, re.DOTALL)

_STREAM_RE = re.compile(r"stream(.*?)endstream", re.DOTALL)
_SAFE_STRING_RE = re.compile(r"\(([A-Za-z0-9 .,;:!?@#&%/+'\"_*\-]+)\)")
_LETTER_PAIR_RE = re.compile(r"[A-Za-z]{2,}")

_PAREN_RE = re.compile(r"\(([^()]*)\)")
_KEYWORD_RE = re.compile("|".join(RESUME_KEYWORDS), re.IGNORECASE)

_RAW_STREAM_RE = re.compile(rb"stream\r?\n(.*?)\r?\nendstream", re.DOTALL)

_ESCAPE_RE = re.compile(r"\\([nrtbf()\\]|[0-7]{1,3})")
_ESCAPES = {
    "n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f",
    "(": "(", ")": ")", "\\": "\\",
}

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\ufffd]")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")


def unescape_pdf_string(raw: str) -> str:
    """Resolve backslash escapes of a PDF literal string."""

    def _replace(match: re.Match) -> str:
        token = match.group(1)
        if token in _ESCAPES:
            return _ESCAPES[token]
        return chr(int(token, 8) & 0xFF)

    return _ESCAPE_RE.sub(_replace, raw)


def scan_text_blocks(view: str) -> list[str]:
    """Pass 1: strings drawn by the show-text operators inside text objects."""
    fragments = []
    for block in _TEXT_BLOCK_RE.finditer(view):
        body = block.group(1)
        for match in _SHOW_TEXT_RE.finditer(body):
            fragments.append(unescape_pdf_string(match.group(1)))
        for match in _SHOW_ARRAY_RE.finditer(body):
            # Kerning numbers between the strings are dropped
            parts = _ARRAY_STRING_RE.findall(match.group(1))
            fragments.append("".join(unescape_pdf_string(p) for p in parts))
    return fragments


def scan_streams(view: str) -> list[str]:
    """Pass 2: readable parenthesized strings found inside stream bodies."""
    fragments = []
    for stream in _STREAM_RE.finditer(view):
        for match in _SAFE_STRING_RE.finditer(stream.group(1)):
            candidate = match.group(1)
            if _LETTER_PAIR_RE.search(candidate):
                fragments.append(candidate)
    return fragments


def scan_keywords(view: str) -> list[str]:
    """Pass 3: any parenthesized string that mentions a resume keyword."""
    return [
        unescape_pdf_string(m.group(1))
        for m in _PAREN_RE.finditer(view)
        if _KEYWORD_RE.search(m.group(1))
    ]


def _inflate_streams(data: bytes) -> list[bytes]:
    """Inflate every zlib-compressed stream body; undecodable bodies are skipped."""
    inflated = []
    budget = MAX_INFLATED_TOTAL
    for match in _RAW_STREAM_RE.finditer(data):
        if budget <= 0:
            logger.warning("Inflated PDF content reached %d bytes, skipping remaining streams",
                           MAX_INFLATED_TOTAL)
            break
        try:
            chunk = zlib.decompressobj().decompress(match.group(1), min(MAX_INFLATED_BYTES, budget))
        except zlib.error:
            continue
        if chunk:
            inflated.append(chunk)
            budget -= len(chunk)
    return inflated


def _build_view(data: bytes) -> str:
    parts = [decode_lossy(data)]
    parts.extend(decode_lossy(chunk) for chunk in _inflate_streams(data))
    return "\n".join(parts)


def _clean_fragment(fragment: str) -> str:
    return collapse_whitespace(_CONTROL_RE.sub(" ", fragment))


def extract_text_from_pdf(data: bytes) -> str:
    """Best-effort plain text from a PDF byte buffer. Never raises."""
    view = _build_view(bytes(data))

    fragments = scan_text_blocks(view) + scan_streams(view) + scan_keywords(view)
    cleaned = [c for c in (_clean_fragment(f) for f in fragments) if len(c) > 2]
    unique = dedupe_fragments(cleaned)
    logger.debug("PDF scan: %d raw fragments, %d kept", len(fragments), len(unique))

    return _SPACE_BEFORE_PUNCT_RE.sub(r"\1", join_fragments(unique))
