"""Heuristic DOCX text recovery.

A DOCX file is a ZIP of WordprocessingML parts. Text runs (``<w:t>``) are
collected with a regex instead of an XML parser. When the container can be
opened the body/header/footer parts are inflated first; otherwise the raw
bytes are scanned as-is, which only works for stored (uncompressed) parts.
"""

import html
import io
import logging
import re
import zipfile
import zlib

from services.text_fragments import decode_lossy, dedupe_fragments, join_fragments

logger = logging.getLogger(__name__)

# Fewer runs than this means the tag scan did not see readable markup
MIN_RUN_FRAGMENTS = 10
MAX_PART_BYTES = 20_000_000

_RUN_RE = re.compile(r"<(\w*:t)(?:\s[^>]*?)?(?<!/)>(.*?)</\1>", re.DOTALL)
_MARKUP_GAP_RE = re.compile(r">([^<>]{5,})<")
_LETTER_RUN_RE = re.compile(r"[A-Za-z]{3,}")

_PART_RE = re.compile(r"word/(header\d*|document|footer\d*)\.xml")
_PART_ORDER = {"header": 0, "document": 1, "footer": 2}


def scan_text_runs(view: str) -> list[str]:
    """Inner text of every ``*:t`` element, in document order."""
    runs = (html.unescape(m.group(2)).strip() for m in _RUN_RE.finditer(view))
    return [r for r in runs if r]


def scan_markup_gaps(view: str) -> list[str]:
    """Generic fallback: text between ``>`` and ``<`` that looks like words."""
    gaps = (m.group(1).strip() for m in _MARKUP_GAP_RE.finditer(view))
    return [g for g in gaps if len(g) >= 5 and _LETTER_RUN_RE.search(g)]


def _part_sort_key(name: str) -> tuple[int, str]:
    kind = re.sub(r"\d+$", "", _PART_RE.fullmatch(name).group(1))
    return _PART_ORDER[kind], name


def _inflate_xml_parts(data: bytes) -> str | None:
    """Inflated text parts of the container, or None if it is not a readable ZIP."""
    buffer = io.BytesIO(data)
    if not zipfile.is_zipfile(buffer):
        return None
    try:
        with zipfile.ZipFile(buffer) as archive:
            names = sorted(
                (n for n in archive.namelist() if _PART_RE.fullmatch(n)),
                key=_part_sort_key,
            )
            parts = [
                decode_lossy(archive.read(name))
                for name in names
                if archive.getinfo(name).file_size <= MAX_PART_BYTES
            ]
    except (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, EOFError, OSError) as e:
        logger.warning("DOCX container unreadable, scanning raw bytes: %s", e)
        return None
    if not parts:
        return None
    return "\n".join(parts)


def extract_text_from_docx(data: bytes) -> str:
    """Best-effort plain text from a DOCX byte buffer."""
    data = bytes(data)
    xml = _inflate_xml_parts(data)
    view = xml if xml is not None else decode_lossy(data)

    fragments = scan_text_runs(view)
    if len(fragments) < MIN_RUN_FRAGMENTS:
        logger.debug("Only %d text runs found, using markup-gap scan", len(fragments))
        fragments = scan_markup_gaps(view)

    return join_fragments(dedupe_fragments(fragments))
