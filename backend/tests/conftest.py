"""Shared test configuration, fakes and document builders."""

import io
import zipfile
import zlib
from xml.sax.saxutils import escape

import pytest

from services.llm_providers import LLMProvider


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls real provider APIs (needs API keys)"
    )


class FakeProvider(LLMProvider):
    """Provider double that records calls and replays a fixed answer or error."""

    def __init__(self, name="fake", model="fake-model", reply="Hello from the shop!", error=None):
        super().__init__(model)
        self.name = name
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_instruction: str, prompt: str) -> str:
        self.calls.append((system_instruction, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


def build_pdf(content: bytes, compress: bool = False) -> bytes:
    """Minimal single-object PDF around one content stream."""
    body = zlib.compress(content) if compress else content
    filter_entry = b" /Filter /FlateDecode" if compress else b""
    return (
        b"%PDF-1.4\n"
        b"4 0 obj\n<< /Length " + str(len(body)).encode() + filter_entry + b" >>\n"
        b"stream\n" + body + b"\nendstream\nendobj\n"
        b"trailer\n<< /Root 1 0 R >>\n%%EOF\n"
    )


def build_document_xml(paragraphs: list[str]) -> str:
    runs = "".join(
        f'<w:p><w:r><w:rPr><w:b/></w:rPr><w:t xml:space="preserve">{escape(p)}</w:t></w:r></w:p>'
        for p in paragraphs
    )
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{runs}</w:body></w:document>"
    )


def build_docx(
    paragraphs: list[str],
    compress: bool = True,
    header: list[str] | None = None,
) -> bytes:
    """A DOCX-shaped ZIP with a document part and an optional header part."""
    buffer = io.BytesIO()
    mode = zipfile.ZIP_DEFLATED if compress else zipfile.ZIP_STORED
    with zipfile.ZipFile(buffer, "w", compression=mode) as archive:
        archive.writestr("[Content_Types].xml", '<?xml version="1.0"?><Types/>')
        archive.writestr("word/document.xml", build_document_xml(paragraphs))
        if header:
            archive.writestr("word/header1.xml", build_document_xml(header))
    return buffer.getvalue()


SAMPLE_RESUME_LINES = [
    "Priya Raman",
    "Software Engineer | priya.raman@example.com | +91 98765 43210",
    "Summary: Backend developer with 4 years of experience in Python and Django",
    "Experience: Built REST APIs for a payments platform serving 2M users",
    "Led migration of reporting jobs to Celery and Redis",
    "Education: Bachelor of Engineering in Computer Science, Anna University",
    "Skills: Python, Django, PostgreSQL, Docker, AWS",
    "Projects: Inventory tracker for local print shops",
    "Certification: AWS Certified Developer Associate",
    "Languages: English, Tamil",
    "Address: Chennai, Tamil Nadu",
    "Objective: Senior backend engineer role in a product company",
]


def build_resume_pdf(lines: list[str] = SAMPLE_RESUME_LINES, compress: bool = False) -> bytes:
    content = b"\n".join(
        b"BT /F1 11 Tf 72 " + str(700 - 14 * i).encode() + b" Td (" + line.encode() + b") Tj ET"
        for i, line in enumerate(lines)
    )
    return build_pdf(content, compress=compress)


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def resume_pdf_bytes() -> bytes:
    return build_resume_pdf()


@pytest.fixture
def resume_docx_bytes() -> bytes:
    return build_docx(SAMPLE_RESUME_LINES)
