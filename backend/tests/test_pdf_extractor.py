import zlib

import pytest

from conftest import SAMPLE_RESUME_LINES, build_pdf, build_resume_pdf
from services import pdf_extractor
from services.pdf_extractor import (
    extract_text_from_pdf,
    scan_keywords,
    scan_streams,
    scan_text_blocks,
    unescape_pdf_string,
)


def test_hello_world_text_block():
    assert scan_text_blocks("BT (Hello World) Tj ET") == ["Hello World"]
    assert extract_text_from_pdf(b"BT (Hello World) Tj ET") == "Hello World"


def test_resume_pdf_recovers_lines_in_order():
    text = extract_text_from_pdf(build_resume_pdf())
    assert text == " ".join(SAMPLE_RESUME_LINES)


def test_compressed_content_stream():
    text = extract_text_from_pdf(build_resume_pdf(compress=True))
    for line in SAMPLE_RESUME_LINES:
        assert line in text


def test_array_show_drops_kerning_numbers():
    view = "BT [(Soft) -250 (ware) 30.5 ( Engineer)] TJ ET"
    assert scan_text_blocks(view) == ["Software Engineer"]


def test_array_show_with_bracket_inside_string():
    view = "BT [(Skills [core]) -10 (: Python)] TJ ET"
    assert scan_text_blocks(view) == ["Skills [core]: Python"]


def test_escaped_parentheses_in_show_text():
    assert extract_text_from_pdf(b"BT (Skills \\(Python\\)) Tj ET") == "Skills (Python)"


def test_unescape_sequences():
    assert unescape_pdf_string(r"a\(b\)c\\d\ne\101") == "a(b)c\\d\neA"
    assert unescape_pdf_string(r"tab\there\r") == "tab\there\r"


def test_stream_pass_filters_binary_noise():
    data = b"stream\n(Python Django REST) (\x01\x02\x03) (12) (x)\nendstream"
    assert scan_streams(data.decode("latin-1")) == ["Python Django REST"]
    assert extract_text_from_pdf(data) == "Python Django REST"


def test_stream_pass_ignores_text_outside_streams():
    assert scan_streams("(Python Django REST)") == []


def test_keyword_pass_outside_structures():
    data = b"%PDF-1.4 (Bachelor of Engineering) (random words here)"
    assert scan_keywords(data.decode()) == ["Bachelor of Engineering"]
    assert extract_text_from_pdf(data) == "Bachelor of Engineering"


def test_keyword_pass_is_case_insensitive():
    assert scan_keywords("(SENIOR DEVELOPER)") == ["SENIOR DEVELOPER"]


def test_duplicates_removed_first_occurrence_kept():
    data = b"BT (Hello World) Tj ET BT (Second line) Tj ET BT (Hello World) Tj ET"
    assert extract_text_from_pdf(data) == "Hello World Second line"


def test_short_fragments_dropped():
    assert extract_text_from_pdf(b"BT (ab) Tj (Hello World) Tj ET") == "Hello World"


def test_whitespace_before_punctuation_removed():
    assert extract_text_from_pdf(b"BT (Experience   ,  Skills  .) Tj ET") == "Experience, Skills."


def test_control_characters_stripped():
    assert extract_text_from_pdf(b"BT (Data\x07 Analyst\x00) Tj ET") == "Data Analyst"


def test_no_matches_returns_empty_string():
    assert extract_text_from_pdf(b"%PDF-1.7\n%%EOF") == ""


@pytest.mark.parametrize("data", [
    b"",
    bytes(range(256)) * 40,
    b"BT (unterminated string Tj",
    b"stream\n\x78\x9c this is not zlib data\nendstream",
    b"\xff\xfe\xfd BT [(((( ] TJ ET endstream stream",
    build_pdf(b"\x00" * 1000, compress=True),
])
def test_never_raises(data):
    assert isinstance(extract_text_from_pdf(data), str)


def test_balanced_parentheses_inside_show_text():
    text = extract_text_from_pdf(build_pdf(b"BT /F1 12 Tf (Senior Developer (Python, Django)) Tj ET"))
    assert text.startswith("Senior Developer (Python, Django)")


def test_balanced_parentheses_inside_array_show():
    view = "BT [(Phone: ) -20 ((555) 123-4567)] TJ ET"
    assert scan_text_blocks(view) == ["Phone: (555) 123-4567"]


def test_inflated_output_capped_across_streams():
    bomb = zlib.compress(b"\0" * 1_000_000, 9)
    data = b"%PDF-1.4\n" + (b"stream\n" + bomb + b"\nendstream\n") * 60

    chunks = pdf_extractor._inflate_streams(data)

    assert sum(len(c) for c in chunks) <= pdf_extractor.MAX_INFLATED_TOTAL
    assert len(chunks) < 60


def test_inflation_stops_when_total_budget_spent(monkeypatch):
    monkeypatch.setattr(pdf_extractor, "MAX_INFLATED_TOTAL", 2_500)
    stream = b"stream\n" + zlib.compress(b"a" * 1_000) + b"\nendstream\n"

    chunks = pdf_extractor._inflate_streams(stream * 10)

    assert [len(c) for c in chunks] == [1_000, 1_000, 500]
