"""Tests for SourceParser chunk handling and field extraction."""

import pytest

from citepanel.parsing import SourceParser, parse_sources


@pytest.fixture
def parser():
    return SourceParser()


def test_parses_id_title_url_and_details(parser):
    block = "\n[1] Rate Sheet (http://example.com/a)\nClick to view\nDetail A\n"
    records = parser.parse(block)
    assert len(records) == 1
    record = records[0]
    assert record.id == "1"
    assert record.title == "Rate Sheet"
    assert record.url == "http://example.com/a"
    assert record.detail_text == "Detail A"


def test_parses_multiple_records_in_order(parser):
    block = "[1] First\nA\n---\n[2] Second\nB\n---\n[3] Third\nC"
    records = parser.parse(block)
    assert [r.id for r in records] == ["1", "2", "3"]
    assert [r.detail_text for r in records] == ["A", "B", "C"]


def test_bold_markdown_title(parser):
    block = "**[1] Rate Sheet** (https://example.com/rates)\n*Click to view details*\nSavings: 5%"
    record = parser.parse(block)[0]
    assert record.id == "1"
    assert record.title == "Rate Sheet"
    assert record.url == "https://example.com/rates"
    assert record.detail_text == "Savings: 5%"


def test_alphanumeric_ids(parser):
    block = "[doc-12_a] Handbook\nText\n---\n[KB.7] Knowledge base entry\nMore"
    assert [r.id for r in parser.parse(block)] == ["doc-12_a", "KB.7"]


def test_missing_url_is_none(parser):
    record = parser.parse("[2] Policy Doc\nDetail B")[0]
    assert record.url is None


def test_url_on_detail_line_is_extracted_and_stripped(parser):
    block = "[3] Fee Schedule\nSee (https://example.com/fees) for fees\nMore detail"
    record = parser.parse(block)[0]
    assert record.url == "https://example.com/fees"
    assert record.detail_text == "See  for fees\nMore detail"


def test_url_only_line_does_not_become_detail(parser):
    block = "[4] Title\n(https://example.com/x)\nBody"
    record = parser.parse(block)[0]
    assert record.url == "https://example.com/x"
    assert record.detail_text == "Body"


def test_record_without_details_is_kept(parser):
    record = parser.parse("[5] Bare title\n*Click to view*")[0]
    assert record.id == "5"
    assert record.detail_text == ""
    assert not record.has_details


def test_navigation_hint_is_case_insensitive(parser):
    record = parser.parse("[6] Doc\nCLICK TO VIEW the full document\nKeep me")[0]
    assert record.detail_text == "Keep me"


def test_multiline_details_skip_blank_lines(parser):
    record = parser.parse("[7] Doc\nLine one\n\n   \nLine two")[0]
    assert record.detail_text == "Line one\nLine two"


def test_short_and_bracketless_chunks_are_dropped(parser):
    block = "[1]\n---\nno marker here at all\n---\n[2] Kept\nDetail"
    records = parser.parse(block)
    assert [r.id for r in records] == ["2"]
    assert parser.last_chunk_count == 3


def test_bracket_outside_title_line_yields_no_record(parser):
    block = "Untitled chunk\nsee [1] in body"
    assert parser.parse(block) == []


def test_empty_bracket_id_is_dropped(parser):
    assert parser.parse("[] Nameless\nDetail") == []


def test_duplicate_ids_are_tolerated(parser):
    records = parser.parse("[1] A\nx\n---\n[1] B\ny")
    assert [r.title for r in records] == ["A", "B"]


def test_empty_block(parser):
    assert parser.parse("") == []
    assert parser.parse("   \n ") == []
    assert parser.last_chunk_count == 0


def test_min_chunk_length_is_configurable():
    strict = SourceParser(min_chunk_length=20)
    assert strict.parse("[1] Short\nx") == []
    assert len(parse_sources("[1] Short\nx")) == 1


def test_never_emits_empty_ids(parser):
    block = "\n---\n".join(
        ["[] a\nb", "[x] ok\nd", "no id here\n[y]", "[ ] spaced\nz", "   ", "[z]"]
    )
    records = parser.parse(block)
    assert records
    assert all(record.id for record in records)


@pytest.mark.parametrize(
    "hint",
    ["*Click to view details*", "Click to view...", "_click to view the source_", "Click to view:"],
)
def test_pure_navigation_hints_are_dropped(parser, hint):
    record = parser.parse(f"[8] Doc\n{hint}\nBody")[0]
    assert record.detail_text == "Body"


def test_content_line_starting_with_hint_phrase_is_kept(parser):
    record = parser.parse("[9] Doc\nClick to view the full policy on the intranet.\nBody")[0]
    assert record.detail_text == "Click to view the full policy on the intranet.\nBody"
