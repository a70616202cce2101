from citepanel.citations import compose_message, format_source
from citepanel.parsing import SourceParser, split_message
from citepanel.types import SourceRecord


def test_format_source_matches_backend_layout():
    text = format_source(
        SourceRecord(id="1", title="Rate Sheet", detail_text="Savings: 5%", url="https://example.com/r")
    )
    assert text == "**[1] Rate Sheet** (https://example.com/r)\n*Click to view details*\nSavings: 5%"


def test_compose_without_sources_returns_answer():
    assert compose_message("Plain answer.", []) == "Plain answer."


def test_composed_message_parses_back():
    sources = [
        SourceRecord(id="1", title="Rate Sheet", detail_text="Line A\nLine B", url="https://example.com/a"),
        SourceRecord(id="kb-2", title="Policy Doc", detail_text=""),
    ]
    answer, block = split_message(compose_message("Answer citing [1] and [kb-2].", sources))
    assert answer == "Answer citing [1] and [kb-2]."
    assert SourceParser().parse(block) == sources
