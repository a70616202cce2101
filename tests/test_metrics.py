from citepanel.evaluation.metrics import CitationCoverage, EmptyPanelRate, ParseYield
from citepanel.types import RenderedMessage, Role, SourceRecord


def _rendered(role=Role.ASSISTANT, visible=None, keys=None, dangling=None):
    return RenderedMessage(
        message_id="m",
        role=role,
        primary_answer="",
        visible_sources=visible or [],
        citation_keys=keys or [],
        dangling_citations=dangling or [],
    )


def test_citation_coverage():
    metric = CitationCoverage()
    metric.update(_rendered(keys=["1", "2"], dangling=["2"]))
    metric.update(_rendered(keys=["3"]))
    assert abs(metric.value - 2 / 3) < 1e-6


def test_citation_coverage_empty():
    assert CitationCoverage().value == 0.0


def test_parse_yield():
    metric = ParseYield()
    metric.update(parsed=2, chunks=4)
    metric.update(parsed=0, chunks=0)
    assert metric.value == 0.5


def test_empty_panel_rate_ignores_users_and_blockless_messages():
    metric = EmptyPanelRate()
    metric.update(_rendered(), had_source_block=True)
    metric.update(_rendered(visible=[SourceRecord(id="1", title="A")]), had_source_block=True)
    metric.update(_rendered(role=Role.USER), had_source_block=True)
    metric.update(_rendered(), had_source_block=False)
    assert metric.total_count == 2
    assert metric.value == 0.5
