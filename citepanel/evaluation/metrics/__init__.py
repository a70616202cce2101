from .citation_coverage import CitationCoverage
from .empty_panel_rate import EmptyPanelRate
from .parse_yield import ParseYield

__all__ = [
    "CitationCoverage",
    "EmptyPanelRate",
    "ParseYield",
]
