from .citation import UncitedPolicy, extract_citation_keys
from .formatter import compose_message, format_source
from .matcher import CitationMatcher, match_sources

__all__ = [
    "CitationMatcher",
    "UncitedPolicy",
    "extract_citation_keys",
    "match_sources",
    "compose_message",
    "format_source",
]
