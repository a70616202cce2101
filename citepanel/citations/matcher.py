from __future__ import annotations

from typing import AbstractSet, List, Sequence

from ..types import SourceRecord
from .citation import UncitedPolicy, extract_citation_keys


class CitationMatcher:
    """
    Filters parsed sources down to the ones the answer actually cites.

    Order follows the source block, not the order of markers in the answer.
    """

    def __init__(self, uncited_policy: UncitedPolicy = UncitedPolicy.HIDE) -> None:
        self.uncited_policy = uncited_policy

    def match(self, primary_answer: str, sources: Sequence[SourceRecord]) -> List[SourceRecord]:
        return self.filter_sources(extract_citation_keys(primary_answer), sources)

    def filter_sources(
        self, citation_keys: AbstractSet[str], sources: Sequence[SourceRecord]
    ) -> List[SourceRecord]:
        if not citation_keys:
            if self.uncited_policy is UncitedPolicy.SHOW_ALL:
                return list(sources)
            return []
        return [source for source in sources if source.id in citation_keys]

    def dangling(self, primary_answer: str, sources: Sequence[SourceRecord]) -> List[str]:
        """Cited keys that no parsed source carries."""
        return self.dangling_keys(extract_citation_keys(primary_answer), sources)

    def dangling_keys(
        self, citation_keys: AbstractSet[str], sources: Sequence[SourceRecord]
    ) -> List[str]:
        known = {source.id for source in sources}
        return sorted(key for key in citation_keys if key not in known)


def match_sources(
    primary_answer: str,
    sources: Sequence[SourceRecord],
    uncited_policy: UncitedPolicy = UncitedPolicy.HIDE,
) -> List[SourceRecord]:
    return CitationMatcher(uncited_policy).match(primary_answer, sources)
