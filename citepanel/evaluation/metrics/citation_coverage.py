from __future__ import annotations

from dataclasses import dataclass

from ...types import RenderedMessage


@dataclass
class CitationCoverage:
    """Share of cited keys that resolved to a parsed source."""

    resolved_count: int = 0
    cited_count: int = 0

    def update(self, rendered: RenderedMessage) -> None:
        self.cited_count += len(rendered.citation_keys)
        self.resolved_count += len(rendered.citation_keys) - len(rendered.dangling_citations)

    @property
    def value(self) -> float:
        if self.cited_count == 0:
            return 0.0
        return self.resolved_count / self.cited_count
