from __future__ import annotations

from dataclasses import dataclass

from ...types import RenderedMessage, Role


@dataclass
class EmptyPanelRate:
    """
    Assistant messages that shipped a source block but ended up showing no
    sources. A rising value usually means the producer's format drifted.
    """

    empty_count: int = 0
    total_count: int = 0

    def update(self, rendered: RenderedMessage, had_source_block: bool) -> None:
        if rendered.role is not Role.ASSISTANT or not had_source_block:
            return
        self.total_count += 1
        if not rendered.visible_sources:
            self.empty_count += 1

    @property
    def value(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.empty_count / self.total_count
