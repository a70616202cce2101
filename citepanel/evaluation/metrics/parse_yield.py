from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParseYield:
    parsed_count: int = 0
    chunk_count: int = 0

    def update(self, parsed: int, chunks: int) -> None:
        self.parsed_count += parsed
        self.chunk_count += chunks

    @property
    def value(self) -> float:
        if self.chunk_count == 0:
            return 0.0
        return self.parsed_count / self.chunk_count
