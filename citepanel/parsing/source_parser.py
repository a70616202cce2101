from __future__ import annotations

import logging
from typing import List, Optional

from ..types import SourceRecord
from ..utils.text import collapse_whitespace, extract_url, first_bracket_token

RECORD_SEPARATOR = "---"
MIN_CHUNK_LENGTH = 5
NAVIGATION_HINT = "click to view"


class SourceParser:
    """
    Turns the raw "Related Documents" block into ``SourceRecord`` objects.

    Expected chunk shape (records separated by ``---``)::

        **[1] Rate Sheet** (https://example.com/rates)
        *Click to view details*
        Detail lines...

    Chunks that do not look like a record are skipped, never raised.
    """

    EMPHASIS_CHARS = "*_"
    HINT_TRAILING_CHARS = " .…:!"
    # words that may follow the hint phrase on a pure hint line
    HINT_SUFFIXES = (
        "",
        "details",
        "more",
        "more details",
        "document",
        "the document",
        "full document",
        "the full document",
        "source",
        "the source",
    )

    def __init__(
        self,
        record_separator: str = RECORD_SEPARATOR,
        min_chunk_length: int = MIN_CHUNK_LENGTH,
        navigation_hint: str = NAVIGATION_HINT,
    ) -> None:
        if not record_separator:
            raise ValueError("Record separator must be a non-empty string.")
        self.record_separator = record_separator
        self.min_chunk_length = min_chunk_length
        self.navigation_hint = navigation_hint.strip().lower()
        self._logger = logging.getLogger(__name__)
        self.last_chunk_count = 0

    def parse(self, raw_block: str) -> List[SourceRecord]:
        records: List[SourceRecord] = []
        self.last_chunk_count = 0
        if not raw_block or not raw_block.strip():
            return records

        for chunk in raw_block.split(self.record_separator):
            chunk = chunk.strip()
            if not chunk:
                continue
            self.last_chunk_count += 1
            if len(chunk) < self.min_chunk_length:
                self._logger.debug("Skipping short source chunk: %r", chunk)
                continue
            if first_bracket_token(chunk) is None:
                self._logger.debug("Skipping source chunk without id marker: %r", chunk[:80])
                continue

            record = self._parse_chunk(chunk)
            if record is None:
                self._logger.debug("Skipping source chunk with empty id: %r", chunk[:80])
                continue
            records.append(record)

        return records

    def _parse_chunk(self, chunk: str) -> Optional[SourceRecord]:
        url, text = extract_url(chunk)
        lines = [line.rstrip() for line in text.splitlines() if line.strip()]
        if not lines:
            return None

        title_line, detail_lines = lines[0], lines[1:]
        match = first_bracket_token(title_line)
        if match is None or not match.group(1):
            return None

        source_id = match.group(1)
        title = collapse_whitespace(title_line[: match.start()] + " " + title_line[match.end():])
        # "**[1] Title**" leaves dangling emphasis around the title
        title = title.strip(self.EMPHASIS_CHARS).strip()
        detail_text = "\n".join(
            line for line in detail_lines if not self._is_navigation_hint(line)
        )
        return SourceRecord(id=source_id, title=title, detail_text=detail_text, url=url)

    def _is_navigation_hint(self, line: str) -> bool:
        if not self.navigation_hint:
            return False
        normalized = line.strip().strip(self.EMPHASIS_CHARS).strip().lower()
        normalized = collapse_whitespace(normalized.rstrip(self.HINT_TRAILING_CHARS))
        if not normalized.startswith(self.navigation_hint):
            return False
        return normalized[len(self.navigation_hint):].strip() in self.HINT_SUFFIXES


def parse_sources(raw_block: str) -> List[SourceRecord]:
    return SourceParser().parse(raw_block)
