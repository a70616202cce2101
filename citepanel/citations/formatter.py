from __future__ import annotations

from typing import Iterable, List

from ..parsing.source_parser import RECORD_SEPARATOR
from ..parsing.splitter import RELATED_DOCUMENTS_SEPARATOR
from ..types import SourceRecord

CLICK_HINT = "*Click to view details*"


def format_source(source: SourceRecord) -> str:
    """Render one record the way the chat backend writes it."""
    label = f"[{source.id}] {source.title}" if source.title else f"[{source.id}]"
    title_line = f"**{label}**"
    if source.url:
        title_line = f"{title_line} ({source.url})"
    lines: List[str] = [title_line, CLICK_HINT]
    if source.detail_text:
        lines.append(source.detail_text)
    return "\n".join(lines)


def compose_message(answer: str, sources: Iterable[SourceRecord]) -> str:
    """
    Build a composite payload: answer, separator, then ``---``-joined records.

    With no sources the answer is returned unchanged.
    """
    formatted = [format_source(source) for source in sources]
    if not formatted:
        return answer
    block = f"\n\n{RECORD_SEPARATOR}\n\n".join(formatted)
    return f"{answer.rstrip()}\n\n{RELATED_DOCUMENTS_SEPARATOR}\n{block}"
