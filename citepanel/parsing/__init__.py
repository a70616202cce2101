from .source_parser import (
    MIN_CHUNK_LENGTH,
    NAVIGATION_HINT,
    RECORD_SEPARATOR,
    SourceParser,
    parse_sources,
)
from .splitter import RELATED_DOCUMENTS_SEPARATOR, MessageSplitter, split_message

__all__ = [
    "MessageSplitter",
    "RELATED_DOCUMENTS_SEPARATOR",
    "split_message",
    "SourceParser",
    "parse_sources",
    "RECORD_SEPARATOR",
    "MIN_CHUNK_LENGTH",
    "NAVIGATION_HINT",
]
