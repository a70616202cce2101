from __future__ import annotations

from typing import Tuple

RELATED_DOCUMENTS_SEPARATOR = "**Related Documents:**"


class MessageSplitter:
    """
    Splits a composite message into the answer text and the raw source block.

    Only the first separator counts; anything after it, including further
    separators, belongs to the source block.
    """

    def __init__(self, separator: str = RELATED_DOCUMENTS_SEPARATOR) -> None:
        if not separator:
            raise ValueError("Separator must be a non-empty string.")
        self.separator = separator

    def split(self, content: str) -> Tuple[str, str]:
        content = content or ""
        answer, found, source_block = content.partition(self.separator)
        if not found:
            return content, ""
        # blank lines before the separator are not part of the answer
        return answer.rstrip(), source_block


def split_message(
    content: str, separator: str = RELATED_DOCUMENTS_SEPARATOR
) -> Tuple[str, str]:
    return MessageSplitter(separator).split(content)
