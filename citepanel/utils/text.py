from __future__ import annotations

import re
from typing import List, Optional, Tuple

# `[` anything except `]` `]`
BRACKET_PATTERN = re.compile(r"\[([^\]]*)\]")

# `(` http(s):// anything except `)` `)`
URL_PATTERN = re.compile(r"\((https?://[^)]*)\)")


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def bracket_tokens(text: str) -> List[str]:
    """Return the contents of every bracket token in ``text``, in order."""
    if not text:
        return []
    return BRACKET_PATTERN.findall(text)


def first_bracket_token(text: str) -> Optional[re.Match]:
    return BRACKET_PATTERN.search(text) if text else None


def extract_url(text: str) -> Tuple[Optional[str], str]:
    """
    Pull the first ``(http...)`` marker out of ``text``.

    Returns the URL (or None) and the text with every URL marker removed.
    """
    match = URL_PATTERN.search(text)
    if not match:
        return None, text
    return match.group(1), URL_PATTERN.sub("", text)
