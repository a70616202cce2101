from __future__ import annotations

from enum import Enum
from typing import FrozenSet

from ..utils.text import bracket_tokens


class UncitedPolicy(Enum):
    """What to show when the answer carries no citation markers at all."""

    HIDE = "hide"
    SHOW_ALL = "show_all"


def extract_citation_keys(text: str) -> FrozenSet[str]:
    """Collect the distinct ``[key]`` markers in ``text``."""
    return frozenset(token for token in bracket_tokens(text) if token)
