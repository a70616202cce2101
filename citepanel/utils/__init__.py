"""Utility helpers for CitePanel."""

from .logging_config import setup_logging
from .text import (
    BRACKET_PATTERN,
    URL_PATTERN,
    bracket_tokens,
    collapse_whitespace,
    extract_url,
    first_bracket_token,
)

__all__ = [
    "setup_logging",
    "BRACKET_PATTERN",
    "URL_PATTERN",
    "bracket_tokens",
    "collapse_whitespace",
    "extract_url",
    "first_bracket_token",
]
