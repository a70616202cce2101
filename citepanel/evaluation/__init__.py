"""Diagnostics for the citation pipeline."""

from .metrics import CitationCoverage, EmptyPanelRate, ParseYield

__all__ = ["CitationCoverage", "EmptyPanelRate", "ParseYield"]
