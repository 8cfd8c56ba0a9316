"""Search, filtering and highlighting."""

from .text_matcher import matches, escape_pattern, compile_literal
from .filter_engine import filter_sections
from .highlighter import HighlightSegment, highlight
from .query_engine import PolicyQueryEngine, SearchResult

__all__ = [
    "matches",
    "escape_pattern",
    "compile_literal",
    "filter_sections",
    "HighlightSegment",
    "highlight",
    "PolicyQueryEngine",
    "SearchResult",
]
