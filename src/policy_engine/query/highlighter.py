"""Split text into plain and matched segments for search highlighting."""

from dataclasses import dataclass
from typing import Tuple

from .text_matcher import compile_literal


@dataclass(frozen=True)
class HighlightSegment:
    """A fragment of text tagged as matched or not."""
    content: str
    matched: bool = False


def highlight(text: str, raw_query: str) -> Tuple[HighlightSegment, ...]:
    """
    Split ``text`` on case-insensitive literal occurrences of the query.

    Matched fragments keep the casing they have in ``text``. Empty fragments
    at the boundaries are kept, so joining every segment's content always
    reproduces ``text`` exactly.

    Args:
        text: Text to split
        raw_query: Query as typed; surrounding whitespace is ignored

    Returns:
        Tuple[HighlightSegment, ...]: Alternating plain/matched segments
    """
    query = raw_query.strip()
    if not query:
        return (HighlightSegment(text, False),)

    parts = compile_literal(query).split(text)
    # With one capturing group, odd positions hold the captured matches
    return tuple(
        HighlightSegment(part, index % 2 == 1)
        for index, part in enumerate(parts)
    )


def matched_fragments(text: str, raw_query: str) -> Tuple[str, ...]:
    """Matched substrings of ``text`` in their original casing."""
    return tuple(segment.content for segment in highlight(text, raw_query) if segment.matched)
