"""Markup helpers shared by the web interface and the CLI."""

import html
from typing import Iterable
from urllib.parse import quote, urlsplit, urlunsplit

from ..ingestion.document_model import Item
from ..query.highlighter import HighlightSegment, highlight


def render_segments(segments: Iterable[HighlightSegment]) -> str:
    """Escape every segment and wrap matched ones in ``<mark>``."""
    parts = []
    for segment in segments:
        content = html.escape(segment.content)
        if segment.matched:
            parts.append(f'<mark class="match">{content}</mark>')
        else:
            parts.append(content)
    return "".join(parts)


def render_item(item: Item, query: str) -> str:
    """HTML for one list item, highlighting both its title and text."""
    text = render_segments(highlight(item.text, query))
    if item.title:
        return f"<strong>{render_segments(highlight(item.title, query))}:</strong> {text}"
    return text


def emphasize(text: str, query: str, marker: str = "**") -> str:
    """Plain-text highlighting, e.g. ``Fair **Wages**``."""
    return "".join(
        f"{marker}{segment.content}{marker}" if segment.matched else segment.content
        for segment in highlight(text, query)
    )


def section_link(base_url: str, section_id: str) -> str:
    """
    Shareable URL for a section: the page URL without query or fragment,
    followed by ``#<section id>``.
    """
    parts = urlsplit(base_url)
    page = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    return f"{page}#{quote(section_id)}"
