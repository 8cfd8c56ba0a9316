"""
Reduce a policy document to the sections that match a search query.

Item matches take precedence over heading matches: a section whose items
match is returned with only those items, while a section that matches only
on its title or subtitle is returned whole.
"""

from dataclasses import replace
from typing import Optional, Tuple

from ..ingestion.document_model import Document, Item, Section
from .text_matcher import matches


ITEM_MATCH = "items"
HEADING_MATCH = "heading"


def item_matches(item: Item, query: str) -> bool:
    return matches(item.title or "", query) or matches(item.text, query)


def heading_matches(section: Section, query: str) -> bool:
    if matches(section.title, query):
        return True
    return section.subtitle is not None and matches(section.subtitle, query)


def matching_items(section: Section, query: str) -> Tuple[Item, ...]:
    return tuple(item for item in section.items or () if item_matches(item, query))


def classify_section(section: Section, query: str) -> Optional[str]:
    """
    Decide how a section matches a trimmed, non-empty query.

    Returns:
        ``"items"`` when at least one item matches, else ``"heading"`` when
        the title or subtitle matches, else None
    """
    if matching_items(section, query):
        return ITEM_MATCH
    if heading_matches(section, query):
        return HEADING_MATCH
    return None


def filter_section(section: Section, query: str) -> Optional[Section]:
    """
    Apply the query to a single section.

    Args:
        section: Section to test
        query: Trimmed, non-empty query

    Returns:
        The section with only its matching items, the unmodified section on a
        heading match, or None when nothing matches
    """
    items = matching_items(section, query)
    if items:
        return replace(section, items=items)
    if heading_matches(section, query):
        return section
    return None


def filter_sections(document: Document, raw_query: str) -> Tuple[Section, ...]:
    """
    Filter a document's sections against a free-text query.

    Args:
        document: Validated document
        raw_query: Query as typed; surrounding whitespace is ignored

    Returns:
        Tuple[Section, ...]: Matching sections in document order. A blank
        query returns ``document.sections`` unchanged.
    """
    query = raw_query.strip()
    if not query:
        return document.sections

    filtered = []
    for section in document.sections:
        result = filter_section(section, query)
        if result is not None:
            filtered.append(result)
    return tuple(filtered)
