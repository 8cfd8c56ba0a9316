"""
Query engine for searching and exporting a policy document.

This module binds a loaded document to the pure filter, highlight and
export functions and reports match statistics for each search.
"""

from datetime import datetime
from typing import List, Dict, Any, Optional, Tuple, Union

# Logging
from loguru import logger

from ..export.exporter import ExportArtifact, ExportFormat, export_document, filename_for
from ..ingestion.document_model import Document, Section
from ..utils.config import ExportConfig, get_config
from .filter_engine import ITEM_MATCH, classify_section, filter_sections, matching_items
from .highlighter import HighlightSegment, highlight


class SearchResult:
    """Structured result from a search operation."""

    def __init__(self, query: str, sections: Tuple[Section, ...], total_sections: int):
        self.query = query
        self.normalized_query = query.strip()
        self.sections = sections
        self.total_sections = total_sections
        self.timestamp = datetime.now()

    @property
    def is_filtered(self) -> bool:
        return bool(self.normalized_query)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def item_count(self) -> int:
        return sum(len(section.items or ()) for section in self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "query": self.query,
            "normalized_query": self.normalized_query,
            "is_filtered": self.is_filtered,
            "section_count": self.section_count,
            "item_count": self.item_count,
            "total_sections": self.total_sections,
            "sections": [section.to_dict() for section in self.sections],
            "timestamp": self.timestamp.isoformat(),
        }


class PolicyQueryEngine:
    """Search, highlight and export operations over one loaded document."""

    def __init__(self, document: Document, export_config: Optional[ExportConfig] = None):
        """
        Initialize the query engine.

        Args:
            document: Validated document; never modified
            export_config: Export settings; the global configuration is used when omitted
        """
        self.document = document
        self.export_config = export_config or get_config().export
        logger.debug(f"Query engine ready for '{document.title}'")

    def search(self, query: str) -> SearchResult:
        """
        Filter the document for a query.

        Args:
            query: Query as typed

        Returns:
            SearchResult: Matching sections and statistics
        """
        sections = filter_sections(self.document, query)
        result = SearchResult(query, sections, len(self.document.sections))
        logger.debug(
            f"Search '{result.normalized_query}': "
            f"{result.section_count} sections, {result.item_count} items"
        )
        return result

    def highlight(self, text: str, query: str) -> Tuple[HighlightSegment, ...]:
        return highlight(text, query)

    def export(self, fmt: Union[ExportFormat, str]) -> ExportArtifact:
        """
        Export the full document, regardless of any active search.

        Args:
            fmt: Export format

        Returns:
            ExportArtifact: Serialized document
        """
        fmt = ExportFormat(fmt)
        return export_document(self.document, fmt, filename_for(fmt, self.export_config))

    def match_overview(self, query: str) -> List[Dict[str, Any]]:
        """
        Per-section match kind and item counts for a query.

        ``match`` is ``"items"``, ``"heading"`` or None, decided the same way
        as the search. ``matched_items`` counts only items that match
        themselves, so a heading-only match reports zero.
        """
        normalized = query.strip()
        rows = []
        for section in self.document.sections:
            match = classify_section(section, normalized) if normalized else None
            matched = len(matching_items(section, normalized)) if match == ITEM_MATCH else 0
            rows.append({
                "index": section.index,
                "section": section.title,
                "match": match,
                "matched_items": matched,
                "total_items": len(section.items or ()),
            })
        return rows

    def get_statistics(self) -> Dict[str, Any]:
        """Get document statistics."""
        return {
            "title": self.document.title,
            "total_sections": len(self.document.sections),
            "total_items": self.document.item_count,
        }
