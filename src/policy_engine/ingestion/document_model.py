"""
Policy document data model.

A document is a title plus an ordered sequence of sections; each section
holds an ordered sequence of items. All types are frozen so that loaded
documents and every view derived from them are safe to share.
"""

from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class Item:
    """A single bullet entry, optionally with a bold lead-in title."""
    text: str
    title: Optional[str] = None

    @property
    def display_text(self) -> str:
        """Text as rendered in the page: ``title: text`` or just ``text``."""
        if self.title:
            return f"{self.title}: {self.text}"
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data: Dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        data["text"] = self.text
        return data


@dataclass(frozen=True)
class Section:
    """A titled group of items, addressable by a stable id."""
    id: str
    index: int
    title: str
    subtitle: Optional[str] = None
    # None means the source had no items field at all
    items: Optional[Tuple[Item, ...]] = None

    @property
    def anchor(self) -> str:
        return f"#{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data: Dict[str, Any] = {
            "id": self.id,
            "index": self.index,
            "title": self.title,
        }
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.items is not None:
            data["items"] = [item.to_dict() for item in self.items]
        return data


@dataclass(frozen=True)
class Document:
    """The whole policy text: a title and its ordered sections."""
    title: str
    sections: Tuple[Section, ...]

    @property
    def item_count(self) -> int:
        return sum(len(section.items or ()) for section in self.sections)

    def section_ids(self) -> List[str]:
        """Section ids in display order."""
        return [section.id for section in self.sections]

    def get_section(self, section_id: str) -> Optional[Section]:
        """
        Look up a section by its anchor id.

        Args:
            section_id: Section id, with or without a leading ``#``

        Returns:
            Section if found, None otherwise
        """
        wanted = section_id.lstrip("#")
        for section in self.sections:
            if section.id == wanted:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "title": self.title,
            "sections": [section.to_dict() for section in self.sections],
        }
