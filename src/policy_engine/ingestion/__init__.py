"""Document model, loading and validation."""

from .document_model import Document, Section, Item
from .document_loader import (
    DocumentLoader,
    parse_document,
    load_document_file,
    fetch_document,
    load_default_document,
)

__all__ = [
    "Document",
    "Section",
    "Item",
    "DocumentLoader",
    "parse_document",
    "load_document_file",
    "fetch_document",
    "load_default_document",
]
