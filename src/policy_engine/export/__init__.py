"""Markdown and HTML export."""

from .exporter import (
    ExportArtifact,
    ExportFormat,
    VISION_STATEMENT,
    export_document,
    to_html,
    to_markdown,
    write_export,
)

__all__ = [
    "ExportArtifact",
    "ExportFormat",
    "VISION_STATEMENT",
    "export_document",
    "to_html",
    "to_markdown",
    "write_export",
]
