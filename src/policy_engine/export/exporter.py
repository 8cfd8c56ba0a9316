"""
Document export to Markdown and literal HTML.

Exports always serialize the full document, independent of any active
search query. Both serializers are pure; writing the result to disk is done
by ``write_export`` for callers that need a file.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

# Logging
from loguru import logger

from ..ingestion.document_model import Document, Item
from ..utils.config import ExportConfig
from ..utils.exceptions import ExportError

VISION_HEADING = "## Vision Statement"
VISION_STATEMENT = (
    "This platform rejects corruption and concentrated power, embracing "
    "transparency, accountability, and fairness as guiding principles."
)

_HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})

HTML_TEMPLATE = (
    '<!doctype html><html><head><meta charset="utf-8">'
    '<title>{title}</title></head><body><pre>{body}</pre></body></html>'
)


class ExportFormat(Enum):
    """Supported export formats."""
    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def mime_type(self) -> str:
        if self is ExportFormat.MARKDOWN:
            return "text/markdown;charset=utf-8"
        return "text/html;charset=utf-8"

    @property
    def default_filename(self) -> str:
        if self is ExportFormat.MARKDOWN:
            return "platform.md"
        return "platform.html"


@dataclass(frozen=True)
class ExportArtifact:
    """Serialized document ready for a file-save action."""
    filename: str
    content: str
    mime_type: str


def escape_html(text: str) -> str:
    """Escape ``& < > "`` and nothing else."""
    return text.translate(_HTML_ESCAPES)


def _item_line(item: Item) -> str:
    if item.title:
        return f"- **{item.title}**: {item.text}"
    return f"- {item.text}"


def to_markdown(document: Document) -> str:
    """
    Serialize a document to Markdown.

    Args:
        document: Full, unfiltered document

    Returns:
        str: Markdown text ending with the fixed vision statement block
    """
    lines: List[str] = [f"# {document.title}", ""]
    for section in document.sections:
        lines.append(f"## {section.index}. {section.title}")
        if section.subtitle:
            lines.append(section.subtitle)
        for item in section.items or ():
            lines.append(_item_line(item))
        lines.append("")

    lines.append(f"\n{VISION_HEADING}\n{VISION_STATEMENT}")
    return "\n".join(lines)


def to_html(document: Document) -> str:
    """
    Wrap the escaped Markdown export in a minimal HTML page.

    The Markdown is not rendered into tags; it is shown verbatim inside a
    single ``<pre>`` block.
    """
    return HTML_TEMPLATE.format(
        title=escape_html(document.title),
        body=escape_html(to_markdown(document)),
    )


def export_document(document: Document, fmt: Union[ExportFormat, str],
                    filename: Optional[str] = None) -> ExportArtifact:
    """
    Serialize a document into an export artifact.

    Args:
        document: Full document
        fmt: Export format or its value (``"markdown"``/``"html"``)
        filename: Override for the default filename

    Returns:
        ExportArtifact: Filename, content and content type
    """
    fmt = ExportFormat(fmt)
    content = to_markdown(document) if fmt is ExportFormat.MARKDOWN else to_html(document)
    return ExportArtifact(
        filename=filename or fmt.default_filename,
        content=content,
        mime_type=fmt.mime_type,
    )


def filename_for(fmt: ExportFormat, config: ExportConfig) -> str:
    if fmt is ExportFormat.MARKDOWN:
        return config.markdown_filename
    return config.html_filename


def write_export(artifact: ExportArtifact, directory: Union[str, Path]) -> Path:
    """
    Write an export artifact to ``directory``.

    Args:
        artifact: Artifact to save
        directory: Target directory, created if missing

    Returns:
        Path: Path of the written file
    """
    target = Path(directory) / artifact.filename
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing export {target}: {e}")
        raise ExportError(f"Cannot write {target}: {e}") from e

    logger.info(f"Exported {artifact.mime_type.split(';')[0]} to {target}")
    return target
