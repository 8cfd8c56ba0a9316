"""
Document loading and validation.

This module is the boundary between raw policy data (JSON or YAML files,
remote JSON, or the bundled platform document) and the engine. Raw data is
validated against pydantic schema models and converted into the frozen
document model; anything that does not fit the schema is rejected here so
the query and export code never has to re-validate.
"""

import json
from importlib import resources
from pathlib import Path
from typing import List, Any, Mapping, Optional, Union

import requests
import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator

# Logging
from loguru import logger

from ..utils.config import SourceConfig, get_config
from ..utils.exceptions import DocumentLoadError, InvalidDocument
from .document_model import Document, Item, Section

DEFAULT_DOCUMENT_RESOURCE = "platform.json"
USER_AGENT = "PolicyPlatform/1.0"


class ItemSchema(BaseModel):
    """Raw shape of a section item."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[StrictStr] = None
    text: StrictStr


class SectionSchema(BaseModel):
    """Raw shape of a document section."""
    model_config = ConfigDict(extra="ignore")

    id: StrictStr = Field(..., min_length=1)
    index: StrictInt
    title: StrictStr
    subtitle: Optional[StrictStr] = None
    items: Optional[List[ItemSchema]] = None


class DocumentSchema(BaseModel):
    """Raw shape of a policy document."""
    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    sections: List[SectionSchema] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_unique_ids(self):
        seen = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id!r}")
            seen.add(section.id)
        return self

    def to_document(self) -> Document:
        """Convert the validated schema into the immutable document model."""
        sections = []
        for raw in self.sections:
            items = None
            if raw.items is not None:
                items = tuple(Item(text=item.text, title=item.title) for item in raw.items)
            sections.append(Section(
                id=raw.id,
                index=raw.index,
                title=raw.title,
                subtitle=raw.subtitle,
                items=items,
            ))
        return Document(title=self.title, sections=tuple(sections))


def parse_document(data: Any) -> Document:
    """
    Validate raw document data and build a Document.

    Args:
        data: Decoded JSON/YAML mapping

    Returns:
        Document: Validated, immutable document

    Raises:
        InvalidDocument: If the data does not match the document schema
    """
    if not isinstance(data, Mapping):
        raise InvalidDocument(f"Document must be a mapping, got {type(data).__name__}")

    try:
        schema = DocumentSchema.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidDocument(f"Invalid policy document: {e}") from e

    return schema.to_document()


def _validate(data: Any, origin: str) -> Document:
    try:
        return parse_document(data)
    except InvalidDocument as e:
        logger.error(f"Document from {origin} failed validation: {e}")
        raise


def load_document_file(file_path: Union[str, Path]) -> Document:
    """
    Load a document from a JSON or YAML file.

    Args:
        file_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file

    Returns:
        Document: Validated document
    """
    path = Path(file_path)
    logger.info(f"Loading policy document from file: {path}")

    suffix = path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise DocumentLoadError(f"Unsupported document format: {path.name}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Error reading document {path}: {e}")
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e

    try:
        if suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Error parsing document {path}: {e}")
        raise DocumentLoadError(f"Cannot parse {path}: {e}") from e

    document = _validate(data, str(path))
    logger.info(f"Loaded '{document.title}' ({len(document.sections)} sections)")
    return document


def fetch_document(url: str, timeout: float = 30.0,
                   session: Optional[requests.Session] = None) -> Document:
    """
    Fetch a JSON document over HTTP.

    Args:
        url: Document URL
        timeout: Request timeout in seconds
        session: Optional session to reuse

    Returns:
        Document: Validated document
    """
    logger.info(f"Fetching policy document: {url}")
    headers = {'User-Agent': USER_AGENT}

    try:
        if session is None:
            with requests.Session() as http:
                response = http.get(url, headers=headers, timeout=timeout)
        else:
            response = session.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        logger.error(f"Error fetching document from {url}: {e}")
        raise DocumentLoadError(f"Failed to load: {e}") from e
    except ValueError as e:
        logger.error(f"Document at {url} is not valid JSON: {e}")
        raise DocumentLoadError(f"Failed to load: response is not JSON ({e})") from e

    document = _validate(data, url)
    logger.info(f"Fetched '{document.title}' ({len(document.sections)} sections)")
    return document


def load_default_document() -> Document:
    """Load the platform document bundled with the package."""
    resource = resources.files("policy_engine") / "data" / DEFAULT_DOCUMENT_RESOURCE
    return parse_document(json.loads(resource.read_text(encoding="utf-8")))


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class DocumentLoader:
    """Resolves a configured or explicit source into a validated Document."""

    def __init__(self, config: Optional[SourceConfig] = None):
        """
        Initialize the loader.

        Args:
            config: Source settings; the global configuration is used when omitted
        """
        self.config = config or get_config().source

    def load(self, source: Optional[str] = None) -> Document:
        """
        Load a document.

        An explicit ``source`` (path or http(s) URL) wins; otherwise the
        configured URL, then the configured path, then the bundled document.

        Args:
            source: Optional path or URL

        Returns:
            Document: Validated document
        """
        if source:
            if is_url(source):
                return fetch_document(source, timeout=self.config.timeout)
            return load_document_file(source)

        if self.config.url:
            return fetch_document(self.config.url, timeout=self.config.timeout)
        if self.config.path:
            return load_document_file(self.config.path)

        logger.debug("No document source configured, using bundled platform document")
        return load_default_document()
