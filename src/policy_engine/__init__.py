"""Policy Platform - search, highlight and export a policy document.

This package validates a hierarchical policy document, filters it against
free-text queries, computes highlight segments and exports the document to
Markdown and HTML.
"""

__version__ = "1.0.0"
__author__ = "Policy Platform Team"
__description__ = "Document query and export engine for a policy platform"

# Core modules (import lazily to avoid heavy imports on package import)
def get_config():
    from .utils.config import get_config as _get_config
    return _get_config()

def DocumentLoader(*args, **kwargs):
    from .ingestion.document_loader import DocumentLoader as _DocumentLoader
    return _DocumentLoader(*args, **kwargs)

def PolicyQueryEngine(*args, **kwargs):
    from .query.query_engine import PolicyQueryEngine as _PolicyQueryEngine
    return _PolicyQueryEngine(*args, **kwargs)

__all__ = [
    "get_config",
    "DocumentLoader",
    "PolicyQueryEngine",
]
