"""Utility functions, configuration management and errors."""

from .config import get_config, reload_config, ConfigManager, Config
from .exceptions import PolicyEngineError, InvalidDocument, DocumentLoadError, ExportError
from .logging import setup_logging

__all__ = [
    "get_config",
    "reload_config",
    "ConfigManager",
    "Config",
    "PolicyEngineError",
    "InvalidDocument",
    "DocumentLoadError",
    "ExportError",
    "setup_logging",
]
