"""Custom exceptions for the policy platform engine."""


class PolicyEngineError(Exception):
    """Base exception for policy platform errors."""
    pass


class InvalidDocument(PolicyEngineError):
    """Raised when source data does not describe a valid policy document."""
    pass


class DocumentLoadError(PolicyEngineError):
    """Raised when a document source cannot be read, fetched or parsed."""
    pass


class ExportError(PolicyEngineError):
    """Raised when an export artifact cannot be written."""
    pass
