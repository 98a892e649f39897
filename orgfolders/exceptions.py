"""
Custom exceptions for the orgfolders query layer.
"""

from typing import Optional


class FolderError(Exception):
    """Base exception for all orgfolders errors."""
    pass


class InvalidRequestError(FolderError):
    """Raised when no request object is supplied."""
    pass


class InvalidArgumentError(FolderError):
    """Raised when a request field holds an unacceptable value.

    The ``field`` attribute names the offending request field.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class CursorDecodeError(FolderError):
    """Raised when a pagination cursor cannot be decoded."""
    pass


class ProviderError(FolderError):
    """Raised when the folder data provider cannot produce its records."""
    pass


class ConfigurationError(FolderError):
    """Raised when there's a configuration or setup issue."""
    pass
