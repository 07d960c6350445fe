"""Errors raised by a top-up run. All of them are fatal to the run."""

from typing import Optional


class TopUpError(Exception):
    """Base class for top-up run errors."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class DataSourceError(TopUpError):
    """Raised when an input source cannot be opened or read."""


class FormatError(TopUpError):
    """Raised when input content cannot be parsed as the expected records."""


class WriteError(TopUpError):
    """Raised when the report destination cannot be written."""
