"""Custom exception classes for the application."""
from __future__ import annotations


class NameDisplayError(Exception):
    """Base class for errors raised outside of normal rendering."""


class ConfigurationError(NameDisplayError):
    """Raised when a fullname configuration object is invalid."""
    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
