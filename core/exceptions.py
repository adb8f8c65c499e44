"""
Exceptions raised by Provider Directory.

Every error carries a human-readable message plus a ``context`` dict of the
details worth logging (file, URL, status code, offending field). Context
entries given as None are left out.
"""

from typing import Any, Dict


class DirectoryError(Exception):
    """Base class for Provider Directory errors."""

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = {key: value for key, value in context.items() if value is not None}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} [{details}]"


class ConfigurationError(DirectoryError):
    """config.toml could not be read, decoded or written. Context: config_file."""


class RecordSourceError(DirectoryError):
    """The provider batch could not be fetched or decoded. Context: url, status_code."""


class ValidationError(DirectoryError):
    """A setting has the wrong type. Context: field and the offending value as text."""

    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(message, field=field, value=None if value is None else str(value))
