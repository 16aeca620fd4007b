"""Exceptions raised by the board store and its configuration."""

from pathlib import Path


class ConfigurationError(Exception):
    """The application cannot be configured (e.g. no home directory)."""


class BoardStoreError(Exception):
    """Base class for failures reading or writing the board file."""

    recoverable: bool = False

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class StoreIOError(BoardStoreError):
    """The board file could not be read or written at the OS level."""


class StoreParseError(BoardStoreError):
    """The board file is not valid JSON or does not match the board shape.

    Marked recoverable: the caller may offer to reset the file to the
    default board. The store itself never does this.
    """

    recoverable = True
