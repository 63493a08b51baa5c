"""Error taxonomy for filesystem entities.

Every failure raised by :mod:`fsentity` is a subclass of
:class:`FilesystemError`, so callers can catch the whole family or branch on
the specific kind.
"""

from __future__ import annotations

import os
from typing import Any

__all__ = [
    "FilesystemError",
    "InvalidArgumentError",
    "NotADirError",
    "NotAFileError",
    "PathExistsError",
    "PathNotFoundError",
    "PathNotReadableError",
    "PathNotWritableError",
    "UnsupportedOSError",
]


def path_string(target: Any) -> str | None:
    """Get the string path of an entity, a PathLike or a plain string."""
    if target is None:
        return None
    if isinstance(target, (str, os.PathLike)):
        return os.fspath(target)
    return str(target)


class FilesystemError(Exception):
    """Base error for all filesystem related failures.

    Attributes:
        path: The path the failure concerns, or None.
        message: Human readable description.
    """

    message_template = "Filesystem operation failed for `{path}`."

    def __init__(self, target: Any = None, message: str | None = None) -> None:
        self.path = path_string(target)
        self.message = message or self.message_template.format(path=self.path)
        super().__init__(self.message)


class InvalidArgumentError(FilesystemError, TypeError):
    """An operation received a value outside its accepted kinds."""

    message_template = "Invalid argument supplied for `{path}`."


class NotADirError(FilesystemError):
    """The path was expected to be a directory."""

    message_template = "The supplied path `{path}` is not a directory."


class NotAFileError(FilesystemError):
    """The path was expected to be a file."""

    message_template = "The supplied path `{path}` is not a file."


class PathExistsError(FilesystemError):
    """The target path already exists."""

    message_template = "The supplied path `{path}` already exists."


class PathNotFoundError(FilesystemError):
    """The path was required to exist."""

    message_template = "The supplied path `{path}` does not exist."


class PathNotReadableError(FilesystemError):
    """The path cannot be read."""

    message_template = "The supplied path `{path}` is not readable."


class PathNotWritableError(FilesystemError):
    """The path cannot be written, created or removed."""

    message_template = "The supplied path `{path}` is not writable."


class UnsupportedOSError(FilesystemError):
    """The host operating system is neither Unix nor Windows based."""

    def __init__(self, signature: str) -> None:
        super().__init__(None, f"Unsupported OS as described with {signature!r}")
        self.signature = signature
