"""File and directory entities over a pluggable filesystem capability."""

__version__ = "0.1.0"

from fsentity.base import Path
from fsentity.context import FsContext, create_context, get_default_context
from fsentity.directory import Directory
from fsentity.errors import (
    FilesystemError,
    InvalidArgumentError,
    NotADirError,
    NotAFileError,
    PathExistsError,
    PathNotFoundError,
    PathNotReadableError,
    PathNotWritableError,
    UnsupportedOSError,
)
from fsentity.file import File

# Export protocol interfaces for type hints and dependency injection
from fsentity.protocols import FileSystem, MimeLookup

__all__ = [
    "__version__",
    "Directory",
    "File",
    "FileSystem",
    "FilesystemError",
    "FsContext",
    "InvalidArgumentError",
    "MimeLookup",
    "NotADirError",
    "NotAFileError",
    "Path",
    "PathExistsError",
    "PathNotFoundError",
    "PathNotReadableError",
    "PathNotWritableError",
    "UnsupportedOSError",
    "create_context",
    "get_default_context",
]
