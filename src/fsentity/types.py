"""Shared data types for fsentity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["FileMetadata", "OSFamily"]


class OSFamily(str, Enum):
    """Path convention of the host operating system."""

    UNIX = "unix"
    WINDOWS = "windows"

    @property
    def separator(self) -> str:
        """Directory separator used by this family."""
        return "\\" if self is OSFamily.WINDOWS else "/"


@dataclass
class FileMetadata:
    """Lazily computed information about a file.

    Name derived fields are always filled once loaded. The remaining fields
    stay None when the file does not exist or could not be inspected.

    Attributes:
        base_name: File name with extension.
        stem: File name without the last extension.
        extension: Last extension without the dot, None when absent.
        size: Size in bytes.
        mime_type: Detected MIME type.
        mime_extension: Extension derived from the MIME type.
    """

    base_name: str | None = None
    stem: str | None = None
    extension: str | None = None
    size: int | None = None
    mime_type: str | None = None
    mime_extension: str | None = None

    @property
    def names_loaded(self) -> bool:
        """True once the path derived fields are set."""
        return self.base_name is not None and self.stem is not None

    @property
    def content_loaded(self) -> bool:
        """True once the stat and MIME derived fields are set."""
        return (
            self.size is not None
            and self.mime_type is not None
            and self.mime_extension is not None
        )
