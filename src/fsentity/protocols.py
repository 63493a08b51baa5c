"""Protocol definitions for the collaborators entities depend on.

Entities never touch the operating system directly. They go through a
:class:`FileSystem` capability and classify content through a
:class:`MimeLookup`. Both are Protocols, so test doubles and alternative
backends satisfy them structurally.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the OS filesystem capability.

    All paths are canonical absolute strings. Implementations raise
    ``OSError`` subclasses on failure; entities translate them.
    """

    def exists(self, path: str) -> bool:
        """Check if anything exists at a path."""
        ...

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        ...

    def is_readable(self, path: str) -> bool:
        """Check if an existing path is readable by this process."""
        ...

    def is_writable(self, path: str) -> bool:
        """Check if an existing path is writable by this process."""
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read the whole content of a file.

        Raises:
            OSError: If the file cannot be read.
        """
        ...

    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        """Write the whole content of a file.

        Args:
            path: File to write.
            data: Bytes to write.
            append: Append to the existing content instead of replacing it.

        Raises:
            OSError: If the file cannot be written.
        """
        ...

    def touch(self, path: str) -> None:
        """Create a file or update its modification time."""
        ...

    def rename(self, src: str, dst: str) -> None:
        """Move a file, also across filesystems."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a file."""
        ...

    def mkdir(self, path: str, mode: int = 0o775, parents: bool = True) -> None:
        """Create a directory, and its missing parents when requested."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    def glob(self, directory: str, pattern: str) -> list[str]:
        """List entries of a directory matching a brace-expansion glob.

        Args:
            directory: Directory to search in, matched literally.
            pattern: Glob pattern supporting ``*``, ``?``, ``[...]`` and
                ``{a,b}`` alternation.

        Returns:
            Matching paths, alternatives in pattern order, each sorted.
        """
        ...

    def get_mtime(self, path: str) -> float:
        """Last modification time in seconds since the epoch."""
        ...

    def get_atime(self, path: str) -> float:
        """Last access time in seconds since the epoch."""
        ...

    def get_size(self, path: str) -> int:
        """Size of a file in bytes."""
        ...


@runtime_checkable
class MimeLookup(Protocol):
    """Protocol for MIME type detection."""

    def mime_type_for(self, path: str) -> str | None:
        """Detect the MIME type of a file from its content or extension.

        Args:
            path: Path to the file.

        Returns:
            MIME type, or None if it cannot be determined.
        """
        ...

    def extension_for(self, mime_type: str) -> str | None:
        """Get the canonical extension for a MIME type.

        Args:
            mime_type: MIME type to look up.

        Returns:
            Extension without the leading dot, or None if unknown.
        """
        ...
