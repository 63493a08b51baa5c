"""File entity."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from fsentity.base import Path
from fsentity.errors import (
    FilesystemError,
    InvalidArgumentError,
    NotADirError,
    NotAFileError,
    PathExistsError,
    PathNotReadableError,
    PathNotWritableError,
)
from fsentity.mime import validate_mime_extension
from fsentity.paths import PathInput
from fsentity.types import FileMetadata

logger = logging.getLogger(__name__)


class File(Path):
    """A file on the filesystem.

    Metadata (names, size, MIME type) is computed lazily and cached on this
    handle until it is re-pointed by a copy or a move. Two handles on the
    same path keep independent caches.
    """

    def _init(self, path: PathInput) -> None:
        super()._init(path)
        self._metadata = FileMetadata()

    # ------------------------------------------------------------------
    # Reading and writing
    # ------------------------------------------------------------------

    def read(self) -> bytes:
        """Read the whole file.

        Returns:
            The content of the file.

        Raises:
            NotAFileError: If the path is not a file.
            PathNotReadableError: If the file cannot be read.
        """
        if not self.is_readable():
            raise PathNotReadableError(self)

        try:
            return self.fs.read_bytes(self._path)
        except OSError as e:
            raise PathNotReadableError(self) from e

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read the whole file as text."""
        return self.read().decode(encoding)

    def _put(self, data: bytes | str, append: bool) -> None:
        """Write data to the file, creating it and its parents if needed."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(self, f"Cannot write {type(data).__name__} to `{self._path}`.")

        self.touch()
        if not self.is_writable():
            raise PathNotWritableError(self)

        try:
            self.fs.write_bytes(self._path, bytes(data), append=append)
        except OSError as e:
            raise PathNotWritableError(self) from e

    def write(self, data: bytes | str) -> None:
        """Replace the content of the file.

        Raises:
            NotAFileError: If the path is not a file.
            PathNotWritableError: If the file cannot be created or written.
        """
        self._put(data, append=False)

    def append(self, data: bytes | str) -> None:
        """Append to the content of the file.

        Raises:
            NotAFileError: If the path is not a file.
            PathNotWritableError: If the file cannot be created or written.
        """
        self._put(data, append=True)

    # ------------------------------------------------------------------
    # Copy and move
    # ------------------------------------------------------------------

    def _as_destination(self, destination: Any) -> File:
        """Resolve a copy or move destination into a File handle."""
        from fsentity.directory import Directory

        match destination:
            case File():
                return destination
            case Directory():
                return File([destination.path, self.name], self.context)
            case str() | os.PathLike() | list() | tuple():
                return File(destination, self.context)
            case _:
                raise InvalidArgumentError(
                    None, "Destination must be a path, a File or a Directory."
                )

    def copy_to(self, destination: Any, overwrite: bool = False) -> File:
        """Copy to another path and re-point this handle at the copy.

        The source stays on disk; this handle describes the destination
        afterwards.

        Args:
            destination: Path, File, or Directory to copy into under the same name.
            overwrite: Replace an existing destination.

        Returns:
            Itself, for chaining.

        Raises:
            NotAFileError: If the source does not exist.
            PathExistsError: If the destination exists and overwrite is False.
            PathNotReadableError: If the source cannot be read.
            PathNotWritableError: If the destination cannot be written.
        """
        target = self._as_destination(destination)

        if not self.exists():
            raise NotAFileError(self)

        if target.exists() and not overwrite:
            raise PathExistsError(target)

        if not self.is_readable():
            raise PathNotReadableError(self)

        target_parent = target.parent
        if target_parent is not None:
            target_parent.touch()
        if not target.is_writable():
            raise PathNotWritableError(target)

        target.write(self.read())
        logger.debug("Copied %s to %s", self._path, target.path)

        self._init(target.path)
        return self

    def move_to(self, destination: Any) -> File:
        """Move to another path and re-point this handle at it.

        Unlike copy_to there is no overwrite option.

        Args:
            destination: Path, File, or Directory to move into under the same name.

        Returns:
            Itself, for chaining.

        Raises:
            NotAFileError: If the source is not an existing file.
            PathExistsError: If the destination exists.
            PathNotReadableError: If the source cannot be read.
            PathNotWritableError: If the source or destination is not writable.
        """
        self.assert_is_file()
        target = self._as_destination(destination)

        if not self.exists():
            raise NotAFileError(self)

        if target.exists():
            raise PathExistsError(target)

        if not self.is_readable():
            raise PathNotReadableError(self)
        if not self.is_writable():
            raise PathNotWritableError(self)

        target_parent = target.parent
        if target_parent is not None:
            target_parent.touch()
        if not target.is_writable():
            raise PathNotWritableError(target)

        try:
            self.fs.rename(self._path, target.path)
        except OSError as e:
            raise PathNotWritableError(target) from e

        self._init(target.path)
        return self

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def load(self) -> File:
        """Fill the metadata cache.

        Name fields come from the path alone. Size and MIME fields are only
        loaded for existing files; failures there leave them None.

        Returns:
            Itself, for chaining.
        """
        meta = self._metadata
        if not meta.names_loaded:
            name = self.name
            stem, dot, extension = name.rpartition(".")
            meta.base_name = name
            if dot and stem:
                meta.stem, meta.extension = stem, extension
            else:
                meta.stem, meta.extension = name, None

        try:
            if not meta.content_loaded and self.exists():
                meta.size = self.fs.get_size(self._path)
                meta.mime_type = self.context.mime.mime_type_for(self._path)
                derived = (
                    self.context.mime.extension_for(meta.mime_type) if meta.mime_type else None
                )
                meta.mime_extension = validate_mime_extension(derived, meta.extension)
        except (OSError, FilesystemError, ValueError) as e:
            logger.debug("Could not load metadata for %s: %s", self._path, e)

        return self

    def reload(self) -> File:
        """Drop the metadata cache and load it again."""
        self._metadata = FileMetadata()
        return self.load()

    @property
    def metadata(self) -> FileMetadata:
        """Snapshot of the loaded metadata."""
        return dataclasses.replace(self.load()._metadata)

    @property
    def base_name(self) -> str | None:
        """Name of the file, with extension."""
        return self.load()._metadata.base_name

    @property
    def stem(self) -> str | None:
        """Name of the file, without the last extension."""
        return self.load()._metadata.stem

    @property
    def extension(self) -> str | None:
        """Extension from the file name, without the dot."""
        return self.load()._metadata.extension

    @property
    def size(self) -> int | None:
        """Size in bytes, None if unknown."""
        return self.load()._metadata.size

    @property
    def mime_type(self) -> str | None:
        """Detected MIME type, None if unknown."""
        return self.load()._metadata.mime_type

    def get_extension(self, from_mime_type: bool = False) -> str | None:
        """Get the extension of the file.

        Args:
            from_mime_type: Derive the extension from the detected MIME type
                instead of the file name.
        """
        meta = self.load()._metadata
        return meta.mime_extension if from_mime_type else meta.extension

    def last_modified_time(self) -> float:
        """Time of last modification, in seconds since the epoch.

        Raises:
            PathNotReadableError: If the time cannot be read.
        """
        try:
            return self.fs.get_mtime(self._path)
        except OSError as e:
            raise PathNotReadableError(self) from e

    def last_accessed_time(self) -> float:
        """Time of last access, in seconds since the epoch.

        Raises:
            PathNotReadableError: If the time cannot be read.
        """
        try:
            return self.fs.get_atime(self._path)
        except OSError as e:
            raise PathNotReadableError(self) from e

    # ------------------------------------------------------------------
    # Path contract
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        """Check if the file exists.

        Raises:
            NotAFileError: If the path exists but is not a file.
        """
        self.assert_is_file()
        return self.fs.is_file(self._path)

    def is_readable(self) -> bool:
        """Check if the file exists and is readable."""
        self.assert_is_file()
        return self.fs.exists(self._path) and self.fs.is_readable(self._path)

    def is_writable(self) -> bool:
        """Check if the file is writable, or can be created.

        A missing file is writable when its nearest existing ancestor
        directory is writable. A parent that exists as a file makes it
        unwritable.
        """
        self.assert_is_file()
        if self.fs.exists(self._path):
            return self.fs.is_writable(self._path)

        parent = self.parent
        if parent is None:
            return False
        try:
            return parent.is_writable()
        except NotADirError as e:
            logger.debug("Parent of %s is not a directory: %s", self._path, e)
            return False

    def touch(self) -> File:
        """Create the file and its missing parents, or update its timestamp.

        Raises:
            NotAFileError: If the path exists but is not a file.
            PathNotWritableError: If the file cannot be created or stamped.
        """
        self.assert_is_file()

        if not self.is_writable():
            raise PathNotWritableError(self)

        parent = self.parent
        if parent is not None:
            parent.touch()

        try:
            self.fs.touch(self._path)
        except OSError as e:
            raise PathNotWritableError(self) from e

        return self

    def delete(self) -> None:
        """Delete the file.

        Raises:
            NotAFileError: If the path exists but is not a file.
            PathNotWritableError: If the file is missing or not writable.
        """
        self.assert_is_file()

        if not (self.exists() and self.is_writable()):
            raise PathNotWritableError(self)

        try:
            self.fs.unlink(self._path)
        except OSError as e:
            raise PathNotWritableError(self) from e
