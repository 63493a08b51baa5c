"""Directory entity."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from fsentity.base import Path
from fsentity.context import FsContext, get_default_context
from fsentity.errors import (
    InvalidArgumentError,
    NotADirError,
    PathNotReadableError,
    PathNotWritableError,
)
from fsentity.file import File
from fsentity.paths import PathInput

logger = logging.getLogger(__name__)

# Every entry, hidden ones included, except "." and ".."
ALL_ENTRIES_PATTERN = "{*,.[!.]*,..?*}"


class Directory(Path):
    """A directory on the filesystem.

    Holds no state besides its path; every operation queries the filesystem.
    The canonical path always ends with a separator.
    """

    is_directory_kind = True

    def _resolve(self, path: PathInput) -> str:
        return self.context.resolver.resolve_directory(path)

    @classmethod
    def root(cls, context: FsContext | None = None) -> Directory:
        """Get the filesystem root of the context's base directory."""
        context = context or get_default_context()
        return cls(context.resolver.root, context)

    def is_root(self) -> bool:
        """Check if this directory is the filesystem root."""
        return self.context.resolver.is_root(self._path)

    def _entity_for(self, path: str) -> Path:
        if self.fs.is_file(path):
            return File(path, self.context)
        return Directory(path, self.context)

    def list_directory(self, pattern: str = "*") -> list[Path]:
        """List the entries of this directory.

        Args:
            pattern: Glob pattern, ``{a,b}`` alternation supported.

        Returns:
            Matching files and directories.

        Raises:
            NotADirError: If the path is not a directory.
            PathNotReadableError: If the directory cannot be listed.
        """
        self.assert_is_directory()

        if not self.is_readable():
            raise PathNotReadableError(self)

        try:
            matches = self.fs.glob(self._path, pattern)
        except OSError as e:
            raise PathNotReadableError(self) from e

        return [self._entity_for(match) for match in matches]

    def find_recursive(self, pattern: str = "*") -> list[Path]:
        """Search this directory and all subdirectories.

        Matches at one level come before the matches of its subdirectories,
        which are searched in listing order.

        Args:
            pattern: Glob pattern applied at every level.

        Returns:
            Matching files and directories.
        """
        paths = self.list_directory(pattern)

        for child in self.list_directory():
            if isinstance(child, Directory):
                paths.extend(child.find_recursive(pattern))

        return paths

    def exists(self) -> bool:
        """Check if the directory exists.

        Raises:
            NotADirError: If the path exists but is not a directory.
        """
        self.assert_is_directory()
        return self.fs.is_dir(self._path)

    def is_readable(self) -> bool:
        """Check if the directory exists and is readable."""
        self.assert_is_directory()
        return self.fs.exists(self._path) and self.fs.is_readable(self._path)

    def is_writable(self) -> bool:
        """Check if the directory is writable, or can be created.

        The nearest existing ancestor, starting with this directory, decides.
        An ancestor that exists as a file makes it unwritable.
        """
        self.assert_is_directory()

        directory: Directory | None = self
        while directory is not None:
            bare = directory._bare_path
            if self.fs.exists(bare):
                return self.fs.is_dir(bare) and self.fs.is_writable(directory.path)

            if directory.is_root():
                break

            directory = directory.parent

        return False

    def touch(self) -> Directory:
        """Create the directory and its missing parents.

        Raises:
            NotADirError: If the path exists but is not a directory.
            PathNotWritableError: If the directory cannot be created.
        """
        if not self.exists():
            if not self.is_writable():
                raise PathNotWritableError(self)

            try:
                self.fs.mkdir(self._path, mode=self.context.settings.dir_mode, parents=True)
            except OSError as e:
                raise PathNotWritableError(self) from e

        return self

    def delete(self) -> None:
        """Delete the directory and everything in it.

        Children are removed first; a failure leaves the ones already
        removed gone.

        Raises:
            NotADirError: If the directory does not exist.
            PathNotWritableError: If it or any descendant cannot be removed.
        """
        self.assert_is_directory()

        if not self.exists():
            raise NotADirError(self)

        if not self.is_writable():
            raise PathNotWritableError(self)

        self.clear()
        try:
            self.fs.rmdir(self._path)
        except OSError as e:
            raise PathNotWritableError(self) from e

    def clear(self, exclude: Iterable[str | re.Pattern[str]] = ()) -> None:
        """Delete the content of the directory, but not the directory itself.

        Args:
            exclude: Regular expressions; children whose name matches any of
                them are kept.
        """
        patterns = [re.compile(p) if isinstance(p, str) else p for p in exclude]

        for child in self.list_directory(ALL_ENTRIES_PATTERN):
            if any(p.search(child.name) for p in patterns):
                logger.debug("Keeping excluded %s", child.path)
                continue

            child.delete()

    def write(self, entity: Any, overwrite: bool = True) -> Directory:
        """Place a file inside this directory.

        The given file handle is re-pointed at its new location.

        Args:
            entity: File to copy in.
            overwrite: Replace an existing file of the same name.

        Returns:
            Itself, for chaining.

        Raises:
            PathNotWritableError: If this directory is not writable.
            PathExistsError: If the file exists here and overwrite is False.
            NotImplementedError: If a Directory is given.
            InvalidArgumentError: If anything else is given.
        """
        if not self.is_writable():
            raise PathNotWritableError(self)

        match entity:
            case File():
                self.touch()
                entity.copy_to(self, overwrite=overwrite)
                return self
            case Directory():
                raise NotImplementedError("Writing a directory into a directory is not supported yet.")
            case _:
                raise InvalidArgumentError(
                    None, "Only File and Directory objects can be written to a directory."
                )
