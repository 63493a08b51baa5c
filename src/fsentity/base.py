"""Common base for file and directory entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fsentity.context import FsContext, get_default_context
from fsentity.errors import NotADirError, NotAFileError, PathNotFoundError
from fsentity.paths import PathInput
from fsentity.protocols import FileSystem

if TYPE_CHECKING:
    from fsentity.directory import Directory


class Path(ABC):
    """A path on the filesystem, which may be a file, a directory, or nothing yet.

    Construction only normalizes the path; it never touches the disk. The
    declared kind (file or directory) is checked against the disk when an
    operation runs.
    """

    # True for entities that represent directories
    is_directory_kind = False

    def __init__(self, path: PathInput, context: FsContext | None = None) -> None:
        """Initialize the entity.

        Args:
            path: Path string, PathLike, entity, or sequence of segments.
                Relative paths resolve against the context's base directory.
            context: Dependencies to use. Defaults to the shared default context.
        """
        self.context = context or get_default_context()
        self._init(path)

    def _init(self, path: PathInput) -> None:
        """(Re)point this handle at a path."""
        self._path = self._resolve(path)

    def _resolve(self, path: PathInput) -> str:
        return self.context.resolver.resolve(path)

    @property
    def fs(self) -> FileSystem:
        """Filesystem capability of this entity's context."""
        return self.context.filesystem

    @property
    def path(self) -> str:
        """Canonical absolute path."""
        return self._path

    @property
    def name(self) -> str:
        """Last segment of the path, with extension for files."""
        return self.context.resolver.name_of(self._path)

    @property
    def parent(self) -> Directory | None:
        """Parent directory, or None for the filesystem root."""
        from fsentity.directory import Directory

        parent = self.context.resolver.parent_of(self._path)
        return None if parent is None else Directory(parent, self.context)

    @property
    def _bare_path(self) -> str:
        # Without the trailing separator, so a file is found under a directory handle
        return self.context.resolver.strip(self._path)

    def assert_is_file(self) -> None:
        """Make sure this handle is a file and the disk agrees.

        Raises:
            NotAFileError: If this is a directory handle or the path exists
                as something other than a file.
        """
        bare = self._bare_path
        if self.is_directory_kind or (self.fs.exists(bare) and not self.fs.is_file(bare)):
            raise NotAFileError(self)

    def assert_is_directory(self) -> None:
        """Make sure this handle is a directory and the disk agrees.

        Raises:
            NotADirError: If this is a file handle or the path exists as
                something other than a directory.
        """
        bare = self._bare_path
        if not self.is_directory_kind or (self.fs.exists(bare) and not self.fs.is_dir(bare)):
            raise NotADirError(self)

    def assert_exists(self) -> None:
        """Make sure the path exists on disk as its declared kind.

        Raises:
            PathNotFoundError: If nothing of this kind exists at the path.
        """
        if not self.exists():
            raise PathNotFoundError(self)

    def __fspath__(self) -> str:
        return self._path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return type(self) is type(other) and self._path == other._path

    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def exists(self) -> bool:
        """Check if the path exists on the filesystem."""

    @abstractmethod
    def is_readable(self) -> bool:
        """Check if the path is readable."""

    @abstractmethod
    def is_writable(self) -> bool:
        """Check if the path is writable, or can be created."""

    @abstractmethod
    def touch(self) -> Path:
        """Touch the path, creating it if it does not exist.

        Returns:
            Itself, for chaining.
        """

    @abstractmethod
    def delete(self) -> None:
        """Delete the path."""
