"""Path normalization and OS path conventions.

The PathResolver turns user supplied paths (absolute, relative, or a
sequence of segments) into canonical absolute strings. It is pure string
manipulation and never touches the filesystem.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from typing import Any, Union

from fsentity.errors import InvalidArgumentError, UnsupportedOSError
from fsentity.types import OSFamily

PathInput = Union[str, os.PathLike, Sequence[Any]]

_WINDOWS_ABSOLUTE = re.compile(r"^([A-Za-z]+:)\\")
_WINDOWS_ROOT = re.compile(r"^[A-Za-z]+:\\$")


def detect_os(identifier: str | None = None) -> OSFamily:
    """Get the path convention of an operating system.

    Args:
        identifier: OS identifier such as ``sys.platform``. Defaults to the host.

    Returns:
        OSFamily.WINDOWS for identifiers starting with "win", OSFamily.UNIX
        for anything else.

    Raises:
        UnsupportedOSError: If the identifier is empty.
    """
    signature = sys.platform if identifier is None else identifier
    if not signature:
        raise UnsupportedOSError(signature)
    if signature.lower().startswith("win"):
        return OSFamily.WINDOWS
    return OSFamily.UNIX


class PathResolver:
    """Canonicalizes paths for one OS family and base directory."""

    def __init__(self, base_dir: str | None = None, os_family: OSFamily | None = None) -> None:
        """Initialize the resolver.

        Args:
            base_dir: Absolute directory relative paths are resolved against.
                Defaults to the current working directory.
            os_family: Path convention. Defaults to the host's.

        Raises:
            InvalidArgumentError: If base_dir is not absolute.
        """
        self.os_family = os_family or detect_os()
        self.separator = self.os_family.separator

        base = self._convert(base_dir if base_dir is not None else os.getcwd())
        if not self.is_absolute(base):
            raise InvalidArgumentError(base, f"Base directory `{base}` must be absolute.")
        self.base_dir = self._normalize(base)

    def _convert(self, path: str) -> str:
        if self.os_family is OSFamily.WINDOWS:
            return path.replace("/", "\\")
        return path

    def _to_string(self, path: Any) -> str:
        """Join segment sequences and convert PathLike values to strings."""
        try:
            if isinstance(path, (list, tuple)):
                return self.separator.join(os.fspath(segment) for segment in path)
            return os.fspath(path)
        except TypeError as e:
            raise InvalidArgumentError(None, f"Cannot use {path!r} as a path.") from e

    def _split_root(self, path: str) -> tuple[str, str]:
        """Split an absolute path into its root and the remainder."""
        if self.os_family is OSFamily.WINDOWS:
            match = _WINDOWS_ABSOLUTE.match(path)
            if match:
                return match.group(1) + self.separator, path[match.end() :]
            return "", path
        if path.startswith(self.separator):
            return self.separator, path[1:]
        return "", path

    def _normalize(self, path: str) -> str:
        root, remainder = self._split_root(path)
        stack: list[str] = []
        for segment in remainder.split(self.separator):
            if segment in ("", "."):
                continue
            if segment == "..":
                # Never climb above the root
                if stack:
                    stack.pop()
                continue
            stack.append(segment)
        return root + self.separator.join(stack)

    def is_absolute(self, path: str) -> bool:
        """Check if a path is absolute for this OS family."""
        if self.os_family is OSFamily.WINDOWS:
            return _WINDOWS_ABSOLUTE.match(path) is not None
        return path[:1] == self.separator

    def resolve(self, path: PathInput) -> str:
        """Get the canonical absolute path, without trailing separator.

        Args:
            path: Path string, PathLike, or sequence of segments.

        Returns:
            Absolute path with collapsed separators and resolved ``.``/``..``
            segments. The root is returned as the bare root (``/``).

        Raises:
            InvalidArgumentError: If the value cannot be used as a path.
        """
        raw = self._convert(self._to_string(path))
        if not raw:
            return self.base_dir
        if not self.is_absolute(raw):
            raw = self.base_dir + self.separator + raw
        return self._normalize(raw)

    def resolve_directory(self, path: PathInput) -> str:
        """Get the canonical absolute path with exactly one trailing separator."""
        resolved = self.resolve(path)
        if resolved.endswith(self.separator):
            return resolved
        return resolved + self.separator

    @property
    def root(self) -> str:
        """Root of the base directory's drive."""
        return self._split_root(self.base_dir)[0]

    def is_root(self, path: str) -> bool:
        """Check if a canonical path is a filesystem root."""
        if self.os_family is OSFamily.WINDOWS:
            return _WINDOWS_ROOT.match(path) is not None
        return path == self.separator

    def strip(self, path: str) -> str:
        """Remove the trailing separator, keeping a bare root intact."""
        if self.is_root(path):
            return path
        return path.rstrip(self.separator)

    def name_of(self, path: str) -> str:
        """Last segment of a canonical path, empty for a root."""
        if self.is_root(path):
            return ""
        return self.strip(path).rsplit(self.separator, 1)[-1]

    def parent_of(self, path: str) -> str | None:
        """Parent of a canonical path, or None for a root."""
        if self.is_root(path):
            return None
        root, _ = self._split_root(path)
        head = self.strip(path).rsplit(self.separator, 1)[0]
        if not head or head + self.separator == root:
            return root
        return head
