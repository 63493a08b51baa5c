"""OS filesystem capability.

The RealFileSystem implementation wraps standard library operations and
satisfies the FileSystem protocol structurally. Entities receive it through
their context, so tests can substitute a double without real I/O.
"""

from __future__ import annotations

import glob as _glob
import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def _find_brace_group(pattern: str) -> tuple[int, int, list[str]] | None:
    """Locate the first balanced ``{...}`` group and split its alternatives.

    Returns:
        Tuple of (open index, close index, alternatives), or None when the
        pattern holds no balanced group.
    """
    depth = 0
    open_idx = 0
    last = 0
    parts: list[str] = []
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                open_idx = i
                last = i + 1
                parts = []
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                parts.append(pattern[last:i])
                return open_idx, i, parts
        elif ch == "," and depth == 1:
            parts.append(pattern[last:i])
            last = i + 1
    return None


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternation into plain glob patterns.

    Groups may nest. Unbalanced braces are kept literally.

    Example:
        >>> expand_braces("*.{txt,md}")
        ['*.txt', '*.md']
        >>> expand_braces("{a,b{1,2}}")
        ['a', 'b1', 'b2']
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]

    open_idx, close_idx, alternatives = group
    prefix, suffix = pattern[:open_idx], pattern[close_idx + 1 :]
    expanded: list[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


class RealFileSystem:
    """Production filesystem implementation.

    Wraps os, shutil, pathlib and glob operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: str) -> bool:
        """Check if anything exists at a path."""
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def is_readable(self, path: str) -> bool:
        """Check if an existing path is readable."""
        return os.access(path, os.R_OK)

    def is_writable(self, path: str) -> bool:
        """Check if an existing path is writable."""
        return os.access(path, os.W_OK)

    def read_bytes(self, path: str) -> bytes:
        """Read the whole content of a file."""
        return Path(path).read_bytes()

    def write_bytes(self, path: str, data: bytes, append: bool = False) -> None:
        """Write or append the whole content of a file."""
        with open(path, "ab" if append else "wb") as handle:
            handle.write(data)
        logger.debug("Wrote %d bytes to %s (append=%s)", len(data), path, append)

    def touch(self, path: str) -> None:
        """Create a file or update its modification time."""
        Path(path).touch(exist_ok=True)

    def rename(self, src: str, dst: str) -> None:
        """Move a file, copying it when the destination is on another filesystem."""
        shutil.move(src, dst)
        logger.debug("Moved %s to %s", src, dst)

    def unlink(self, path: str) -> None:
        """Remove a file."""
        os.unlink(path)
        logger.debug("Removed file %s", path)

    def mkdir(self, path: str, mode: int = 0o775, parents: bool = True) -> None:
        """Create a directory."""
        if parents:
            os.makedirs(path, mode=mode, exist_ok=True)
        else:
            os.mkdir(path, mode)
        logger.debug("Created directory %s", path)

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        os.rmdir(path)
        logger.debug("Removed directory %s", path)

    def glob(self, directory: str, pattern: str) -> list[str]:
        """List entries of a directory matching a brace-expansion glob."""
        base = _glob.escape(directory)
        matches: dict[str, None] = {}
        for alternative in expand_braces(pattern):
            for match in sorted(_glob.glob(os.path.join(base, alternative))):
                matches.setdefault(match, None)
        return list(matches)

    def get_mtime(self, path: str) -> float:
        """Last modification time."""
        return os.path.getmtime(path)

    def get_atime(self, path: str) -> float:
        """Last access time."""
        return os.path.getatime(path)

    def get_size(self, path: str) -> int:
        """Size of a file in bytes."""
        return os.path.getsize(path)
