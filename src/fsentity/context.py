"""Entity context for dependency injection.

This module separates object creation from object use. Every entity holds a
context that provides its path resolver, its filesystem capability and its
MIME lookup. Entities derived from another entity (parents, listings, copy
destinations) share the context of the entity they came from.

Dependencies are typed using Protocols, so test doubles can be injected
without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fsentity.config import FsSettings
from fsentity.paths import PathResolver
from fsentity.protocols import FileSystem, MimeLookup


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fsentity.filesystem import RealFileSystem
    return RealFileSystem()


def _default_mime() -> MimeLookup:
    """Create the default MIME lookup."""
    from fsentity.mime import MimeDetector
    return MimeDetector.create()


@dataclass
class FsContext:
    """Container for entity dependencies."""

    resolver: PathResolver
    filesystem: FileSystem = field(default_factory=_default_filesystem)
    mime: MimeLookup = field(default_factory=_default_mime)
    settings: FsSettings = field(default_factory=FsSettings)


def create_context(
    settings: FsSettings | None = None,
    filesystem: FileSystem | None = None,
    mime: MimeLookup | None = None,
) -> FsContext:
    """Factory for entity dependencies.

    Args:
        settings: Settings to wire from. Defaults to the environment.
        filesystem: Override the filesystem capability (for testing).
        mime: Override the MIME lookup (for testing).

    Returns:
        Configured FsContext.
    """
    from fsentity.filesystem import RealFileSystem
    from fsentity.mime import MimeDetector

    settings = settings or FsSettings.from_env()
    resolver = PathResolver(base_dir=settings.base_dir, os_family=settings.os_family)

    return FsContext(
        resolver=resolver,
        filesystem=filesystem or RealFileSystem(),
        mime=mime or MimeDetector.create(sniff=settings.sniff_mime),
        settings=settings,
    )


_default_context: FsContext | None = None


def get_default_context() -> FsContext:
    """Get the context used by entities constructed without one.

    Created from the environment on first use.
    """
    global _default_context
    if _default_context is None:
        _default_context = create_context()
    return _default_context


def set_default_context(context: FsContext | None) -> None:
    """Replace the default context. None resets it to be rebuilt on next use."""
    global _default_context
    _default_context = context
