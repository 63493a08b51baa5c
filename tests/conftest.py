"""Shared test fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fsentity.config import FsSettings
from fsentity.context import FsContext, create_context, set_default_context
from fsentity.mime import MimeDetector
from fsentity.paths import PathResolver
from fsentity.types import OSFamily

# Permission bits are ignored for root, so read-only fixtures only work for other users
requires_non_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="permission checks always pass for root",
)


@pytest.fixture(autouse=True)
def reset_default_context(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Rebuild the default context for every test, without content sniffing."""
    monkeypatch.setenv("FSENTITY_SNIFF_MIME", "0")
    monkeypatch.delenv("FSENTITY_BASE_DIR", raising=False)
    monkeypatch.delenv("FSENTITY_OS", raising=False)
    set_default_context(None)
    yield
    set_default_context(None)


@pytest.fixture
def context(tmp_path: Path) -> FsContext:
    """Create a context resolving relative paths against tmp_path."""
    return create_context(
        FsSettings(base_dir=str(tmp_path), sniff_mime=False),
        mime=MimeDetector(sniffer=None),
    )


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create the tree root/{a.txt, sub1/{b.txt}, sub2/{c.txt}}."""
    root = tmp_path / "root"
    (root / "sub1").mkdir(parents=True)
    (root / "sub2").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub1" / "b.txt").write_text("b")
    (root / "sub2" / "c.txt").write_text("c")
    return root


# ============================================================================
# Mock FileSystem Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    fs.is_readable.return_value = False
    fs.is_writable.return_value = False
    fs.read_bytes.return_value = b""
    fs.glob.return_value = []
    return fs


@pytest.fixture
def fake_tree() -> Callable[..., MagicMock]:
    """Build a mock FileSystem describing a fixed set of paths.

    Directory paths are given without their trailing separator.
    """

    def build(
        dirs: set[str] = frozenset(),
        files: set[str] = frozenset(),
        writable: set[str] = frozenset(),
    ) -> MagicMock:
        def norm(path: str) -> str:
            return path.rstrip("/") or "/"

        fs = MagicMock()
        fs.exists.side_effect = lambda p: norm(p) in dirs or norm(p) in files
        fs.is_dir.side_effect = lambda p: norm(p) in dirs
        fs.is_file.side_effect = lambda p: norm(p) in files
        fs.is_readable.side_effect = lambda p: norm(p) in dirs or norm(p) in files
        fs.is_writable.side_effect = lambda p: norm(p) in writable
        return fs

    return build


@pytest.fixture
def mock_context(mock_filesystem: MagicMock) -> FsContext:
    """Create a Unix context backed by the mock filesystem."""
    return FsContext(
        resolver=PathResolver(base_dir="/work", os_family=OSFamily.UNIX),
        filesystem=mock_filesystem,
        mime=MagicMock(),
    )
