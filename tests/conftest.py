"""Shared test fixtures."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from treefs.filesystem import RealFileSystem


@pytest.fixture
def fs() -> RealFileSystem:
    """Real OS primitives."""
    return RealFileSystem()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree.

    Layout::

        root/
            a.txt
            sub/
                b.txt
                deeper/
            empty/
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.exists_followed.return_value = False
    fs.is_dir.return_value = False
    fs.scandir.return_value = []
    return fs


@pytest.fixture
def tree_filesystem(mock_filesystem: MagicMock):
    """Mock filesystem backed by a dict of directory path -> entry names.

    Returns a function that installs the given tree and returns the mock.
    Paths not listed as directories but named as entries are files.
    """

    def install(tree: dict[str, list[str]]) -> MagicMock:
        files = {f"{parent}/{name}" for parent, names in tree.items() for name in names}
        mock_filesystem.is_dir.side_effect = lambda p: p in tree
        mock_filesystem.exists.side_effect = lambda p: p in tree or p in files
        mock_filesystem.exists_followed.side_effect = mock_filesystem.exists.side_effect
        mock_filesystem.scandir.side_effect = lambda p: list(tree[p])
        return mock_filesystem

    return install


@pytest.fixture
def string_console() -> Console:
    """Rich console writing to a buffer wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=400, color_system=None)
