"""Tests for application context wiring."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from treefs.config import Settings
from treefs.context import AppContext, create_context
from treefs.filesystem import RealFileSystem


class TestAppContext:
    """Tests for AppContext."""

    def test_defaults(self) -> None:
        """Test default settings and real filesystem."""
        ctx = AppContext()

        assert isinstance(ctx.filesystem, RealFileSystem)
        assert ctx.root.filesystem is ctx.filesystem
        assert ctx.root.mode == 0o777

    def test_injected_dependencies(self, mock_filesystem: MagicMock) -> None:
        """Test injected settings and filesystem reach the root accessor."""
        ctx = AppContext(settings=Settings(directory_mode=0o700), filesystem=mock_filesystem)

        assert ctx.root.filesystem is mock_filesystem
        assert ctx.root.get_directory("/d").mode == 0o700


class TestCreateContext:
    """Tests for create_context factory."""

    def test_reads_config(self, tmp_path: Path) -> None:
        """Test the settings file drives the context."""
        path = tmp_path / "treefs.yaml"
        path.write_text("directoryMode: 0750\n")

        ctx = create_context(path)

        assert ctx.settings.directory_mode == 0o750
        assert ctx.root.mode == 0o750
        assert isinstance(ctx.filesystem, RealFileSystem)
