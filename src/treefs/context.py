"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from treefs.base import default_filesystem
from treefs.config import Settings, load_settings
from treefs.protocols import FileSystem
from treefs.root import PosixFilesystem


@dataclass
class AppContext:
    """Container for application dependencies.

    The filesystem is typed using the FileSystem Protocol, so test doubles
    can be injected without inheritance.
    """

    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem = field(default_factory=default_filesystem)
    root: PosixFilesystem = field(init=False)

    def __post_init__(self) -> None:
        self.root = PosixFilesystem(self.filesystem, mode=self.settings.directory_mode)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        config_path: Override the settings file (for testing).

    Returns:
        Configured AppContext.
    """
    from treefs.filesystem import RealFileSystem

    return AppContext(settings=load_settings(config_path), filesystem=RealFileSystem())
