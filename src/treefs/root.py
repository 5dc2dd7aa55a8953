"""Entry point for building paths and nodes from strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treefs.base import default_filesystem
from treefs.directory import DEFAULT_MODE, Directory
from treefs.file import File
from treefs.nodes import Node, classify
from treefs.paths import PosixPath

if TYPE_CHECKING:
    from treefs.protocols import FileSystem

__all__ = ["PosixFilesystem"]


class PosixFilesystem:
    """Builds PosixPath values and nodes for a POSIX filesystem."""

    def __init__(self, filesystem: FileSystem | None = None, mode: int = DEFAULT_MODE) -> None:
        """Initialize the root accessor.

        Args:
            filesystem: OS primitives handed to every node created here.
            mode: Creation mode for Directory nodes created here.
        """
        self.filesystem = filesystem or default_filesystem()
        self.mode = mode

    def get_path(self, text: str) -> PosixPath:
        """Parse a path string without resolving it."""
        return PosixPath.from_string(text)

    def get_current_directory_path(self) -> PosixPath:
        """Return the current working directory.

        Raises:
            OperationError: If the working directory cannot be determined.
        """
        return PosixPath.from_string(self.filesystem.getcwd())

    def resolve(self, text: str) -> PosixPath:
        """Parse a path string, anchoring relative ones at the cwd."""
        path = self.get_path(text)
        if path.is_absolute():
            return path
        return self.get_current_directory_path().add(path.to_string())

    def get_directory(self, text: str) -> Directory:
        return Directory(self.resolve(text), self.filesystem, mode=self.mode)

    def get_file(self, text: str) -> File:
        return File(self.resolve(text), self.filesystem)

    def get_node(self, text: str) -> Node:
        """Resolve a path string and classify what is there."""
        return classify(self.resolve(text), self.filesystem, mode=self.mode)
