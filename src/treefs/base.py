"""Behaviour shared by Directory and File."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treefs.errors import DestinationOccupiedError, NothingToMoveError

if TYPE_CHECKING:
    from treefs.protocols import FileSystem, Path


def default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from treefs.filesystem import RealFileSystem

    return RealFileSystem()


class BoundNode:
    """A node bound to a path.

    Constructing a node performs no OS access. The bound path changes only
    through a successful ``move``.
    """

    def __init__(self, path: Path, filesystem: FileSystem | None = None) -> None:
        self._path = path
        self._filesystem = filesystem or default_filesystem()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def filesystem(self) -> FileSystem:
        return self._filesystem

    def get_path(self) -> Path:
        return self._path

    def move(self, new_path: Path) -> None:
        """Move the entry to ``new_path`` and rebind this node to it.

        A dangling symlink counts as nothing to move but as an occupied
        destination. The existence checks are advisory: the entry can
        still change between the checks and the rename.

        Args:
            new_path: Destination path. Must not exist.

        Raises:
            NothingToMoveError: If nothing is at the current path.
            DestinationOccupiedError: If something is at ``new_path``.
            OperationError: If the rename fails.
        """
        old_string = self._path.to_string()
        new_string = new_path.to_string()

        if not self._filesystem.exists_followed(old_string):
            raise NothingToMoveError(self._path)

        if self._filesystem.exists(new_string):
            raise DestinationOccupiedError(new_path)

        self._filesystem.rename(old_string, new_string)
        self._path = new_path

    def get_modified_time(self) -> int:
        """Return the last modification time in seconds since the epoch.

        Raises:
            OperationError: If the path cannot be queried.
        """
        return self._filesystem.mtime(self._path.to_string())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._path.to_string()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path.to_string()!r})"
