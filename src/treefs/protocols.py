"""Protocol definitions for core abstractions.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Path(Protocol):
    """Protocol for immutable path values."""

    def to_string(self) -> str:
        """Render the path as a string."""
        ...

    def add(self, segment: str) -> Path:
        """Return a new path with a child segment appended.

        Args:
            segment: Relative path string to append.

        Returns:
            A new path. The receiver is unchanged.
        """
        ...


@runtime_checkable
class FilesystemNode(Protocol):
    """Protocol for path-addressed filesystem entries.

    Implemented by Directory and File.
    """

    @property
    def path(self) -> Path:
        """The last known location of the node."""
        ...

    def get_path(self) -> Path:
        """Return the bound path. Performs no OS access."""
        ...

    def exists(self) -> bool:
        """Check whether the node's kind of entry is at the bound path."""
        ...

    def move(self, new_path: Path) -> None:
        """Relocate the entry and rebind the node to the new path.

        Args:
            new_path: Destination. Must not exist.

        Raises:
            NothingToMoveError: If nothing is at the bound path.
            DestinationOccupiedError: If the destination exists.
            OperationError: If the rename fails.
        """
        ...

    def delete(self) -> None:
        """Remove the entry. Does nothing if it does not exist.

        Raises:
            OperationError: If removal fails.
        """
        ...

    def get_modified_time(self) -> int:
        """Return the last modification time in seconds since the epoch.

        Raises:
            OperationError: If the entry cannot be queried.
        """
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the wrapped OS primitives.

    Every method either returns its value or raises OperationError.
    Paths are strings.
    """

    def exists(self, path: str) -> bool:
        """Check if anything is at a path."""
        ...

    def exists_followed(self, path: str) -> bool:
        """Check if a path exists, following symlinks."""
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        ...

    def scandir(self, path: str) -> list[str]:
        """List entry names, excluding '.' and '..'.

        Args:
            path: Directory to list.

        Returns:
            Names in OS enumeration order.
        """
        ...

    def mkdir(self, path: str, mode: int) -> None:
        """Create a directory and its missing parents.

        Args:
            path: Directory to create.
            mode: Creation mode, subject to the umask.
        """
        ...

    def rename(self, old_path: str, new_path: str) -> None:
        """Move an entry."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a non-directory entry."""
        ...

    def mtime(self, path: str) -> int:
        """Return the modification time in whole seconds."""
        ...

    def getcwd(self) -> str:
        """Return the current working directory."""
        ...
