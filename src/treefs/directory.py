"""Directory nodes: listing, creation, move and recursive deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, overload

from treefs.base import BoundNode

if TYPE_CHECKING:
    from treefs.nodes import Node
    from treefs.protocols import FileSystem, Path

__all__ = ["DEFAULT_MODE", "Directory"]

# Creation mode for write(), subject to the process umask
DEFAULT_MODE = 0o777


class Directory(BoundNode):
    """A directory bound to a path.

    Nothing is cached: every call hits the filesystem.
    """

    def __init__(
        self,
        path: Path,
        filesystem: FileSystem | None = None,
        mode: int = DEFAULT_MODE,
    ) -> None:
        """Initialize the node.

        Args:
            path: Location of the directory.
            filesystem: OS primitives. Defaults to RealFileSystem.
            mode: Creation mode used by write().
        """
        super().__init__(path, filesystem)
        self.mode = mode

    def exists(self) -> bool:
        return self._filesystem.is_dir(self._path.to_string())

    @overload
    def read(self, as_objects: Literal[True] = ...) -> list[Node]: ...

    @overload
    def read(self, as_objects: Literal[False]) -> list[str]: ...

    def read(self, as_objects: bool = True) -> list[Node] | list[str]:
        """List the immediate children.

        Args:
            as_objects: Return Directory/File nodes instead of names.

        Returns:
            Children in OS enumeration order, unsorted. Each node is newly
            constructed and classified at call time.

        Raises:
            OperationError: If the directory cannot be opened or read.
        """
        names = self._filesystem.scandir(self._path.to_string())

        if not as_objects:
            return names

        return [self._child(name) for name in names]

    def _child(self, name: str) -> Node:
        from treefs.nodes import classify

        return classify(self._path.add(name), self._filesystem, mode=self.mode)

    def write(self) -> None:
        """Create the directory and any missing parents.

        Does nothing if the directory already exists.

        Raises:
            OperationError: If creation fails.
        """
        path = self._path.to_string()

        if self._filesystem.is_dir(path):
            return

        self._filesystem.mkdir(path, self.mode)

    def delete(self) -> None:
        """Remove the directory and everything beneath it.

        Does nothing if nothing exists at the path, following symlinks.
        Children are deleted depth-first in enumeration order, then the
        directory itself. The first failure propagates at once; whatever
        was not yet deleted stays in place.

        Raises:
            OperationError: If any entry cannot be removed.
        """
        path = self._path.to_string()

        if not self._filesystem.exists_followed(path):
            return

        for child in self.read():
            child.delete()

        self._filesystem.rmdir(path)
