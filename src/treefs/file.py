"""Leaf filesystem node."""

from __future__ import annotations

from treefs.base import BoundNode

__all__ = ["File"]


class File(BoundNode):
    """A non-directory entry: regular file, device, socket or symlink."""

    def exists(self) -> bool:
        path = self._path.to_string()
        return self._filesystem.exists(path) and not self._filesystem.is_dir(path)

    def delete(self) -> None:
        """Remove the entry. Does nothing if nothing is at the path.

        Raises:
            OperationError: If the unlink fails.
        """
        path = self._path.to_string()

        if not self._filesystem.exists(path):
            return

        self._filesystem.unlink(path)
