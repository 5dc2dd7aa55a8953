"""Classification of paths into Directory or File nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from treefs.directory import DEFAULT_MODE, Directory
from treefs.file import File

if TYPE_CHECKING:
    from treefs.protocols import FileSystem, Path

__all__ = ["Node", "classify"]

Node = Union[Directory, File]


def classify(path: Path, filesystem: FileSystem | None = None, mode: int = DEFAULT_MODE) -> Node:
    """Wrap a path in the node type matching what is there now.

    Args:
        path: Location to classify.
        filesystem: OS primitives shared with the returned node.
        mode: Creation mode for a returned Directory.

    Returns:
        A Directory if the OS reports a directory at ``path``, otherwise a
        File (including when nothing exists there).
    """
    node = Directory(path, filesystem, mode=mode)
    if node.exists():
        return node
    return File(path, node.filesystem)
