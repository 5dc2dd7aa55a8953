"""Typed, path-addressed directory and file nodes over the OS filesystem."""

__version__ = "0.1.0"

from treefs.directory import Directory
from treefs.errors import (
    DestinationOccupiedError,
    FilesystemError,
    NothingToMoveError,
    OperationError,
    PreconditionError,
    TranslatedWarning,
)
from treefs.file import File
from treefs.nodes import Node, classify
from treefs.paths import PosixPath
from treefs.protocols import FileSystem, FilesystemNode
from treefs.root import PosixFilesystem
from treefs.scope import error_scope

__all__ = [
    "__version__",
    "DestinationOccupiedError",
    "Directory",
    "File",
    "FileSystem",
    "FilesystemError",
    "FilesystemNode",
    "Node",
    "NothingToMoveError",
    "OperationError",
    "PosixFilesystem",
    "PosixPath",
    "PreconditionError",
    "TranslatedWarning",
    "classify",
    "error_scope",
]
