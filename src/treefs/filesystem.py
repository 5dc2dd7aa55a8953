"""Wrapped OS primitives.

This module provides the only place where treefs touches the operating
system. Each RealFileSystem method runs one primitive inside an error
scope and either returns the requested value or raises OperationError.
Nodes receive a FileSystem through their constructor, so tests can
substitute a double.
"""

from __future__ import annotations

import logging
import os

from treefs.scope import error_scope

logger = logging.getLogger(__name__)

__all__ = ["RealFileSystem"]


class RealFileSystem:
    """Production filesystem implementation.

    Wraps ``os`` primitives. Paths are passed as strings.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: str) -> bool:
        """Check if anything, including a dangling symlink, is at a path."""
        return os.path.lexists(path)

    def exists_followed(self, path: str) -> bool:
        """Check if a path exists after following symlinks.

        A dangling symlink does not count.
        """
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def scandir(self, path: str) -> list[str]:
        """List entry names of a directory in OS enumeration order."""
        logger.debug("Scanning %s", path)
        names = []
        with error_scope("scandir", path):
            with os.scandir(path) as entries:
                for entry in entries:
                    if entry.name in (".", ".."):
                        continue
                    names.append(entry.name)
        return names

    def mkdir(self, path: str, mode: int) -> None:
        """Create a directory and any missing parents."""
        logger.debug("Creating directory %s (mode %o)", path, mode)
        with error_scope("mkdir", path, mode, True):
            os.makedirs(path, mode)

    def rename(self, old_path: str, new_path: str) -> None:
        """Move an entry to a new location."""
        logger.debug("Renaming %s to %s", old_path, new_path)
        with error_scope("rename", old_path, new_path):
            os.rename(old_path, new_path)

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        logger.debug("Removing directory %s", path)
        with error_scope("rmdir", path):
            os.rmdir(path)

    def unlink(self, path: str) -> None:
        """Remove a non-directory entry."""
        logger.debug("Removing file %s", path)
        with error_scope("unlink", path):
            os.unlink(path)

    def mtime(self, path: str) -> int:
        """Last modification time in whole seconds since the epoch."""
        with error_scope("filemtime", path) as guard:
            seconds = os.stat(path).st_mtime_ns // 1_000_000_000
            return guard.check(seconds, int)

    def getcwd(self) -> str:
        """Current working directory."""
        with error_scope("getcwd") as guard:
            return guard.check(os.getcwd(), str)
