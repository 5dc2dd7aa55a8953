"""Exception types raised by filesystem nodes."""

from __future__ import annotations

from typing import Any

__all__ = [
    "DestinationOccupiedError",
    "FilesystemError",
    "NothingToMoveError",
    "OperationError",
    "PreconditionError",
    "TranslatedWarning",
]


class FilesystemError(Exception):
    """Base class for all treefs errors."""

    pass


class OperationError(FilesystemError):
    """An OS primitive failed.

    Attributes:
        operation: Name of the primitive (e.g. ``"rename"``).
        arguments: Snapshot of the arguments it was called with.
        result: The unexpected value observed instead of success. For
            failures reported through ``OSError`` this is the exception.
    """

    def __init__(self, operation: str, arguments: tuple[Any, ...] | list[Any], result: Any) -> None:
        self.operation = operation
        self.arguments = tuple(arguments)
        self.result = result
        super().__init__(self._describe())

    def _describe(self) -> str:
        call = ", ".join(repr(a) for a in self.arguments)
        return f"{self.operation}({call}) failed: {self.result!r}"


class TranslatedWarning(OperationError):
    """A warning emitted by a guarded call, escalated to an error."""

    pass


class PreconditionError(FilesystemError):
    """A check performed before any OS call failed."""

    def __init__(self, message: str, path: Any) -> None:
        self.path = path
        super().__init__(message)


class NothingToMoveError(PreconditionError):
    """The source of a move does not exist."""

    def __init__(self, path: Any) -> None:
        super().__init__(f"There is nothing to move at {path}", path)


class DestinationOccupiedError(PreconditionError):
    """The destination of a move already exists."""

    def __init__(self, path: Any) -> None:
        super().__init__(f"There is already something at the destination {path}", path)

