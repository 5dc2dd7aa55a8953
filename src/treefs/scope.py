"""Scoped translation of OS failures into typed errors.

Every fallible OS call runs inside ``error_scope``. While the scope is
active, warnings are escalated to exceptions and ``OSError`` is converted
to :class:`~treefs.errors.OperationError`, so callers never see a silent
sentinel or a stray warning. The scope is released by the ``with``
statement on every exit path and restores the warning filters it saved,
which makes nested scopes safe.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from treefs.errors import OperationError, TranslatedWarning

__all__ = ["ScopeGuard", "error_scope"]


class ScopeGuard:
    """Handle for an active error scope."""

    __slots__ = ("arguments", "operation")

    def __init__(self, operation: str, arguments: tuple[Any, ...]) -> None:
        self.operation = operation
        self.arguments = arguments

    def check(self, result: Any, expected: Any) -> Any:
        """Raise unless ``result`` is the expected success value.

        Args:
            result: Value returned by the guarded primitive.
            expected: Either a type the result must be an instance of, or
                the exact success value.

        Returns:
            The result, unchanged.

        Raises:
            OperationError: If the result signals failure.
        """
        if isinstance(expected, type):
            # bool is an int subclass but never a valid int result
            ok = isinstance(result, expected) and not (
                isinstance(result, bool) and expected is not bool
            )
        else:
            ok = result is expected or result == expected
        if not ok:
            raise OperationError(self.operation, self.arguments, result)
        return result


@contextmanager
def error_scope(operation: str, *arguments: Any) -> Iterator[ScopeGuard]:
    """Guard a single OS primitive.

    Args:
        operation: Name reported in errors raised from the scope.
        *arguments: Arguments of the guarded call, reported verbatim.

    Yields:
        A ScopeGuard for validating the primitive's return value.

    Raises:
        TranslatedWarning: If the guarded code emitted a warning.
        OperationError: If the guarded code raised ``OSError``.
    """
    guard = ScopeGuard(operation, arguments)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        try:
            yield guard
        except Warning as e:
            raise TranslatedWarning(operation, arguments, e) from e
        except OSError as e:
            raise OperationError(operation, arguments, e) from e
