"""Error hierarchy shared by the value engine, the sources and the assertion API.

There are two families:

- ``DbAssertError`` signals that a check is ill-posed (bad literal, unknown column,
  values that cannot be compared at all).
- ``DbAssertionError`` signals that a well-posed check failed. It carries the
  structured failure payload next to its rendered message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbassert.domain.diagnostics import Failure


class DbAssertError(Exception):
    """Raised when a comparison or a navigation step cannot be performed."""


class ParseError(DbAssertError, ValueError):
    """Raised when a textual temporal or numeric literal is malformed."""


class NullValueError(DbAssertError, ValueError):
    """Raised when a non-nullable construction path receives ``None``."""


class IncomparableError(DbAssertError):
    """Raised when an expected value cannot be interpreted against the actual value."""


class IndexOutOfRangeError(DbAssertError, IndexError):
    """Raised when a row, column or change index is outside of the available range."""


class UnknownColumnError(DbAssertError, LookupError):
    """Raised when a column name does not exist."""


class DbAssertionError(AssertionError):
    """Base class of assertion failures; ``failure`` holds the structured payload."""

    def __init__(self, failure: Failure, message: str) -> None:
        super().__init__(message)
        self.failure = failure


class TypeMismatchError(DbAssertionError):
    """The actual value is not of an accepted type."""


class ValueMismatchError(DbAssertionError):
    """The values are comparable but (un)equal against the expectation."""


class SizeMismatchError(DbAssertionError):
    """Two sequences compared element-wise have different lengths."""


class NullActualError(DbAssertionError):
    """The actual value is ``None`` where a value is required."""


class ClassMismatchError(DbAssertionError):
    """The actual value is not an instance of the expected class."""


class ChronologyError(DbAssertionError):
    """The actual temporal value is not before/after the expected one."""


class ChangeMismatchError(DbAssertionError):
    """A change does not have the expected kind or modified columns."""
