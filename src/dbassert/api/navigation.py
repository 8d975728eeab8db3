"""Building blocks shared by the assertion handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from dbassert.domain.model.enums import ValueType
from dbassert.domain.model.table import check_index

if TYPE_CHECKING:
    from collections.abc import Callable


class Described:
    """Handle carrying the description that prefixes its failure messages."""

    def __init__(self, description: str) -> None:
        self.description = description

    def described_as(self, description: str) -> Self:
        self.description = description
        return self

    def reset(self) -> None:
        """Rewind the navigation cursors of the handle (no-op by default)."""


class TypeShortcuts:
    """Shortcuts of ``is_of_type``, one per value type."""

    def is_of_type(self, value_type: ValueType) -> Self:
        raise NotImplementedError

    def is_boolean(self) -> Self:
        return self.is_of_type(ValueType.BOOLEAN)

    def is_text(self) -> Self:
        return self.is_of_type(ValueType.TEXT)

    def is_number(self) -> Self:
        return self.is_of_type(ValueType.NUMBER)

    def is_date(self) -> Self:
        return self.is_of_type(ValueType.DATE)

    def is_time(self) -> Self:
        return self.is_of_type(ValueType.TIME)

    def is_date_time(self) -> Self:
        return self.is_of_type(ValueType.DATE_TIME)

    def is_bytes(self) -> Self:
        return self.is_of_type(ValueType.BYTES)


class PositionCache[T: Described]:
    """Handles built by position, reused when the same position is asked again.

    Asking without a position returns the handle following the last one returned.
    """

    def __init__(self, size: int, build: Callable[[int], T]) -> None:
        self.size = size
        self._build = build
        self._handles: dict[int, T] = {}
        self.next_index = 0

    def at(self, index: int | None = None) -> T:
        if index is None:
            index = self.next_index
        check_index(index, self.size)
        handle = self._handles.get(index)
        if handle is None:
            handle = self._build(index)
            self._handles[index] = handle
        else:
            handle.reset()
        self.next_index = index + 1
        return handle


class Cursor:
    """Next-position cursor for handles that are rebuilt on each access."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.next_index = 0

    def take(self, index: int | None = None) -> int:
        if index is None:
            index = self.next_index
        check_index(index, self.size)
        self.next_index = index + 1
        return index

    def rewind(self) -> None:
        self.next_index = 0


__all__ = ["Cursor", "Described", "PositionCache", "TypeShortcuts"]
