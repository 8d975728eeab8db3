"""Assertions on a single value of a row or a column."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from dbassert.api.navigation import Described, TypeShortcuts
from dbassert.domain.equality import (
    value_equals,
    value_is_after,
    value_is_before,
    value_is_not_null,
    value_is_of_any_type,
    value_is_of_class,
    value_is_of_type,
    value_not_equals,
)

if TYPE_CHECKING:
    from dbassert.domain.model.enums import ValueType


class ValueAssert(TypeShortcuts, Described):
    """Assertions on one raw value.

    Every assertion returns the handle itself so calls can be chained.
    """

    def __init__(self, value: object, description: str) -> None:
        super().__init__(description)
        self.value = value

    def is_equal_to(self, expected: object) -> Self:
        value_equals(self.value, expected, description=self.description)
        return self

    def is_not_equal_to(self, expected: object) -> Self:
        value_not_equals(self.value, expected, description=self.description)
        return self

    def is_of_type(self, value_type: ValueType) -> Self:
        value_is_of_type(self.value, value_type, description=self.description)
        return self

    def is_of_any_type(self, *value_types: ValueType) -> Self:
        value_is_of_any_type(self.value, value_types, description=self.description)
        return self

    def is_of_class(self, cls: type) -> Self:
        value_is_of_class(self.value, cls, description=self.description)
        return self

    def is_null(self) -> Self:
        value_equals(self.value, None, description=self.description)
        return self

    def is_not_null(self) -> Self:
        value_is_not_null(self.value, description=self.description)
        return self

    def is_zero(self) -> Self:
        self.is_number()
        value_equals(self.value, 0, description=self.description)
        return self

    def is_true(self) -> Self:
        self.is_boolean()
        value_equals(self.value, True, description=self.description)  # noqa: FBT003
        return self

    def is_false(self) -> Self:
        self.is_boolean()
        value_equals(self.value, False, description=self.description)  # noqa: FBT003
        return self

    def is_before(self, expected: object) -> Self:
        value_is_before(self.value, expected, description=self.description)
        return self

    def is_after(self, expected: object) -> Self:
        value_is_after(self.value, expected, description=self.description)
        return self


class RowValueAssert[R: Described](ValueAssert):
    """Value reached from a row."""

    def __init__(self, origin: R, value: object, description: str) -> None:
        super().__init__(value, description)
        self._origin = origin

    def return_to_row(self) -> R:
        return self._origin


class ColumnValueAssert[C: Described](ValueAssert):
    """Value reached from a column."""

    def __init__(self, origin: C, value: object, description: str) -> None:
        super().__init__(value, description)
        self._origin = origin

    def return_to_column(self) -> C:
        return self._origin


__all__ = ["ColumnValueAssert", "RowValueAssert", "ValueAssert"]
