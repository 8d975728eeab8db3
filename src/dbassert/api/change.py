"""Assertions navigating the changes recorded between two points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from dbassert.api.navigation import Described, PositionCache, TypeShortcuts
from dbassert.api.table import RowAssert
from dbassert.api.value import ColumnValueAssert
from dbassert.domain.diagnostics import (
    ChangeTypeMismatch,
    ModifiedColumnsMismatch,
    Point,
    SizeMismatch,
    UnexpectedEquality,
    ValueMismatch,
    error_for,
)
from dbassert.domain.equality import value_is_of_any_type, values_equal_at_points
from dbassert.domain.errors import DbAssertError
from dbassert.domain.model.enums import ChangeType, ValueType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dbassert.domain.model.change import Change, ColumnOfChange
    from dbassert.domain.model.table import Row


class ChangeRowAssert(RowAssert):
    def __init__(self, origin: ChangeAssert, row: Row, description: str) -> None:
        super().__init__(row, description)
        self._origin = origin

    def return_to_change(self) -> ChangeAssert:
        return self._origin


class ColumnOfChangeAssert(TypeShortcuts, Described):
    """Assertions on one column of a change, at start point and at end point."""

    def __init__(self, origin: ChangeAssert, column: ColumnOfChange, description: str) -> None:
        super().__init__(description)
        self._origin = origin
        self.column = column

    def has_values(self, expected_start: object, expected_end: object) -> Self:
        values_equal_at_points(
            self.column.value_at_start_point,
            self.column.value_at_end_point,
            expected_start,
            expected_end,
            description=self.description,
        )
        return self

    def is_of_type(self, value_type: ValueType) -> Self:
        return self.is_of_any_type(value_type)

    def is_of_any_type(self, *value_types: ValueType) -> Self:
        for point, value in (
            (Point.START, self.column.value_at_start_point),
            (Point.END, self.column.value_at_end_point),
        ):
            value_is_of_any_type(value, value_types, position=point, description=self.description)
        return self

    def is_modified(self) -> Self:
        if not self.column.is_modified:
            raise error_for(
                UnexpectedEquality(
                    actual=self.column.value_at_end_point,
                    expected=self.column.value_at_start_point,
                    position=Point.END,
                    description=self.description,
                )
            )
        return self

    def is_not_modified(self) -> Self:
        if self.column.is_modified:
            raise error_for(
                ValueMismatch(
                    actual=self.column.value_at_end_point,
                    expected=self.column.value_at_start_point,
                    position=Point.END,
                    description=self.description,
                )
            )
        return self

    def value_at_start_point(self) -> ColumnValueAssert[Self]:
        return ColumnValueAssert(
            self, self.column.value_at_start_point, f"Value at start point of {self.description}"
        )

    def value_at_end_point(self) -> ColumnValueAssert[Self]:
        return ColumnValueAssert(
            self, self.column.value_at_end_point, f"Value at end point of {self.description}"
        )

    def return_to_change(self) -> ChangeAssert:
        return self._origin


class ChangeAssert(Described):
    """Assertions on one change: its kind, its rows and its columns."""

    def __init__(self, origin: ChangesAssert, change: Change, description: str) -> None:
        super().__init__(description)
        self._origin = origin
        self.change = change
        self._columns = PositionCache(change.columns_count, self._build_column)

    def reset(self) -> None:
        self._columns.next_index = 0

    def _build_column(self, index: int) -> ColumnOfChangeAssert:
        return ColumnOfChangeAssert(
            self,
            self.change.column_of_change(index),
            f"Column at index {index} of {self.description}",
        )

    def _is_of_change_type(self, expected: ChangeType) -> Self:
        if self.change.change_type is not expected:
            raise error_for(
                ChangeTypeMismatch(
                    actual=self.change.change_type,
                    expected=expected,
                    description=self.description,
                )
            )
        return self

    def is_creation(self) -> Self:
        return self._is_of_change_type(ChangeType.CREATION)

    def is_modification(self) -> Self:
        return self._is_of_change_type(ChangeType.MODIFICATION)

    def is_deletion(self) -> Self:
        return self._is_of_change_type(ChangeType.DELETION)

    def has_number_of_modified_columns(self, expected: int) -> Self:
        actual = len(self.change.modified_columns_indexes())
        if actual != expected:
            raise error_for(
                SizeMismatch(
                    actual=actual,
                    expected=expected,
                    subject="modified columns",
                    description=self.description,
                )
            )
        return self

    def has_modified_columns(self, *indexes_or_names: int | str) -> Self:
        """Compare the modified columns, given either all by index or all by name.

        The order does not matter and names are compared case-insensitively.
        """

        if all(isinstance(item, int) for item in indexes_or_names):
            actual: tuple[object, ...] = self.change.modified_columns_indexes()
            wanted: tuple[object, ...] = tuple(sorted(indexes_or_names))  # type: ignore[type-var]
        elif all(isinstance(item, str) for item in indexes_or_names):
            actual = self.change.modified_columns_names()
            names = self.change.columns_names
            indexes = sorted(self.change.column_index(str(name)) for name in indexes_or_names)
            wanted = tuple(names[index] for index in indexes)
        else:
            raise DbAssertError("Modified columns must be given all by index or all by name")
        if actual != wanted:
            raise error_for(
                ModifiedColumnsMismatch(
                    actual=actual,
                    expected=indexes_or_names,
                    description=self.description,
                )
            )
        return self

    def _row_at(self, point: Point, row: Row | None) -> ChangeRowAssert:
        if row is None:
            raise DbAssertError(f"No row at {point} for a {self.change.change_type.lower()}")
        return ChangeRowAssert(self, row, f"Row at {point} of {self.description}")

    def row_at_start_point(self) -> ChangeRowAssert:
        return self._row_at(Point.START, self.change.row_at_start_point)

    def row_at_end_point(self) -> ChangeRowAssert:
        return self._row_at(Point.END, self.change.row_at_end_point)

    def column(self, index_or_name: int | str | None = None) -> ColumnOfChangeAssert:
        if isinstance(index_or_name, str):
            index_or_name = self.change.column_index(index_or_name)
        return self._columns.at(index_or_name)

    def return_to_changes(self) -> ChangesAssert:
        return self._origin


class ChangesAssert(Described):
    """Entry point on the changes recorded between a start point and an end point."""

    def __init__(self, changes: Sequence[Change], description: str | None = None) -> None:
        super().__init__(description or "Changes")
        self.changes = tuple(changes)
        self._changes = PositionCache(len(self.changes), self._build_change)

    def _build_change(self, index: int) -> ChangeAssert:
        change = self.changes[index]
        return ChangeAssert(
            self,
            change,
            f"Change at index {index} (on table : {change.table_name}) of {self.description}",
        )

    def has_number_of_changes(self, expected: int) -> Self:
        if len(self.changes) != expected:
            raise error_for(
                SizeMismatch(
                    actual=len(self.changes),
                    expected=expected,
                    subject="changes",
                    description=self.description,
                )
            )
        return self

    def change(self, index: int | None = None) -> ChangeAssert:
        return self._changes.at(index)


__all__ = ["ChangeAssert", "ChangeRowAssert", "ChangesAssert", "ColumnOfChangeAssert"]
