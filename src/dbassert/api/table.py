"""Assertions navigating a table: the table, its rows, its columns."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from dbassert.api.navigation import Cursor, Described, PositionCache, TypeShortcuts
from dbassert.api.value import ColumnValueAssert, RowValueAssert
from dbassert.domain.diagnostics import SizeMismatch, error_for
from dbassert.domain.equality import values_are_of_any_type, values_equal

if TYPE_CHECKING:
    from dbassert.domain.model.enums import ValueType
    from dbassert.domain.model.table import Column, Row, Table


def _check_size(actual: int, expected: int, *, subject: str, description: str) -> None:
    if actual != expected:
        raise error_for(
            SizeMismatch(actual=actual, expected=expected, subject=subject, description=description)
        )


class RowAssert(Described):
    """Assertions on the values of one row."""

    def __init__(self, row: Row, description: str) -> None:
        super().__init__(description)
        self.row = row
        self._values = Cursor(len(row))

    def reset(self) -> None:
        self._values.rewind()

    def value(self, index_or_name: int | str | None = None) -> RowValueAssert[Self]:
        """Value at a position, of a column, or following the last value asked."""

        if isinstance(index_or_name, str):
            index_or_name = self.row.index_of(index_or_name)
        index = self._values.take(index_or_name)
        return RowValueAssert(
            self, self.row.value_at(index), f"Value at index {index} of {self.description}"
        )

    def has_columns_size(self, expected: int) -> Self:
        _check_size(len(self.row), expected, subject="columns", description=self.description)
        return self

    def has_values(self, *expected: object) -> Self:
        values_equal(self.row.values, expected, subject="columns", description=self.description)
        return self


class TableRowAssert(RowAssert):
    def __init__(self, origin: TableAssert, row: Row, description: str) -> None:
        super().__init__(row, description)
        self._origin = origin

    def return_to_table(self) -> TableAssert:
        return self._origin


class ColumnAssert(TypeShortcuts, Described):
    """Assertions on the values of one column of a table."""

    def __init__(self, origin: TableAssert, column: Column, description: str) -> None:
        super().__init__(description)
        self._origin = origin
        self.column = column
        self._values = Cursor(len(column))

    def reset(self) -> None:
        self._values.rewind()

    def value(self, index: int | None = None) -> ColumnValueAssert[Self]:
        index = self._values.take(index)
        return ColumnValueAssert(
            self, self.column.value_at(index), f"Value at index {index} of {self.description}"
        )

    def has_rows_size(self, expected: int) -> Self:
        _check_size(len(self.column), expected, subject="rows", description=self.description)
        return self

    def has_values(self, *expected: object) -> Self:
        values_equal(self.column.values, expected, subject="rows", description=self.description)
        return self

    def is_of_type(self, value_type: ValueType) -> Self:
        return self.is_of_any_type(value_type)

    def is_of_any_type(self, *value_types: ValueType) -> Self:
        values_are_of_any_type(self.column.values, value_types, description=self.description)
        return self

    def return_to_table(self) -> TableAssert:
        return self._origin


class TableAssert(Described):
    """Entry point on a table snapshot.

    Rows and columns are reached by position (or by name for columns). Asking
    again for the same position returns the same handle, with its own value
    cursor rewound; asking without a position moves to the next one.
    """

    def __init__(self, table: Table, description: str | None = None) -> None:
        super().__init__(description or f"{table.name} table")
        self.table = table
        self._rows = PositionCache(table.rows_count, self._build_row)
        self._columns = PositionCache(table.columns_count, self._build_column)

    def _build_row(self, index: int) -> TableRowAssert:
        return TableRowAssert(
            self, self.table.row(index), f"Row at index {index} of {self.description}"
        )

    def _build_column(self, index: int) -> ColumnAssert:
        return ColumnAssert(
            self,
            self.table.column(index),
            f"Column at index {index} of {self.description}",
        )

    def has_rows_size(self, expected: int) -> Self:
        _check_size(self.table.rows_count, expected, subject="rows", description=self.description)
        return self

    def has_columns_size(self, expected: int) -> Self:
        _check_size(
            self.table.columns_count, expected, subject="columns", description=self.description
        )
        return self

    def row(self, index: int | None = None) -> TableRowAssert:
        return self._rows.at(index)

    def column(self, index_or_name: int | str | None = None) -> ColumnAssert:
        if isinstance(index_or_name, str):
            index_or_name = self.table.column_index(index_or_name)
        return self._columns.at(index_or_name)


__all__ = ["ColumnAssert", "RowAssert", "TableAssert", "TableRowAssert"]
