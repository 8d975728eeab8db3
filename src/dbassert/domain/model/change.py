"""Changes observed on a table between a start point and an end point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dbassert.domain.model.enums import ChangeType
from dbassert.domain.model.table import check_index, index_of_column

if TYPE_CHECKING:
    from dbassert.domain.model.table import Row


@dataclass(frozen=True, slots=True)
class ColumnOfChange:
    name: str
    value_at_start_point: object
    value_at_end_point: object

    @property
    def is_modified(self) -> bool:
        return self.value_at_start_point != self.value_at_end_point


@dataclass(frozen=True, slots=True)
class Change:
    """One created, modified or deleted row.

    A creation has no row at start point, a deletion no row at end point.
    """

    table_name: str
    change_type: ChangeType
    columns_names: tuple[str, ...]
    row_at_start_point: Row | None = None
    row_at_end_point: Row | None = None

    @property
    def columns_count(self) -> int:
        return len(self.columns_names)

    def column_index(self, name: str) -> int:
        return index_of_column(self.columns_names, name)

    def column_of_change(self, index: int) -> ColumnOfChange:
        check_index(index, len(self.columns_names))
        start = self.row_at_start_point
        end = self.row_at_end_point
        return ColumnOfChange(
            name=self.columns_names[index],
            value_at_start_point=start.values[index] if start is not None else None,
            value_at_end_point=end.values[index] if end is not None else None,
        )

    def modified_columns_indexes(self) -> tuple[int, ...]:
        return tuple(
            index
            for index in range(len(self.columns_names))
            if self.column_of_change(index).is_modified
        )

    def modified_columns_names(self) -> tuple[str, ...]:
        return tuple(self.columns_names[index] for index in self.modified_columns_indexes())


__all__ = ["Change", "ColumnOfChange"]
