"""Immutable snapshots of tabular data: tables, rows and columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dbassert.domain.errors import IndexOutOfRangeError, UnknownColumnError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def check_index(index: int, size: int) -> int:
    if index < 0 or index >= size:
        raise IndexOutOfRangeError(f"Index {index} out of the limits [0, {size}[")
    return index


def index_of_column(columns_names: Sequence[str], name: str) -> int:
    """Case-insensitive lookup of a column name."""

    if name is None:
        raise UnknownColumnError("Column name must not be None")
    wanted = name.casefold()
    for index, candidate in enumerate(columns_names):
        if candidate.casefold() == wanted:
            return index
    raise UnknownColumnError(f"Column <{name}> does not exist")


@dataclass(frozen=True, slots=True)
class Row:
    columns_names: tuple[str, ...]
    values: tuple[object, ...]

    def __post_init__(self) -> None:
        if len(self.columns_names) != len(self.values):
            raise ValueError(
                f"Row has {len(self.values)} values for {len(self.columns_names)} columns"
            )

    def __len__(self) -> int:
        return len(self.values)

    def index_of(self, name: str) -> int:
        return index_of_column(self.columns_names, name)

    def value_at(self, index: int) -> object:
        return self.values[check_index(index, len(self.values))]

    def value(self, name: str) -> object:
        return self.values[self.index_of(name)]


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    values: tuple[object, ...]

    def __len__(self) -> int:
        return len(self.values)

    def value_at(self, index: int) -> object:
        return self.values[check_index(index, len(self.values))]


@dataclass(frozen=True, slots=True)
class Table:
    """Rows read from a source, in source order (primary key order for tables)."""

    name: str
    columns_names: tuple[str, ...]
    rows: tuple[Row, ...] = ()
    primary_keys: tuple[str, ...] = ()

    @classmethod
    def from_records(
        cls,
        name: str,
        columns_names: Sequence[str],
        records: Iterable[Sequence[object]],
        *,
        primary_keys: Sequence[str] = (),
    ) -> Table:
        names = tuple(columns_names)
        rows = tuple(Row(names, tuple(record)) for record in records)
        return cls(name=name, columns_names=names, rows=rows, primary_keys=tuple(primary_keys))

    @property
    def rows_count(self) -> int:
        return len(self.rows)

    @property
    def columns_count(self) -> int:
        return len(self.columns_names)

    def row(self, index: int) -> Row:
        return self.rows[check_index(index, len(self.rows))]

    def column_index(self, name: str) -> int:
        return index_of_column(self.columns_names, name)

    def column(self, index: int) -> Column:
        check_index(index, len(self.columns_names))
        return Column(self.columns_names[index], tuple(row.values[index] for row in self.rows))

    def primary_key_of(self, row: Row) -> tuple[object, ...]:
        return tuple(row.value(name) for name in self.primary_keys)


__all__ = ["Column", "Row", "Table", "check_index", "index_of_column"]
