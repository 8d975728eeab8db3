"""Fluent assertions on table snapshots and on recorded changes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

from dbassert.api.change import ChangeAssert, ChangesAssert, ColumnOfChangeAssert
from dbassert.api.table import ColumnAssert, RowAssert, TableAssert
from dbassert.api.value import ColumnValueAssert, RowValueAssert, ValueAssert
from dbassert.domain.model.change import Change
from dbassert.domain.model.table import Table


@overload
def assert_that(subject: Table) -> TableAssert: ...


@overload
def assert_that(subject: Sequence[Change]) -> ChangesAssert: ...


def assert_that(subject: Table | Sequence[Change]) -> TableAssert | ChangesAssert:
    """Start a chain of assertions on a table or on a sequence of changes."""

    if isinstance(subject, Table):
        return TableAssert(subject)
    if isinstance(subject, Sequence) and not isinstance(subject, str):
        return ChangesAssert(subject)
    msg = f"Cannot assert on {type(subject).__name__}"
    raise TypeError(msg)


__all__ = [
    "ChangeAssert",
    "ChangesAssert",
    "ColumnAssert",
    "ColumnOfChangeAssert",
    "ColumnValueAssert",
    "RowAssert",
    "RowValueAssert",
    "TableAssert",
    "ValueAssert",
    "assert_that",
]
