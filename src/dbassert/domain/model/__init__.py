"""Public domain model surface."""

from __future__ import annotations

from dbassert.domain.model.change import Change, ColumnOfChange
from dbassert.domain.model.enums import ChangeType, ValueType
from dbassert.domain.model.table import Column, Row, Table
from dbassert.domain.model.temporal import DateTimeValue, DateValue, TemporalValue, TimeValue

__all__ = [  # noqa: RUF022
    # temporal values
    "DateValue",
    "TimeValue",
    "DateTimeValue",
    "TemporalValue",
    # tabular data
    "Table",
    "Row",
    "Column",
    # changes
    "Change",
    "ColumnOfChange",
    # enums
    "ChangeType",
    "ValueType",
]
