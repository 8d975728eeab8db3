"""Classification of raw values into the :class:`ValueType` taxonomy."""

from __future__ import annotations

import datetime as dt
from functools import singledispatch
from numbers import Number
from typing import Final

from dbassert.domain.model.enums import ValueType
from dbassert.domain.model.temporal import DateTimeValue, DateValue, TimeValue

DATE_COMPARABLE_TYPES: Final[tuple[ValueType, ...]] = (
    ValueType.DATE,
    ValueType.DATE_TIME,
    ValueType.NOT_IDENTIFIED,
)
TIME_COMPARABLE_TYPES: Final[tuple[ValueType, ...]] = (
    ValueType.TIME,
    ValueType.NOT_IDENTIFIED,
)
TEXT_COMPARABLE_TYPES: Final[tuple[ValueType, ...]] = (
    ValueType.TEXT,
    ValueType.NUMBER,
    ValueType.DATE,
    ValueType.TIME,
    ValueType.DATE_TIME,
    ValueType.NOT_IDENTIFIED,
)
CHRONOLOGICAL_TYPES: Final[tuple[ValueType, ...]] = (
    ValueType.DATE,
    ValueType.TIME,
    ValueType.DATE_TIME,
    ValueType.NOT_IDENTIFIED,
)


@singledispatch
def classify(_value: object) -> ValueType:
    """Return the taxonomy tag of ``value``; unknown shapes and ``None`` are NOT_IDENTIFIED."""
    return ValueType.NOT_IDENTIFIED


@classify.register
def _(_value: bool) -> ValueType:  # noqa: FBT001
    return ValueType.BOOLEAN


@classify.register
def _(_value: Number) -> ValueType:
    return ValueType.NUMBER


@classify.register
def _(_value: str) -> ValueType:
    return ValueType.TEXT


@classify.register(bytes)
@classify.register(bytearray)
@classify.register(memoryview)
def _(_value: object) -> ValueType:
    return ValueType.BYTES


@classify.register(dt.date)
@classify.register(DateValue)
def _(_value: object) -> ValueType:
    return ValueType.DATE


@classify.register(dt.datetime)
@classify.register(DateTimeValue)
def _(_value: object) -> ValueType:
    return ValueType.DATE_TIME


@classify.register(dt.time)
@classify.register(TimeValue)
def _(_value: object) -> ValueType:
    return ValueType.TIME


def accepted_types_for(value_type: ValueType) -> tuple[ValueType, ...]:
    """Types an actual value may have to be compared with an expected value of ``value_type``."""

    if value_type is ValueType.TEXT:
        return TEXT_COMPARABLE_TYPES
    if value_type in (ValueType.DATE, ValueType.DATE_TIME):
        return DATE_COMPARABLE_TYPES
    if value_type is ValueType.TIME:
        return TIME_COMPARABLE_TYPES
    return (value_type, ValueType.NOT_IDENTIFIED)


__all__ = [
    "CHRONOLOGICAL_TYPES",
    "DATE_COMPARABLE_TYPES",
    "TEXT_COMPARABLE_TYPES",
    "TIME_COMPARABLE_TYPES",
    "accepted_types_for",
    "classify",
]
