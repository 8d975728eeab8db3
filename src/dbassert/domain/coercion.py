"""Conversions used to compare values of different runtime representations."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Final

from dbassert.domain.classification import classify
from dbassert.domain.errors import IncomparableError, ParseError
from dbassert.domain.model.enums import ValueType
from dbassert.domain.model.temporal import DateTimeValue, DateValue, TimeValue

if TYPE_CHECKING:
    from collections.abc import Callable


def parse_number(text: str) -> Decimal:
    """Parse a finite decimal number, ignoring surrounding blanks."""

    if "_" in text:
        raise ParseError(f"{text!r} is not a valid number")
    try:
        number = Decimal(text.strip())
    except InvalidOperation as exc:
        raise ParseError(f"{text!r} is not a valid number") from exc
    if not number.is_finite():
        raise ParseError(f"{text!r} is not a valid number")
    return number


def as_decimal(value: object) -> Decimal | None:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def numbers_equal(actual: object, expected: object) -> bool:
    """Compare two numbers by value, whatever their width or representation."""

    left = as_decimal(actual)
    right = as_decimal(expected)
    if left is None or right is None:
        return actual == expected
    return left == right


def as_date_value(value: object) -> DateValue:
    if isinstance(value, DateValue):
        return value
    if isinstance(value, DateTimeValue):
        return value.date
    if isinstance(value, dt.date):
        return DateValue.from_native(value)
    raise IncomparableError(f"<{value!r}> is not a date")


def as_time_value(value: object) -> TimeValue:
    if isinstance(value, TimeValue):
        return value
    if isinstance(value, dt.time):
        return TimeValue.from_native(value)
    raise IncomparableError(f"<{value!r}> is not a time")


def as_date_time_value(value: object) -> DateTimeValue:
    if isinstance(value, DateTimeValue):
        return value
    if isinstance(value, DateValue):
        return DateTimeValue.of(value)
    if isinstance(value, dt.date):
        return DateTimeValue.from_native(value)
    raise IncomparableError(f"<{value!r}> is not a date/time")


def text_of(value: object) -> str | None:
    """Textual form of an actual value, as used when comparing it with text."""

    match classify(value):
        case ValueType.NOT_IDENTIFIED:
            return None if value is None else str(value)
        case ValueType.TEXT:
            return str(value)
        case ValueType.DATE:
            return str(as_date_value(value))
        case ValueType.TIME:
            return str(as_time_value(value))
        case ValueType.DATE_TIME:
            return str(as_date_time_value(value))
        case _:
            return str(value)


# Order in which free-form expected text is tried against the actual's shape.
_TEXT_PARSERS: Final[tuple[tuple[ValueType, Callable[[str], object]], ...]] = (
    (ValueType.DATE_TIME, DateTimeValue.parse),
    (ValueType.DATE, DateValue.parse),
    (ValueType.TIME, TimeValue.parse),
    (ValueType.NUMBER, parse_number),
)

_TEXT_SHAPES_BY_TYPE: Final[dict[ValueType, tuple[ValueType, ...]]] = {
    ValueType.NUMBER: (ValueType.NUMBER,),
    ValueType.DATE: (ValueType.DATE_TIME, ValueType.DATE),
    ValueType.TIME: (ValueType.TIME,),
    ValueType.DATE_TIME: (ValueType.DATE_TIME, ValueType.DATE),
}

_SHAPE_NAMES: Final[dict[ValueType, str]] = {
    ValueType.NUMBER: "a number",
    ValueType.DATE: "a date",
    ValueType.TIME: "a time",
    ValueType.DATE_TIME: "a date/time",
}


def parse_expected_text(text: str, actual_type: ValueType) -> object:
    """Interpret ``text`` in a shape an actual value of ``actual_type`` compares with.

    Text and unidentified actual values keep the text as-is. Raises
    :class:`IncomparableError` when none of the candidate shapes parses.
    """

    shapes = _TEXT_SHAPES_BY_TYPE.get(actual_type)
    if shapes is None:
        return text
    for shape, parser in _TEXT_PARSERS:
        if shape not in shapes:
            continue
        try:
            return parser(text)
        except ParseError:
            continue
    raise IncomparableError(
        f"Expected <{text}> is not comparable to {_SHAPE_NAMES[actual_type]} value"
    )


__all__ = [
    "as_date_time_value",
    "as_date_value",
    "as_decimal",
    "as_time_value",
    "numbers_equal",
    "parse_expected_text",
    "parse_number",
    "text_of",
]
