"""Type-aware equality, type and chronology checks on raw values.

Every check returns ``None`` on success and raises on failure:

- :class:`~dbassert.domain.errors.DbAssertionError` subclasses when the check
  fails, carrying a :mod:`~dbassert.domain.diagnostics` payload;
- :class:`~dbassert.domain.errors.IncomparableError` when the expected value
  cannot be interpreted against the actual value at all.

Positions are 0-based indexes or :class:`~dbassert.domain.diagnostics.Point` labels.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbassert.domain.classification import (
    CHRONOLOGICAL_TYPES,
    accepted_types_for,
    classify,
)
from dbassert.domain.coercion import (
    as_date_time_value,
    as_date_value,
    as_time_value,
    numbers_equal,
    parse_expected_text,
    text_of,
)
from dbassert.domain.diagnostics import (
    ChronologyMismatch,
    ClassMismatch,
    NullActual,
    Point,
    SizeMismatch,
    TypeMismatch,
    UnexpectedEquality,
    ValueMismatch,
    error_for,
)
from dbassert.domain.errors import DbAssertError, IncomparableError
from dbassert.domain.model.enums import ValueType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dbassert.domain.diagnostics import Position
    from dbassert.domain.model.temporal import TemporalValue


def _expected_type(expected: object) -> ValueType:
    expected_type = classify(expected)
    if expected_type is ValueType.NOT_IDENTIFIED:
        raise IncomparableError(
            f"Expected value <{expected!r}> of class {type(expected).__name__} "
            "can not be compared"
        )
    return expected_type


def _equals(actual: object, actual_type: ValueType, expected: object) -> bool:
    expected_type = classify(expected)
    match expected_type:
        case ValueType.DATE if actual_type is ValueType.DATE_TIME:
            date_time = as_date_time_value(actual)
            return date_time.is_midnight and date_time.date == as_date_value(expected)
        case ValueType.DATE:
            return as_date_value(actual) == as_date_value(expected)
        case ValueType.DATE_TIME:
            return as_date_time_value(actual) == as_date_time_value(expected)
        case ValueType.TIME:
            return as_time_value(actual) == as_time_value(expected)
        case ValueType.NUMBER:
            return numbers_equal(actual, expected)
        case ValueType.BYTES:
            return bytes(actual) == bytes(expected)  # type: ignore[call-overload]
        case _:
            return actual == expected


def _compare(
    actual: object,
    expected: object,
    *,
    position: Position,
    description: str | None,
) -> tuple[bool, object]:
    """Return whether the values are equal and the actual value as it must be reported."""

    if expected is None:
        return actual is None, actual
    expected_type = _expected_type(expected)
    value_is_of_any_type(
        actual,
        accepted_types_for(expected_type),
        position=position,
        description=description,
    )
    actual_type = classify(actual)
    if expected_type is ValueType.TEXT:
        reported = text_of(actual)
        if actual is None:
            return False, reported
        if actual_type is ValueType.TEXT:
            return actual == expected, reported
        parsed = parse_expected_text(str(expected), actual_type)
        return _equals(actual, actual_type, parsed), reported
    if actual is None:
        return False, actual
    return _equals(actual, actual_type, expected), actual


def are_equal(actual: object, expected: object) -> bool:
    """Return whether ``actual`` equals ``expected`` under the coercion rules.

    Type mismatches and incomparable expectations still raise.
    """

    equal, _ = _compare(actual, expected, position=None, description=None)
    return equal


def value_equals(
    actual: object,
    expected: object,
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    equal, reported = _compare(actual, expected, position=position, description=description)
    if not equal:
        raise error_for(
            ValueMismatch(
                actual=reported,
                expected=expected,
                position=position,
                description=description,
            )
        )


def value_not_equals(
    actual: object,
    expected: object,
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    equal, reported = _compare(actual, expected, position=position, description=description)
    if equal:
        raise error_for(
            UnexpectedEquality(
                actual=reported,
                expected=expected,
                position=position,
                description=description,
            )
        )


def _check_sizes(
    actuals: Sequence[object],
    expecteds: Sequence[object],
    *,
    subject: str,
    description: str | None,
) -> None:
    if len(actuals) != len(expecteds):
        raise error_for(
            SizeMismatch(
                actual=len(actuals),
                expected=len(expecteds),
                subject=subject,
                description=description,
            )
        )


def values_equal(
    actuals: Sequence[object],
    expecteds: Sequence[object],
    *,
    subject: str = "rows",
    description: str | None = None,
) -> None:
    """Compare two sequences pairwise, stopping at the first failing index."""

    _check_sizes(actuals, expecteds, subject=subject, description=description)
    for index, (actual, expected) in enumerate(zip(actuals, expecteds, strict=True)):
        value_equals(actual, expected, position=index, description=description)


def values_not_equal(
    actuals: Sequence[object],
    expecteds: Sequence[object],
    *,
    subject: str = "rows",
    description: str | None = None,
) -> None:
    """Fail at the first index whose values are equal."""

    _check_sizes(actuals, expecteds, subject=subject, description=description)
    for index, (actual, expected) in enumerate(zip(actuals, expecteds, strict=True)):
        value_not_equals(actual, expected, position=index, description=description)


def values_equal_at_points(
    start: object,
    end: object,
    expected_start: object,
    expected_end: object,
    *,
    description: str | None = None,
) -> None:
    """Compare the start point and end point values of a change."""

    value_equals(start, expected_start, position=Point.START, description=description)
    value_equals(end, expected_end, position=Point.END, description=description)


def value_is_of_any_type(
    actual: object,
    value_types: Sequence[ValueType],
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    """Check the tag of ``actual``; unidentified values (``None``) always pass."""

    actual_type = classify(actual)
    if actual_type is ValueType.NOT_IDENTIFIED or actual_type in value_types:
        return
    raise error_for(
        TypeMismatch(
            value=actual,
            actual_type=actual_type,
            expected_types=tuple(value_types),
            position=position,
            description=description,
        )
    )


def value_is_of_type(
    actual: object,
    value_type: ValueType,
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    value_is_of_any_type(actual, (value_type,), position=position, description=description)


def values_are_of_any_type(
    values: Sequence[object],
    value_types: Sequence[ValueType],
    *,
    description: str | None = None,
) -> None:
    for index, value in enumerate(values):
        value_is_of_any_type(value, value_types, position=index, description=description)


def values_are_of_type(
    values: Sequence[object],
    value_type: ValueType,
    *,
    description: str | None = None,
) -> None:
    values_are_of_any_type(values, (value_type,), description=description)


def value_is_not_null(actual: object, *, description: str | None = None) -> None:
    if actual is None:
        raise error_for(NullActual(description=description))


def value_is_of_class(
    actual: object,
    cls: type | None,
    *,
    description: str | None = None,
) -> None:
    """Check that ``actual`` is an instance of ``cls``; ``None`` is never an instance."""

    if cls is None:
        raise DbAssertError("Class of the value is null")
    value_is_not_null(actual, description=description)
    if not isinstance(actual, cls):
        raise error_for(
            ClassMismatch(
                value=actual,
                expected_class=cls,
                actual_class=type(actual),
                description=description,
            )
        )


def _chronological_pair(
    actual: object,
    expected: object,
    *,
    position: Position,
    description: str | None,
) -> tuple[TemporalValue, TemporalValue]:
    value_is_not_null(actual, description=description)
    value_is_of_any_type(actual, CHRONOLOGICAL_TYPES, position=position, description=description)
    actual_type = classify(actual)
    if isinstance(expected, str):
        expected = parse_expected_text(expected, actual_type)
    expected_type = classify(expected)
    if ValueType.TIME in (actual_type, expected_type):
        if actual_type is not expected_type:
            raise IncomparableError(
                f"Expected <{expected}> is not comparable to <{text_of(actual)}>"
            )
        return as_time_value(actual), as_time_value(expected)
    if expected_type not in (ValueType.DATE, ValueType.DATE_TIME):
        raise IncomparableError(f"Expected <{expected}> is not a date or a date/time")
    return as_date_time_value(actual), as_date_time_value(expected)


def value_is_before(
    actual: object,
    expected: object,
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    left, right = _chronological_pair(
        actual, expected, position=position, description=description
    )
    if not left.is_before(right):
        raise error_for(
            ChronologyMismatch(
                actual=actual,
                expected=expected,
                relation="before",
                position=position,
                description=description,
            )
        )


def value_is_after(
    actual: object,
    expected: object,
    *,
    position: Position = None,
    description: str | None = None,
) -> None:
    left, right = _chronological_pair(
        actual, expected, position=position, description=description
    )
    if not left.is_after(right):
        raise error_for(
            ChronologyMismatch(
                actual=actual,
                expected=expected,
                relation="after",
                position=position,
                description=description,
            )
        )


__all__ = [
    "are_equal",
    "value_equals",
    "value_is_after",
    "value_is_before",
    "value_is_not_null",
    "value_is_of_any_type",
    "value_is_of_class",
    "value_is_of_type",
    "value_not_equals",
    "values_are_of_any_type",
    "values_are_of_type",
    "values_equal",
    "values_equal_at_points",
    "values_not_equal",
]
