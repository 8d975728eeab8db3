from __future__ import annotations

import datetime as dt
from decimal import Decimal

import pytest

from dbassert.domain.diagnostics import Point, SizeMismatch, TypeMismatch, ValueMismatch
from dbassert.domain.equality import (
    are_equal,
    value_equals,
    value_is_after,
    value_is_before,
    value_is_of_class,
    value_is_of_type,
    value_not_equals,
    values_are_of_type,
    values_equal,
    values_equal_at_points,
    values_not_equal,
)
from dbassert.domain.errors import (
    ChronologyError,
    ClassMismatchError,
    DbAssertError,
    IncomparableError,
    NullActualError,
    SizeMismatchError,
    TypeMismatchError,
    ValueMismatchError,
)
from dbassert.domain.model import DateTimeValue, DateValue, TimeValue, ValueType


def test_boolean_is_not_comparable_with_a_date() -> None:
    with pytest.raises(TypeMismatchError) as exc:
        value_equals(True, DateValue.of(2007, 12, 23))  # noqa: FBT003

    failure = exc.value.failure
    assert isinstance(failure, TypeMismatch)
    assert failure.actual_type is ValueType.BOOLEAN
    assert failure.expected_types == (
        ValueType.DATE,
        ValueType.DATE_TIME,
        ValueType.NOT_IDENTIFIED,
    )


def test_type_mismatch_message_at_index() -> None:
    with pytest.raises(TypeMismatchError) as exc:
        values_equal([False], [DateValue.of(2007, 12, 23)])

    assert str(exc.value) == (
        "Expecting that the value at index 0:\n"
        "  <false>\n"
        "to be of type\n"
        "  <[DATE, DATE_TIME, NOT_IDENTIFIED]>\n"
        "but was of type\n"
        "  <BOOLEAN>"
    )


def test_sequences_report_the_first_failing_index() -> None:
    with pytest.raises(ValueMismatchError) as exc:
        values_equal(
            [dt.date(2007, 12, 23), dt.date(2002, 7, 25)],
            [DateValue.of(2007, 12, 23), DateValue.of(2002, 7, 26)],
        )

    failure = exc.value.failure
    assert isinstance(failure, ValueMismatch)
    assert failure.position == 1
    assert str(exc.value) == (
        "Expecting that the value at index 1:\n"
        "  <2002-07-25>\n"
        "to be equal to: \n"
        "  <2002-07-26>"
    )


def test_sequences_of_different_sizes_fail_before_comparing_values() -> None:
    with pytest.raises(SizeMismatchError) as exc:
        values_equal([True, "x"], [DateValue.of(2007, 12, 23), 1, 2])

    assert exc.value.failure == SizeMismatch(actual=2, expected=3)
    assert str(exc.value) == (
        "Expecting size (number of rows) to be equal to :\n   <3>\nbut was:\n   <2>"
    )


def test_date_equals_date_time_only_at_midnight() -> None:
    date = DateValue.of(2007, 12, 23)

    value_equals(dt.datetime(2007, 12, 23), date)
    value_equals(DateTimeValue.of(date), dt.date(2007, 12, 23))
    with pytest.raises(ValueMismatchError):
        value_equals(dt.datetime(2007, 12, 23, 0, 0, 1), date)


def test_date_actual_compares_with_a_date_time() -> None:
    value_equals(dt.date(2007, 12, 23), DateTimeValue.of(DateValue.of(2007, 12, 23)))
    assert not are_equal(
        dt.date(2007, 12, 23),
        DateTimeValue.of(DateValue.of(2007, 12, 23), TimeValue.of(9, 1)),
    )


def test_time_values_compare_with_native_times() -> None:
    value_equals(dt.time(9, 1, 6, 1), TimeValue.of(9, 1, 6, 1000))
    with pytest.raises(TypeMismatchError):
        value_equals(dt.datetime(2007, 12, 23, 9, 1), TimeValue.of(9, 1))


def test_numbers_compare_by_value() -> None:
    value_equals(1, 1.0)
    value_equals(Decimal("2.50"), 2.5)
    with pytest.raises(TypeMismatchError):
        value_equals(True, 1)  # noqa: FBT003


def test_text_is_parsed_in_the_shape_of_the_actual_value() -> None:
    value_equals(8, "8")
    value_equals(8, "8.0")
    value_equals(dt.date(2007, 12, 23), "2007-12-23")
    value_equals(dt.date(2007, 12, 23), "2007-12-23T00:00")
    value_equals(dt.datetime(2007, 12, 23, 9, 1), "2007-12-23T09:01:00")
    value_equals(dt.time(9, 1), "09:01")
    value_equals("text", "text")


def test_text_mismatch_reports_the_actual_in_text_form() -> None:
    with pytest.raises(ValueMismatchError) as exc:
        value_equals(8, "9")
    assert str(exc.value) == 'Expecting:\n  <"8">\nto be equal to: \n  <"9">'

    with pytest.raises(ValueMismatchError) as exc:
        value_equals(dt.time(9, 1), "09:02")
    assert str(exc.value) == (
        'Expecting:\n  <"09:01:00.000000000">\nto be equal to: \n  <"09:02">'
    )


def test_unparsable_text_is_incomparable() -> None:
    with pytest.raises(IncomparableError, match="not comparable to a number value"):
        value_equals(8, "eight")


def test_bytes_are_compared_by_content() -> None:
    value_equals(b"\x01\x02", bytearray(b"\x01\x02"))
    with pytest.raises(ValueMismatchError) as exc:
        value_equals(b"\x01", b"\x02")
    assert str(exc.value) == "Expecting:\n  <[1]>\nto be equal to: \n  <[2]>"


def test_null_only_equals_null() -> None:
    value_equals(None, None)
    with pytest.raises(ValueMismatchError) as exc:
        value_equals(None, 5)
    assert str(exc.value) == "Expecting:\n  <null>\nto be equal to: \n  <5>"
    with pytest.raises(ValueMismatchError):
        value_equals(5, None)


def test_unsupported_expected_value_is_incomparable() -> None:
    with pytest.raises(IncomparableError):
        value_equals(1, [1])


def test_not_equals_reports_equal_values() -> None:
    value_not_equals(1, 2)
    with pytest.raises(ValueMismatchError) as exc:
        values_not_equal([1, 2], [3, 2])
    assert str(exc.value) == (
        "Expecting that the value at index 1:\n  <2>\nnot to be equal to: \n  <2>"
    )


def test_values_at_points_are_labelled() -> None:
    values_equal_at_points("test1", "test2", "test1", "test2")
    with pytest.raises(ValueMismatchError) as exc:
        values_equal_at_points("test1", "test2", "test2", "test2")

    assert exc.value.failure.position is Point.START  # type: ignore[attr-defined]
    assert str(exc.value) == (
        'Expecting that start point:\n  <"test1">\nto be equal to: \n  <"test2">'
    )


def test_description_prefixes_the_message() -> None:
    with pytest.raises(ValueMismatchError) as exc:
        value_equals(1, 0, description="Value at index 0 of test table")

    assert str(exc.value) == (
        "[Value at index 0 of test table] \nExpecting:\n  <1>\nto be equal to: \n  <0>"
    )


def test_type_checks_accept_unidentified_values() -> None:
    value_is_of_type(None, ValueType.NUMBER)
    values_are_of_type([1, None, 2.5], ValueType.NUMBER)
    with pytest.raises(TypeMismatchError) as exc:
        values_are_of_type([1, "2"], ValueType.NUMBER)
    assert str(exc.value) == (
        "Expecting that the value at index 1:\n"
        '  <"2">\n'
        "to be of type\n"
        "  <NUMBER>\n"
        "but was of type\n"
        "  <TEXT>"
    )


def test_class_checks() -> None:
    value_is_of_class(8, int)
    with pytest.raises(ClassMismatchError) as exc:
        value_is_of_class(8, str)
    assert str(exc.value) == (
        "Expecting:\n  <8>\nto be of class\n  <builtins.str>\nbut was of class\n  <builtins.int>"
    )
    with pytest.raises(NullActualError, match="Expecting actual not to be null"):
        value_is_of_class(None, str)
    with pytest.raises(DbAssertError, match="Class of the value is null"):
        value_is_of_class(8, None)


def test_chronology_checks() -> None:
    value_is_before(dt.date(2007, 12, 23), "2007-12-24")
    value_is_after(dt.datetime(2007, 12, 23, 9, 1), DateValue.of(2007, 12, 23))
    value_is_before(TimeValue.of(9, 1), dt.time(9, 2))

    with pytest.raises(ChronologyError) as exc:
        value_is_before(dt.date(2007, 12, 23), "2007-12-22")
    assert str(exc.value) == 'Expecting:\n  <2007-12-23>\nto be before \n  <"2007-12-22">'


def test_chronology_rejects_mixed_time_and_date() -> None:
    with pytest.raises(IncomparableError):
        value_is_before(dt.time(9, 1), DateValue.of(2007, 12, 23))
    with pytest.raises(NullActualError):
        value_is_after(None, DateValue.of(2007, 12, 23))
    with pytest.raises(TypeMismatchError):
        value_is_after(1, DateValue.of(2007, 12, 23))


def test_text_with_digit_separators_is_not_a_number() -> None:
    with pytest.raises(IncomparableError):
        value_equals(1000, "1_000")
    value_equals(7, "007")
