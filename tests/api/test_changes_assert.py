from __future__ import annotations

import pytest

from dbassert.api import ChangesAssert, assert_that
from dbassert.domain.changes import compute_changes
from dbassert.domain.errors import (
    ChangeMismatchError,
    DbAssertError,
    SizeMismatchError,
    TypeMismatchError,
    ValueMismatchError,
)
from dbassert.domain.model import Change, Table, ValueType


@pytest.fixture
def changes() -> tuple[Change, ...]:
    start = Table.from_records(
        "members", ["id", "name"], [(1, "Ann"), (2, "Bob"), (3, "Cid")], primary_keys=["id"]
    )
    end = Table.from_records(
        "members", ["id", "name"], [(1, "Ann"), (2, "Bobby"), (4, "Dan")], primary_keys=["id"]
    )
    return compute_changes(start, end)


def test_navigate_through_changes(changes: tuple[Change, ...]) -> None:
    changes_assert = assert_that(changes)

    assert isinstance(changes_assert, ChangesAssert)
    (
        changes_assert.has_number_of_changes(3)
        .change()
        .is_creation()
        .row_at_end_point()
        .has_values(4, "Dan")
        .return_to_change()
        .return_to_changes()
        .change()
        .is_modification()
        .has_number_of_modified_columns(1)
        .has_modified_columns("NAME")
        .has_modified_columns(1)
        .column("name")
        .has_values("Bob", "Bobby")
        .is_modified()
        .is_text()
        .value_at_end_point()
        .is_equal_to("Bobby")
        .return_to_column()
        .return_to_change()
        .column(0)
        .is_not_modified()
        .has_values(2, 2)
    )
    changes_assert.change().is_deletion().row_at_start_point().value("name").is_equal_to("Cid")


def test_change_kind_failure(changes: tuple[Change, ...]) -> None:
    with pytest.raises(ChangeMismatchError) as exc:
        assert_that(changes).change(0).is_deletion()

    assert str(exc.value) == (
        "[Change at index 0 (on table : members) of Changes] \n"
        "Expecting that the change is of type\n"
        "  <DELETION>\n"
        "but was of type\n"
        "  <CREATION>"
    )


def test_modified_columns_failure(changes: tuple[Change, ...]) -> None:
    with pytest.raises(ChangeMismatchError) as exc:
        assert_that(changes).change(1).has_modified_columns("id")

    assert str(exc.value).endswith(
        'Expecting modified columns\n  <["id"]>\nbut the modified columns are\n  <["name"]>'
    )


def test_modified_columns_cannot_mix_indexes_and_names(changes: tuple[Change, ...]) -> None:
    with pytest.raises(DbAssertError):
        assert_that(changes).change(1).has_modified_columns(0, "name")


def test_number_of_changes_failure(changes: tuple[Change, ...]) -> None:
    with pytest.raises(SizeMismatchError) as exc:
        assert_that(changes).has_number_of_changes(2)

    assert str(exc.value) == (
        "[Changes] \n"
        "Expecting size (number of changes) to be equal to :\n"
        "   <2>\n"
        "but was:\n"
        "   <3>"
    )


def test_column_of_change_values_are_labelled_by_point(changes: tuple[Change, ...]) -> None:
    column = assert_that(changes).change(1).column("name")

    with pytest.raises(ValueMismatchError) as exc:
        column.has_values("Bob", "Bob")
    assert str(exc.value).endswith(
        'Expecting that end point:\n  <"Bobby">\nto be equal to: \n  <"Bob">'
    )

    with pytest.raises(ValueMismatchError):
        column.is_not_modified()


def test_column_of_change_types_are_checked_at_both_points(changes: tuple[Change, ...]) -> None:
    assert_that(changes).change(0).column("id").is_of_type(ValueType.NUMBER)

    with pytest.raises(TypeMismatchError) as exc:
        assert_that(changes).change(1).column("name").is_of_type(ValueType.NUMBER)
    assert "Expecting that the value at start point:" in str(exc.value)


def test_missing_row_of_a_change(changes: tuple[Change, ...]) -> None:
    with pytest.raises(DbAssertError, match="No row at start point for a creation"):
        assert_that(changes).change(0).row_at_start_point()


def test_modified_columns_in_any_order() -> None:
    start = Table.from_records("members", ["id", "a", "b"], [(1, "x", "y")], primary_keys=["id"])
    end = Table.from_records("members", ["id", "a", "b"], [(1, "X", "Y")], primary_keys=["id"])

    change = assert_that(compute_changes(start, end)).change().is_modification()

    change.has_modified_columns("b", "A").has_modified_columns("a", "b")
    change.has_modified_columns(2, 1)
    with pytest.raises(ChangeMismatchError):
        change.has_modified_columns("b")
