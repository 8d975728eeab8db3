"""Computation of the changes between two snapshots of the same table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbassert.domain.errors import DbAssertError
from dbassert.domain.model.change import Change
from dbassert.domain.model.enums import ChangeType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dbassert.domain.model.table import Row, Table

log = logging.getLogger(__name__)


def _creation(table: Table, row: Row) -> Change:
    return Change(
        table_name=table.name,
        change_type=ChangeType.CREATION,
        columns_names=table.columns_names,
        row_at_end_point=row,
    )


def _deletion(table: Table, row: Row) -> Change:
    return Change(
        table_name=table.name,
        change_type=ChangeType.DELETION,
        columns_names=table.columns_names,
        row_at_start_point=row,
    )


def _changes_by_primary_key(start: Table, end: Table) -> list[Change]:
    start_rows = {start.primary_key_of(row): row for row in start.rows}
    end_rows = {end.primary_key_of(row): row for row in end.rows}

    creations = [_creation(end, row) for key, row in end_rows.items() if key not in start_rows]
    modifications = [
        Change(
            table_name=end.name,
            change_type=ChangeType.MODIFICATION,
            columns_names=end.columns_names,
            row_at_start_point=row,
            row_at_end_point=end_rows[key],
        )
        for key, row in start_rows.items()
        if key in end_rows and row.values != end_rows[key].values
    ]
    deletions = [_deletion(start, row) for key, row in start_rows.items() if key not in end_rows]
    return [*creations, *modifications, *deletions]


def _changes_by_row_values(start: Table, end: Table) -> list[Change]:
    remaining = list(end.rows)
    deleted: list[Row] = []
    for row in start.rows:
        match = next((index for index, other in enumerate(remaining) if other == row), None)
        if match is None:
            deleted.append(row)
        else:
            del remaining[match]
    return [
        *(_creation(end, row) for row in remaining),
        *(_deletion(start, row) for row in deleted),
    ]


def compute_changes(start: Table, end: Table) -> tuple[Change, ...]:
    """Return creations, modifications and deletions between two snapshots.

    Rows are matched on their primary key. Without a primary key a row can only
    be created or deleted, modifications are not detectable.
    """

    if start.name.casefold() != end.name.casefold():
        raise DbAssertError(f"Cannot compare table {start.name} with table {end.name}")
    if start.columns_names != end.columns_names:
        raise DbAssertError(
            f"Columns of table {start.name} differ between start point and end point"
        )

    if start.primary_keys:
        changes = _changes_by_primary_key(start, end)
    else:
        log.warning(
            "Table %s has no primary key, changes are matched on whole rows", start.name
        )
        changes = _changes_by_row_values(start, end)
    log.debug("Computed %d changes on table %s", len(changes), start.name)
    return tuple(changes)


def compute_all_changes(starts: Sequence[Table], ends: Sequence[Table]) -> tuple[Change, ...]:
    """Changes of several tables, table by table in the given order."""

    if len(starts) != len(ends):
        raise DbAssertError(
            f"Cannot compare {len(starts)} tables at start point with {len(ends)} at end point"
        )
    changes: list[Change] = []
    for start, end in zip(starts, ends, strict=True):
        changes.extend(compute_changes(start, end))
    return tuple(changes)


__all__ = ["compute_all_changes", "compute_changes"]
