"""Snapshots of tables taken at a start point and an end point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbassert.adapters.sqlalchemy.source import load_table
from dbassert.domain.changes import compute_all_changes
from dbassert.domain.errors import DbAssertError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.engine import Engine

    from dbassert.domain.model.change import Change
    from dbassert.domain.model.table import Table

log = logging.getLogger(__name__)


class ChangeRecorder:
    """Record the changes made to some tables between two points in time.

    Example::

        recorder = ChangeRecorder(engine, ["members"]).set_start_point()
        ...  # code under test
        changes = recorder.set_end_point().changes()
    """

    def __init__(self, engine: Engine, table_names: Sequence[str]) -> None:
        if not table_names:
            raise DbAssertError("At least one table is required to record changes")
        self.engine = engine
        self.table_names = tuple(table_names)
        self._start: tuple[Table, ...] | None = None
        self._end: tuple[Table, ...] | None = None

    def _snapshot(self) -> tuple[Table, ...]:
        return tuple(load_table(self.engine, name) for name in self.table_names)

    def set_start_point(self) -> ChangeRecorder:
        self._start = self._snapshot()
        self._end = None
        log.debug("Start point set on %s", ", ".join(self.table_names))
        return self

    def set_end_point(self) -> ChangeRecorder:
        if self._start is None:
            raise DbAssertError("Start point must be set before end point")
        self._end = self._snapshot()
        log.debug("End point set on %s", ", ".join(self.table_names))
        return self

    def changes(self) -> tuple[Change, ...]:
        if self._start is None or self._end is None:
            raise DbAssertError("Start point and end point must be set before reading changes")
        return compute_all_changes(self._start, self._end)


__all__ = ["ChangeRecorder"]
