"""Loading of tables and requests through SQLAlchemy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import MetaData, create_engine, select, text
from sqlalchemy import Table as SqlTable

from dbassert.common.logging import configure_logging
from dbassert.config import get_source_config
from dbassert.domain.model.table import Table, index_of_column

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from sqlalchemy.engine import Engine

    from dbassert.config import SourceConfig

log = logging.getLogger(__name__)


def create_source_engine(config: SourceConfig) -> Engine:
    """Create the engine described by ``config``."""

    return create_engine(config.uri, echo=config.echo)


def connect(*, env_file: str | Path | None = None) -> Engine:
    """Create the engine configured by the environment (and ``env_file``).

    When ``DBASSERT_LOG_LEVEL`` is set, logging is configured at that level first.
    """

    config = get_source_config(env_file=env_file)
    if config.log_level is not None:
        configure_logging(level=config.log_level)
    engine = create_source_engine(config)
    log.debug("Created %s engine from the environment", engine.dialect.name)
    return engine


def _normalize(value: object) -> object:
    # some drivers hand out binary columns as memoryview
    if isinstance(value, memoryview):
        return value.tobytes()
    return value


def _records(rows: Iterable[Sequence[Any]]) -> list[tuple[object, ...]]:
    return [tuple(_normalize(value) for value in row) for row in rows]


def load_table(engine: Engine, name: str, *, columns: Sequence[str] | None = None) -> Table:
    """Read every row of table ``name``, ordered by primary key.

    ``columns`` restricts (and orders) the selected columns; names are matched
    case-insensitively.
    """

    reflected = SqlTable(name, MetaData(), autoload_with=engine)
    available = tuple(column.name for column in reflected.columns)
    if columns is None:
        selected = list(reflected.columns)
    else:
        selected = [reflected.columns[available[index_of_column(available, c)]] for c in columns]
    selected_names = [column.name for column in selected]
    primary_keys = tuple(column.name for column in reflected.primary_key.columns)
    if not set(primary_keys) <= set(selected_names):
        primary_keys = ()

    statement = select(*selected).order_by(*reflected.primary_key.columns)
    with engine.connect() as connection:
        records = _records(connection.execute(statement))

    log.debug("Loaded %d rows from table %s", len(records), name)
    return Table.from_records(
        name,
        selected_names,
        records,
        primary_keys=primary_keys,
    )


def load_request(engine: Engine, sql: str, **parameters: object) -> Table:
    """Run a SELECT statement and keep its rows in result order."""

    with engine.connect() as connection:
        result = connection.execute(text(sql), parameters)
        columns_names = list(result.keys())
        records = _records(result)

    log.debug("Loaded %d rows from request %r", len(records), sql)
    return Table.from_records(sql, columns_names, records)


__all__ = ["connect", "create_source_engine", "load_request", "load_table"]
