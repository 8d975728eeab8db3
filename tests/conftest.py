from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    Time,
    create_engine,
)

from dbassert.config import DATABASE_URI_VAR, ECHO_VAR, LOG_LEVEL_VAR
from dbassert.domain.model import Table as Snapshot

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


metadata = MetaData()

members = Table(
    "members",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("birth", Date),
    Column("arrival", Time),
    Column("updated", DateTime),
    Column("active", Boolean),
    Column("photo", LargeBinary),
)

visits = Table(
    "visits",
    metadata,
    Column("place", String(50)),
    Column("visits", Integer),
)

MEMBER_ROWS = [
    {
        "id": 1,
        "name": "Ann",
        "birth": dt.date(1990, 1, 2),
        "arrival": dt.time(9, 1),
        "updated": dt.datetime(2024, 5, 1, 12, 30),
        "active": True,
        "photo": b"\x01\x02",
    },
    {
        "id": 2,
        "name": "Bob",
        "birth": None,
        "arrival": dt.time(17, 45, 30),
        "updated": dt.datetime(2024, 5, 2),
        "active": False,
        "photo": None,
    },
]


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    metadata.create_all(engine)
    with engine.begin() as connection:
        connection.execute(members.insert(), MEMBER_ROWS)
        connection.execute(visits.insert(), [{"place": "Paris", "visits": 3}])
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def members_table() -> Snapshot:
    return Snapshot.from_records(
        "members",
        ["id", "name", "birth", "active"],
        [
            (1, "Ann", dt.date(1990, 1, 2), True),
            (2, "Bob", None, False),
        ],
        primary_keys=["id"],
    )


@pytest.fixture
def clean_source_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # set first so the removal is undone after the test
    for name in (DATABASE_URI_VAR, ECHO_VAR, LOG_LEVEL_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
