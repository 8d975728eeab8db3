"""Assertions on the content of a relational database."""

from __future__ import annotations

from importlib import metadata

from dbassert.api import assert_that
from dbassert.domain.errors import DbAssertError, DbAssertionError
from dbassert.domain.model import (
    Change,
    ChangeType,
    DateTimeValue,
    DateValue,
    Table,
    TimeValue,
    ValueType,
)

try:
    __version__ = metadata.version("dbassert")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Change",
    "ChangeType",
    "DateTimeValue",
    "DateValue",
    "DbAssertError",
    "DbAssertionError",
    "Table",
    "TimeValue",
    "ValueType",
    "__version__",
    "assert_that",
]
