"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ValueType(StrEnum):
    """Closed taxonomy every raw value is classified into."""

    BOOLEAN = "BOOLEAN"
    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"
    TIME = "TIME"
    DATE_TIME = "DATE_TIME"
    BYTES = "BYTES"
    NOT_IDENTIFIED = "NOT_IDENTIFIED"


class ChangeType(StrEnum):
    CREATION = "CREATION"
    MODIFICATION = "MODIFICATION"
    DELETION = "DELETION"
