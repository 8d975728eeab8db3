"""Structured assertion failures and their deterministic text rendering.

Every failure is a frozen dataclass. :func:`render_failure` turns it into the
message carried by the raised :class:`~dbassert.domain.errors.DbAssertionError`;
:func:`error_for` builds that error. Rendering is a pure function of the payload.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import StrEnum
from functools import singledispatch
from typing import TYPE_CHECKING, Literal

from dbassert.domain.errors import (
    ChangeMismatchError,
    ChronologyError,
    ClassMismatchError,
    DbAssertionError,
    NullActualError,
    SizeMismatchError,
    TypeMismatchError,
    ValueMismatchError,
)
from dbassert.domain.model.temporal import DateTimeValue, DateValue, TimeValue

if TYPE_CHECKING:
    from dbassert.domain.model.enums import ChangeType, ValueType


class Point(StrEnum):
    """Labels of the two values compared in a before/after comparison."""

    START = "start point"
    END = "end point"


type Position = int | Point | None


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure:
    description: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeMismatch(Failure):
    value: object
    actual_type: ValueType
    expected_types: tuple[ValueType, ...]
    position: Position = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ValueMismatch(Failure):
    actual: object
    expected: object
    position: Position = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UnexpectedEquality(Failure):
    actual: object
    expected: object
    position: Position = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SizeMismatch(Failure):
    actual: int
    expected: int
    subject: str = "rows"


@dataclass(frozen=True, slots=True, kw_only=True)
class NullActual(Failure):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ClassMismatch(Failure):
    value: object
    expected_class: type
    actual_class: type


@dataclass(frozen=True, slots=True, kw_only=True)
class ChronologyMismatch(Failure):
    actual: object
    expected: object
    relation: Literal["before", "after"]
    position: Position = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ChangeTypeMismatch(Failure):
    actual: ChangeType
    expected: ChangeType


@dataclass(frozen=True, slots=True, kw_only=True)
class ModifiedColumnsMismatch(Failure):
    actual: tuple[object, ...]
    expected: tuple[object, ...]


@singledispatch
def represent(value: object) -> str:
    """Literal representation of a value inside ``<...>``."""
    return str(value)


@represent.register(type(None))
def _(_value: None) -> str:
    return "null"


@represent.register
def _(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


@represent.register
def _(value: str) -> str:
    return f'"{value}"'


@represent.register
def _(value: StrEnum) -> str:
    return value.value


@represent.register(bytes)
@represent.register(bytearray)
@represent.register(memoryview)
def _(value: bytes | bytearray | memoryview) -> str:
    return "[" + ", ".join(str(byte) for byte in bytes(value)) + "]"


@represent.register
def _(value: dt.date) -> str:
    return str(DateValue.from_native(value))


@represent.register
def _(value: dt.datetime) -> str:
    return str(DateTimeValue.from_native(value))


@represent.register
def _(value: dt.time) -> str:
    return str(TimeValue.from_native(value))


@represent.register(list)
@represent.register(tuple)
def _(value: list[object] | tuple[object, ...]) -> str:
    return "[" + ", ".join(represent(item) for item in value) + "]"


@represent.register
def _(value: type) -> str:
    return f"{value.__module__}.{value.__qualname__}"


def _literal(value: object) -> str:
    return f"<{represent(value)}>"


def _subject(position: Position) -> str:
    if position is None:
        return "Expecting:"
    if isinstance(position, Point):
        return f"Expecting that {position}:"
    return f"Expecting that the value at index {position}:"


def _value_subject(position: Position) -> str:
    if position is None:
        return "Expecting:"
    if isinstance(position, Point):
        return f"Expecting that the value at {position}:"
    return f"Expecting that the value at index {position}:"


def _types(value_types: tuple[ValueType, ...]) -> str:
    if len(value_types) == 1:
        return _literal(value_types[0])
    return _literal(value_types)


@singledispatch
def _render_body(failure: Failure) -> str:
    msg = f"No rendering registered for {type(failure).__name__}"
    raise TypeError(msg)


@_render_body.register
def _(failure: TypeMismatch) -> str:
    return (
        f"{_value_subject(failure.position)}\n"
        f"  {_literal(failure.value)}\n"
        "to be of type\n"
        f"  {_types(failure.expected_types)}\n"
        "but was of type\n"
        f"  {_literal(failure.actual_type)}"
    )


@_render_body.register
def _(failure: ValueMismatch) -> str:
    return (
        f"{_subject(failure.position)}\n"
        f"  {_literal(failure.actual)}\n"
        "to be equal to: \n"
        f"  {_literal(failure.expected)}"
    )


@_render_body.register
def _(failure: UnexpectedEquality) -> str:
    return (
        f"{_subject(failure.position)}\n"
        f"  {_literal(failure.actual)}\n"
        "not to be equal to: \n"
        f"  {_literal(failure.expected)}"
    )


@_render_body.register
def _(failure: SizeMismatch) -> str:
    return (
        f"Expecting size (number of {failure.subject}) to be equal to :\n"
        f"   {_literal(failure.expected)}\n"
        "but was:\n"
        f"   {_literal(failure.actual)}"
    )


@_render_body.register
def _(_failure: NullActual) -> str:
    return "Expecting actual not to be null"


@_render_body.register
def _(failure: ClassMismatch) -> str:
    return (
        "Expecting:\n"
        f"  {_literal(failure.value)}\n"
        "to be of class\n"
        f"  {_literal(failure.expected_class)}\n"
        "but was of class\n"
        f"  {_literal(failure.actual_class)}"
    )


@_render_body.register
def _(failure: ChronologyMismatch) -> str:
    return (
        f"{_subject(failure.position)}\n"
        f"  {_literal(failure.actual)}\n"
        f"to be {failure.relation} \n"
        f"  {_literal(failure.expected)}"
    )


@_render_body.register
def _(failure: ChangeTypeMismatch) -> str:
    return (
        "Expecting that the change is of type\n"
        f"  {_literal(failure.expected)}\n"
        "but was of type\n"
        f"  {_literal(failure.actual)}"
    )


@_render_body.register
def _(failure: ModifiedColumnsMismatch) -> str:
    return (
        "Expecting modified columns\n"
        f"  {_literal(failure.expected)}\n"
        "but the modified columns are\n"
        f"  {_literal(failure.actual)}"
    )


def render_failure(failure: Failure) -> str:
    """Render ``failure`` with its optional ``[description]`` prefix."""

    body = _render_body(failure)
    if failure.description is None:
        return body
    return f"[{failure.description}] \n{body}"


_ERROR_BY_FAILURE: dict[type[Failure], type[DbAssertionError]] = {
    TypeMismatch: TypeMismatchError,
    ValueMismatch: ValueMismatchError,
    UnexpectedEquality: ValueMismatchError,
    SizeMismatch: SizeMismatchError,
    NullActual: NullActualError,
    ClassMismatch: ClassMismatchError,
    ChronologyMismatch: ChronologyError,
    ChangeTypeMismatch: ChangeMismatchError,
    ModifiedColumnsMismatch: ChangeMismatchError,
}


def error_for(failure: Failure) -> DbAssertionError:
    """Build the assertion error matching ``failure``."""

    error_type = _ERROR_BY_FAILURE.get(type(failure), DbAssertionError)
    return error_type(failure, render_failure(failure))


__all__ = [
    "ChangeTypeMismatch",
    "ChronologyMismatch",
    "ClassMismatch",
    "Failure",
    "ModifiedColumnsMismatch",
    "NullActual",
    "Point",
    "Position",
    "SizeMismatch",
    "TypeMismatch",
    "UnexpectedEquality",
    "ValueMismatch",
    "error_for",
    "render_failure",
    "represent",
]
