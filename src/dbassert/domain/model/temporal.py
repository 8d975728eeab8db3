"""Temporal value objects: date, time and date/time with nanosecond precision.

The three types only store components. Construction paths:

- ``of(...)`` from integer components (no range validation),
- ``parse(text)`` from the textual forms (signed years of four digits or more),
- ``from_native(value)`` from :mod:`datetime` objects.

``str()`` always yields the canonical, zero-padded form which ``parse`` accepts back.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Final

from dbassert.domain.errors import IncomparableError, NullValueError, ParseError

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_TIME_LENGTHS: Final[tuple[int, ...]] = (5, 8, 18)

_DATE_PATTERN: Final[str] = "[-]YYYY-MM-DD"
_TIME_PATTERN: Final[str] = "HH:MM[:SS[.fffffffff]]"
_DATE_TIME_PATTERN: Final[str] = "[-]YYYY-MM-DDTHH:MM[:SS[.fffffffff]]"


def _read_digits(text: str, start: int, count: int, *, kind: str) -> int:
    for index in range(start, start + count):
        if text[index] not in _DIGITS:
            raise ParseError(
                f"{text!r} is not a valid {kind}: "
                f"expected a digit at index {index} but found {text[index]!r}"
            )
    return int(text[start : start + count])


def _read_separator(text: str, index: int, separator: str, *, kind: str) -> None:
    if text[index] != separator:
        raise ParseError(
            f"{text!r} is not a valid {kind}: "
            f"expected {separator!r} at index {index} but found {text[index]!r}"
        )


def _require_text(text: str | None, *, kind: str) -> str:
    if text is None:
        raise ParseError(f"Cannot parse a {kind} from None")
    return text


def _bad_length(text: str, *, kind: str, pattern: str) -> ParseError:
    return ParseError(f"{text!r} is not a valid {kind}: expected the format {pattern}")


def _read_date(text: str, start: int, *, kind: str, pattern: str) -> tuple[DateValue, int]:
    """Read a date at ``start``; return it with the index following its last digit."""
    index = start
    negative = index < len(text) and text[index] == "-"
    if negative:
        index += 1
    year_end = index
    while year_end < len(text) and text[year_end] in _DIGITS:
        year_end += 1
    if year_end - index < 4:
        if index + 4 > len(text):
            raise _bad_length(text, kind=kind, pattern=pattern)
        _read_digits(text, index, 4, kind=kind)
    if year_end + 6 > len(text):
        raise _bad_length(text, kind=kind, pattern=pattern)
    year = int(text[index:year_end])
    _read_separator(text, year_end, "-", kind=kind)
    month = _read_digits(text, year_end + 1, 2, kind=kind)
    _read_separator(text, year_end + 3, "-", kind=kind)
    day = _read_digits(text, year_end + 4, 2, kind=kind)
    return DateValue(-year if negative else year, month, day), year_end + 6


def _read_time(text: str, start: int, *, kind: str) -> TimeValue:
    length = len(text) - start
    hour = _read_digits(text, start, 2, kind=kind)
    _read_separator(text, start + 2, ":", kind=kind)
    minutes = _read_digits(text, start + 3, 2, kind=kind)
    seconds = 0
    nanoseconds = 0
    if length >= 8:
        _read_separator(text, start + 5, ":", kind=kind)
        seconds = _read_digits(text, start + 6, 2, kind=kind)
    if length == 18:
        _read_separator(text, start + 8, ".", kind=kind)
        nanoseconds = _read_digits(text, start + 9, 9, kind=kind)
    return TimeValue(hour, minutes, seconds, nanoseconds)


class _Chronological:
    """Ordering helpers shared by the temporal values."""

    __slots__ = ()

    def _sort_key(self) -> tuple[object, ...]:
        raise NotImplementedError

    def compare_to(self, other: _Chronological) -> int:
        """Return -1, 0 or 1 as this value is before, equal to or after ``other``.

        Only values of the same type compare.
        """
        if type(other) is not type(self):
            raise IncomparableError(
                f"Cannot compare a {type(self).__name__} with a {type(other).__name__}"
            )
        mine = self._sort_key()
        theirs = other._sort_key()  # noqa: SLF001
        return (mine > theirs) - (mine < theirs)  # type: ignore[operator]

    def is_before(self, other: _Chronological) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: _Chronological) -> bool:
        return self.compare_to(other) > 0


@dataclass(frozen=True, slots=True, order=True)
class DateValue(_Chronological):
    """A calendar date (year, month, day)."""

    year: int
    month: int
    day: int

    @classmethod
    def of(cls, year: int, month: int, day: int = 1) -> DateValue:
        return cls(year, month, day)

    @classmethod
    def parse(cls, text: str | None) -> DateValue:
        """Parse ``YYYY-MM-DD``; the year may be longer and carry a leading ``-``."""
        text = _require_text(text, kind="date")
        date, end = _read_date(text, 0, kind="date", pattern=_DATE_PATTERN)
        if end != len(text):
            raise _bad_length(text, kind="date", pattern=_DATE_PATTERN)
        return date

    @classmethod
    def from_native(cls, value: dt.date | None) -> DateValue:
        """Build from a :class:`datetime.date` (the date part of a ``datetime``)."""
        if value is None:
            raise NullValueError("The date must not be None")
        return cls(value.year, value.month, value.day)

    def to_native(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, slots=True, order=True)
class TimeValue(_Chronological):
    """A time of day with nanosecond precision."""

    hour: int
    minutes: int
    seconds: int = 0
    nanoseconds: int = 0

    @classmethod
    def of(cls, hour: int, minutes: int, seconds: int = 0, nanoseconds: int = 0) -> TimeValue:
        return cls(hour, minutes, seconds, nanoseconds)

    @classmethod
    def midnight(cls) -> TimeValue:
        return cls(0, 0)

    @classmethod
    def parse(cls, text: str | None) -> TimeValue:
        """Parse ``HH:MM``, ``HH:MM:SS`` or ``HH:MM:SS.fffffffff``."""
        text = _require_text(text, kind="time")
        if len(text) not in _TIME_LENGTHS:
            raise _bad_length(text, kind="time", pattern=_TIME_PATTERN)
        return _read_time(text, 0, kind="time")

    @classmethod
    def from_native(cls, value: dt.time | dt.datetime | None) -> TimeValue:
        """Build from a :class:`datetime.time` (the time part of a ``datetime``)."""
        if value is None:
            raise NullValueError("The time must not be None")
        return cls(value.hour, value.minute, value.second, value.microsecond * 1000)

    def to_native(self) -> dt.time:
        return dt.time(self.hour, self.minutes, self.seconds, self.nanoseconds // 1000)

    def _sort_key(self) -> tuple[int, int, int, int]:
        return (self.hour, self.minutes, self.seconds, self.nanoseconds)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minutes:02d}:{self.seconds:02d}.{self.nanoseconds:09d}"


@dataclass(frozen=True, slots=True, order=True)
class DateTimeValue(_Chronological):
    """A date combined with a time of day (midnight when omitted)."""

    date: DateValue
    time: TimeValue = field(default_factory=TimeValue.midnight)

    @classmethod
    def of(cls, date: DateValue, time: TimeValue | None = None) -> DateTimeValue:
        return cls(date, time if time is not None else TimeValue.midnight())

    @classmethod
    def parse(cls, text: str | None) -> DateTimeValue:
        """Parse ``YYYY-MM-DDTHH:MM[:SS[.fffffffff]]``."""
        text = _require_text(text, kind="date/time")
        date, end = _read_date(text, 0, kind="date/time", pattern=_DATE_TIME_PATTERN)
        if len(text) - end - 1 not in _TIME_LENGTHS:
            raise _bad_length(text, kind="date/time", pattern=_DATE_TIME_PATTERN)
        _read_separator(text, end, "T", kind="date/time")
        time = _read_time(text, end + 1, kind="date/time")
        return cls(date, time)

    @classmethod
    def from_native(cls, value: dt.date | dt.datetime | None) -> DateTimeValue:
        """Build from a :class:`datetime.datetime`; a plain date is taken at midnight."""
        if value is None:
            raise NullValueError("The date/time must not be None")
        date = DateValue.from_native(value)
        if isinstance(value, dt.datetime):
            return cls(date, TimeValue.from_native(value))
        return cls(date)

    @property
    def is_midnight(self) -> bool:
        return self.time == TimeValue.midnight()

    def to_native(self) -> dt.datetime:
        return dt.datetime.combine(self.date.to_native(), self.time.to_native())

    def _sort_key(self) -> tuple[object, ...]:
        return (self.date._sort_key(), self.time._sort_key())  # noqa: SLF001

    def __str__(self) -> str:
        return f"{self.date}T{self.time}"


type TemporalValue = DateValue | TimeValue | DateTimeValue


__all__ = ["DateTimeValue", "DateValue", "TemporalValue", "TimeValue"]
