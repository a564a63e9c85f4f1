"""Calendar date value helpers: strict parsing, fixed output patterns, differences.

Only one input pattern is accepted (``dd.mm.yyyy``). Parsing goes through
``datetime.strptime`` which rejects impossible days (``31.04.2024``) instead of
rolling them over into the next month.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Union

INPUT_PATTERN = "%d.%m.%Y"
TIMESTAMP_PATTERN = "%d.%m.%Y %H:%M:%S"

# Locale-independent names for the long pattern.
_WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class DateParseError(ValueError):
    """Raised when text is not a real calendar day in ``dd.mm.yyyy`` form."""

    def __init__(self, text: str) -> None:
        super().__init__(f"not a dd.mm.yyyy date: {text!r}")
        self.text = text


class FormatPattern(str, Enum):
    """Closed set of output patterns."""

    ISO = "ISO"
    GERMAN = "GERMAN"
    US = "US"
    LONG = "LONG"

    @classmethod
    def from_key(cls, key: Union["FormatPattern", str, None]) -> "FormatPattern":
        """Resolve a pattern from an enum member or key name; unknown keys map to ISO."""
        if isinstance(key, FormatPattern):
            return key
        text = (key or "").strip().upper()
        try:
            return cls(text)
        except ValueError:
            return cls.ISO


@dataclass(frozen=True)
class DateDifference:
    years: int
    months: int
    days: int
    total_days: int


def parse_date(text: str) -> date:
    """Parse ``dd.mm.yyyy`` strictly.

    Raises:
        DateParseError: when the text has the wrong shape or names a day that
            does not exist.
    """
    if not isinstance(text, str) or not text or not text.isascii() or text != text.strip():
        raise DateParseError(str(text))
    try:
        return datetime.strptime(text, INPUT_PATTERN).date()
    except ValueError as exc:
        raise DateParseError(text) from exc


def is_valid_date(text: str) -> bool:
    try:
        parse_date(text)
    except DateParseError:
        return False
    return True


def format_date(value: date, pattern: FormatPattern) -> str:
    """Render a date under one of the fixed output patterns."""
    if pattern is FormatPattern.GERMAN:
        return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"
    if pattern is FormatPattern.US:
        return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
    if pattern is FormatPattern.LONG:
        weekday = _WEEKDAY_NAMES[value.weekday()]
        month = _MONTH_NAMES[value.month - 1]
        return f"{weekday}, {value.day:02d} {month} {value.year:04d}"
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def month_length(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def date_difference(first: date, second: date) -> DateDifference:
    """Return the calendar distance between two dates, order-independent.

    Days borrowed from the month component use the length of the earlier
    date's month (Jan 31 -> Mar 1 is 1 month 1 day in 2024).
    """
    start, end = (second, first) if first > second else (first, second)
    total_days = end.toordinal() - start.toordinal()

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        months -= 1
        days += month_length(start.year, start.month)
    if months < 0:
        years -= 1
        months += 12

    return DateDifference(years=years, months=months, days=days, total_days=total_days)


__all__ = [
    "DateDifference",
    "DateParseError",
    "FormatPattern",
    "INPUT_PATTERN",
    "TIMESTAMP_PATTERN",
    "date_difference",
    "format_date",
    "is_valid_date",
    "month_length",
    "parse_date",
]
