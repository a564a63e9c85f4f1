"""String-in/string-out date operations used by the dispatcher.

Every operation accepts raw text and answers with display text. Parse
failures never escape as exceptions; they become ``FORMAT_ERROR``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from .calendar_date import (
    TIMESTAMP_PATTERN,
    DateParseError,
    FormatPattern,
    date_difference,
    format_date,
    parse_date,
)

FORMAT_ERROR = "invalid date format, expected dd.mm.yyyy"
IN_RANGE = "Date is within the valid range."

Clock = Callable[[], datetime]


class DateFormatEngine:
    """Parse, validate, reformat and compare ``dd.mm.yyyy`` dates."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._log = logging.getLogger(__name__)

    def current_timestamp(self) -> str:
        return self._clock().strftime(TIMESTAMP_PATTERN)

    def is_valid_date(self, text: str) -> bool:
        try:
            parse_date(text)
        except DateParseError as exc:
            self._log.debug("Rejected date text: %s", exc)
            return False
        return True

    def convert(self, text: str, target: Union[FormatPattern, str]) -> str:
        """Render ``text`` under ``target``; unknown target keys fall back to ISO."""
        try:
            value = parse_date(text)
        except DateParseError as exc:
            self._log.debug("Convert failed: %s", exc)
            return FORMAT_ERROR
        return format_date(value, FormatPattern.from_key(target))

    def validate_in_range(self, text: str, low: str, high: str) -> str:
        """Check ``low <= text <= high`` (inclusive); bounds are echoed as given."""
        try:
            value = parse_date(text)
            start = parse_date(low)
            end = parse_date(high)
        except DateParseError as exc:
            self._log.debug("Range check failed: %s", exc)
            return FORMAT_ERROR
        if value < start or value > end:
            return f"Date is outside the valid range ({low} to {high})."
        return IN_RANGE

    def difference(self, first: str, second: str) -> str:
        try:
            a = parse_date(first)
            b = parse_date(second)
        except DateParseError as exc:
            self._log.debug("Difference failed: %s", exc)
            return FORMAT_ERROR
        diff = date_difference(a, b)
        return (
            "Difference:\n"
            f"{diff.years} years, {diff.months} months, {diff.days} days\n"
            f"(total: {diff.total_days} days)"
        )


__all__ = ["Clock", "DateFormatEngine", "FORMAT_ERROR", "IN_RANGE"]
