"""Domain package exports for date values and the string-level engine."""

from .calendar_date import (
    DateDifference,
    DateParseError,
    FormatPattern,
    date_difference,
    format_date,
    is_valid_date,
    parse_date,
)
from .date_engine import FORMAT_ERROR, DateFormatEngine

__all__ = [
    "DateDifference",
    "DateFormatEngine",
    "DateParseError",
    "FORMAT_ERROR",
    "FormatPattern",
    "date_difference",
    "format_date",
    "is_valid_date",
    "parse_date",
]
