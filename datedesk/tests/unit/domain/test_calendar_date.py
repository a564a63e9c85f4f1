from __future__ import annotations

from datetime import date

import pytest

from datedesk.domain.calendar_date import (
    DateDifference,
    DateParseError,
    FormatPattern,
    date_difference,
    format_date,
    is_valid_date,
    month_length,
    parse_date,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("05.03.2024", date(2024, 3, 5)),
        ("29.02.2024", date(2024, 2, 29)),
        ("31.12.2100", date(2100, 12, 31)),
        ("5.3.2024", date(2024, 3, 5)),
    ],
)
def test_parse_date_accepts_real_days(text: str, expected: date) -> None:
    assert parse_date(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "31.02.2024",
        "31.04.2024",
        "29.02.2023",
        "00.01.2024",
        "32.01.2024",
        "01.13.2024",
        "2024-03-05",
        "05.03.24",
        "05.03.2024x",
        " 05.03.2024",
        "",
        "not-a-date",
        "\u0665.\u0663.\u0662\u0660\u0662\u0664",
        "\uff10\uff15.03.2024",
    ],
)
def test_parse_date_rejects_without_rollover(text: str) -> None:
    with pytest.raises(DateParseError):
        parse_date(text)
    assert is_valid_date(text) is False


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_date("31.04.2024")


def test_format_date_patterns() -> None:
    value = date(2024, 3, 5)
    assert format_date(value, FormatPattern.ISO) == "2024-03-05"
    assert format_date(value, FormatPattern.GERMAN) == "05.03.2024"
    assert format_date(value, FormatPattern.US) == "03/05/2024"
    assert format_date(value, FormatPattern.LONG) == "Tuesday, 05 March 2024"


def test_format_pattern_from_key() -> None:
    assert FormatPattern.from_key("us") is FormatPattern.US
    assert FormatPattern.from_key(FormatPattern.LONG) is FormatPattern.LONG
    assert FormatPattern.from_key("julian") is FormatPattern.ISO
    assert FormatPattern.from_key(None) is FormatPattern.ISO


def test_month_length_handles_leap_years() -> None:
    assert month_length(2024, 2) == 29
    assert month_length(2023, 2) == 28
    assert month_length(2024, 4) == 30


def test_date_difference_borrows_from_earlier_month() -> None:
    diff = date_difference(date(2024, 1, 31), date(2024, 3, 1))
    assert diff == DateDifference(years=0, months=1, days=1, total_days=30)


def test_date_difference_borrows_year() -> None:
    diff = date_difference(date(2023, 11, 20), date(2024, 2, 10))
    # Nov has 30 days: 10 - 20 + 30 = 20 days, 2 - 11 - 1 + 12 = 2 months.
    assert diff == DateDifference(years=0, months=2, days=20, total_days=82)


def test_date_difference_is_order_independent() -> None:
    a = date(1999, 12, 31)
    b = date(2024, 6, 15)
    assert date_difference(a, b) == date_difference(b, a)
