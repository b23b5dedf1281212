"""Tests for DayCalendar and date format handling."""

from datetime import date

import pytest

from mdtrack.core.dates import DayCalendar, to_strftime
from mdtrack.core.exceptions import DocumentDateError


class TestToStrftime:
    """Tests for moment-style format translation."""

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("YYYY-MM-DD", "%Y-%m-%d"),
            ("DD.MM.YYYY", "%d.%m.%Y"),
            ("YYYYMMDD", "%Y%m%d"),
            ("YY-M-D", "%y-%m-%d"),
            ("DD MMMM YYYY", "%d %B %Y"),
            ("MMM DD, YYYY", "%b %d, %Y"),
            ("%Y/%m/%d", "%Y/%m/%d"),
        ],
    )
    def test_translation(self, fmt, expected):
        assert to_strftime(fmt) == expected


class TestDayCalendar:
    """Tests for parsing, formatting and stepping through days."""

    def test_default_format(self):
        calendar = DayCalendar()

        assert calendar.date_format == "YYYY-MM-DD"
        assert calendar.parse("2024-01-15") == date(2024, 1, 15)
        assert calendar.format(date(2024, 1, 5)) == "2024-01-05"

    def test_custom_format_round_trip(self):
        calendar = DayCalendar("DD.MM.YYYY")
        day = calendar.parse("29.02.2024")

        assert day == date(2024, 2, 29)
        assert calendar.format(day) == "29.02.2024"

    def test_unpadded_month_and_day(self):
        calendar = DayCalendar("YYYY-M-D")

        assert calendar.parse("2024-1-5") == date(2024, 1, 5)
        assert calendar.parse("2024-11-25") == date(2024, 11, 25)
        assert calendar.format(date(2024, 1, 5)) == "2024-1-5"
        assert calendar.parse("2024-01-05") is None

    def test_strftime_format(self):
        calendar = DayCalendar("%Y%m%d")
        assert calendar.parse("20240115") == date(2024, 1, 15)

    @pytest.mark.parametrize(
        "text",
        ["2024-02-30", "2023-02-29", "2024-1-5", "2024-01-15 extra", "", "yesterday"],
    )
    def test_invalid_dates_rejected(self, text):
        calendar = DayCalendar()

        assert calendar.parse(text) is None
        with pytest.raises(DocumentDateError):
            calendar.parse_strict(text)

    def test_date_error_carries_input(self):
        with pytest.raises(DocumentDateError) as exc_info:
            DayCalendar().parse_strict("nope")

        assert exc_info.value.text == "nope"
        assert exc_info.value.date_format == "YYYY-MM-DD"

    def test_days_between(self):
        assert DayCalendar.days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2
        assert DayCalendar.days_between(date(2024, 3, 1), date(2024, 2, 28)) == -2

    def test_add_days(self):
        assert DayCalendar.add_days(date(2023, 12, 31), 1) == date(2024, 1, 1)
        assert DayCalendar.add_days(date(2024, 1, 1), -1) == date(2023, 12, 31)

    def test_iter_days_inclusive(self):
        days = list(DayCalendar().iter_days(date(2024, 2, 28), date(2024, 3, 1)))
        assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]

    def test_iter_days_empty_when_reversed(self):
        assert list(DayCalendar().iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DayCalendar().date_format = "DD"
