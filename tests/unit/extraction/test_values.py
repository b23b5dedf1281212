"""Tests for numeric value parsing."""

from datetime import date

import pytest

from mdtrack.core.exceptions import MDTrackError, UnparseableValueError
from mdtrack.extraction import parse_number, select_segment


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (5, 5.0),
            (2.25, 2.25),
            ("42", 42.0),
            ("72.5kg", 72.5),
            (" 8 hours", 8.0),
            ("-3", -3.0),
            ("+4", 4.0),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("7.", 7.0),
        ],
    )
    def test_parses(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "kg 72", True, False, None, [1], {"a": 1}, date(2024, 1, 1), float("nan")],
    )
    def test_rejects(self, raw):
        with pytest.raises(UnparseableValueError):
            parse_number(raw)

    def test_error_is_value_error(self):
        """Callers can catch it as a ValueError or an MDTrackError."""
        with pytest.raises(ValueError):
            parse_number("abc")
        with pytest.raises(MDTrackError):
            parse_number("abc")


class TestSelectSegment:
    """Tests for select_segment."""

    def test_string_split_and_stripped(self):
        assert select_segment("120 / 80", 1) == "80"

    def test_list_indexed(self):
        assert select_segment([10, 20, 30], 2) == 30

    def test_single_segment(self):
        assert select_segment("5", 0) == "5"

    @pytest.mark.parametrize("raw,index", [("1/2", 2), ([1], 1), ("1/2", -1)])
    def test_out_of_range(self, raw, index):
        with pytest.raises(UnparseableValueError):
            select_segment(raw, index)

    def test_scalar_rejected(self):
        with pytest.raises(UnparseableValueError):
            select_segment(12, 0)
