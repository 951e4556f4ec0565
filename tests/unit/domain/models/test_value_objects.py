"""
Unit tests for spent time value objects.
"""

import pytest
from datetime import date
from decimal import Decimal

from app.domain.models.base import InvalidDateError, InvalidHoursError
from app.domain.models.value_objects import Hours, ReportRange, numeric_text, parse_date


class TestParseDate:
    """Test cases for date parsing."""

    def test_parses_iso_date(self):
        assert parse_date("2024-01-10") == date(2024, 1, 10)

    def test_passes_dates_through(self):
        assert parse_date(date(2024, 2, 29)) == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["", "10/01/2024", "2024-13-01", "2024-02-30", "yesterday", None])
    def test_rejects_malformed_dates(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date(value)
        assert exc_info.value.code == "INVALID_DATE"


class TestHours:
    """Test cases for the Hours value object."""

    @pytest.mark.parametrize("raw,expected", [
        ("3", Decimal("3")),
        ("3.5", Decimal("3.5")),
        ("+2", Decimal("2")),
        ("-1.25", Decimal("-1.25")),
        ("-0.0", Decimal("-0.0")),
    ])
    def test_accepts_plain_numbers(self, raw, expected):
        assert Hours.parse(raw).value == expected

    @pytest.mark.parametrize("raw", ["abc", "1,5", "--3", "1e5", "", " 3", "3.", ".5", None])
    def test_rejects_non_numeric_input(self, raw):
        assert Hours.is_numeric(raw) is False
        with pytest.raises(InvalidHoursError):
            Hours.parse(raw)

    def test_accepts_numeric_types(self):
        assert Hours.parse(2).value == Decimal("2")
        assert Hours.parse(Decimal("1.5")).value == Decimal("1.5")

    def test_numbers_are_read_positionally(self):
        assert Hours.parse(1e-07).value == Decimal("0.0000001")
        assert Hours.parse(1e5).value == Decimal("100000.0")
        assert numeric_text(Decimal("1E+2")) == "100"

    def test_rejects_booleans(self):
        assert Hours.is_numeric(True) is False


class TestReportRange:
    """Test cases for the report range."""

    def test_trailing_days(self):
        report_range = ReportRange.trailing_days(7, today=date(2024, 1, 10))

        assert report_range.from_date == date(2024, 1, 3)
        assert report_range.to_date == date(2024, 1, 10)

    def test_bounds_are_inclusive(self):
        report_range = ReportRange(date(2024, 1, 1), date(2024, 1, 7))

        assert report_range.contains(date(2024, 1, 1))
        assert report_range.contains(date(2024, 1, 7))
        assert not report_range.contains(date(2024, 1, 8))

    def test_extends_end_to_later_day(self):
        report_range = ReportRange(date(2024, 1, 1), date(2024, 1, 7))

        extended = report_range.extended_to_include(date(2024, 1, 10))

        assert extended.as_tuple() == (date(2024, 1, 1), date(2024, 1, 10))

    def test_extends_start_to_earlier_day(self):
        report_range = ReportRange(date(2024, 1, 5), date(2024, 1, 7))

        extended = report_range.extended_to_include(date(2024, 1, 2))

        assert extended.as_tuple() == (date(2024, 1, 2), date(2024, 1, 7))

    def test_day_inside_range_leaves_it_unchanged(self):
        report_range = ReportRange(date(2024, 1, 1), date(2024, 1, 7))

        assert report_range.extended_to_include(date(2024, 1, 4)) == report_range

    def test_inverted_range_has_no_days(self):
        report_range = ReportRange(date(2024, 1, 7), date(2024, 1, 1))

        assert report_range.is_inverted
        assert report_range.days() == []

    def test_days_lists_every_day(self):
        report_range = ReportRange(date(2024, 1, 30), date(2024, 2, 2))

        assert report_range.days() == [
            date(2024, 1, 30), date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 2)
        ]
