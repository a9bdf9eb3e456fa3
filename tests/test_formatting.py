"""Tests for formatting.py"""

from datetime import date, datetime

import pytest

from branchseed.formatting import (
    change_label,
    days_before,
    display_date,
    format_naira,
)


class TestChangeLabel:

    @pytest.mark.parametrize("change,expected", [
        (7, "+7% this month"),
        (-3, "-3% this month"),
        (0, "0% this month"),
    ])
    def test_labels(self, change, expected):
        assert change_label(change) == expected


class TestDates:

    def test_display_date_zero_pads_day(self):
        assert display_date(date(2024, 1, 1)) == "Jan 01, 2024"
        assert display_date(date(2023, 11, 29)) == "Nov 29, 2023"

    def test_display_date_accepts_datetime(self):
        assert display_date(datetime(2024, 9, 5, 23, 59)) == "Sep 05, 2024"

    def test_days_before_crosses_year(self):
        assert days_before(date(2024, 1, 1), 33) == date(2023, 11, 29)

    def test_days_before_leap_day(self):
        assert days_before(date(2024, 3, 1), 1) == date(2024, 2, 29)


class TestFormatNaira:

    def test_rounds_to_kobo(self):
        assert format_naira(137551.69753086418) == "₦137,551.70"

    def test_small_amount(self):
        assert format_naira(20000) == "₦20,000.00"

    def test_negative_amount(self):
        assert format_naira(-1500.5) == "-₦1,500.50"
