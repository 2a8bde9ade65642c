# -*- coding: utf-8 -*-
import pytest

from paschalion._common import (JULIAN, GREGORIAN, MILANKOVIC, ShortDate,
                                SUNDAY)
from paschalion import julian


class TestLeapYears:
    """Test the leap year rules."""

    def test_julian_rule_has_no_century_exception(self):
        assert julian.is_leap_year(1900)
        assert julian.is_leap_year(2000)
        assert julian.is_leap_year(2024)
        assert not julian.is_leap_year(2023)

    def test_gregorian_rule(self):
        assert not julian.is_leap_year(1900, GREGORIAN)
        assert julian.is_leap_year(2000, GREGORIAN)
        assert not julian.is_leap_year(2100, GREGORIAN)

    def test_revised_julian_rule(self):
        """Century years are leap when they leave 200 or 600 divided by 900"""
        assert julian.is_leap_year(2000, MILANKOVIC)
        assert julian.is_leap_year(2024, MILANKOVIC)
        assert julian.is_leap_year(2900, MILANKOVIC)
        assert not julian.is_leap_year(2023, MILANKOVIC)
        assert not julian.is_leap_year(1900, MILANKOVIC)
        assert not julian.is_leap_year(2800, MILANKOVIC)
        assert julian.is_leap_year(2800, GREGORIAN)

    def test_string_year(self):
        assert julian.is_leap_year("2024")


class TestMonthDays:
    """Test month lengths and date validation."""

    def test_month_length(self):
        assert julian.month_length(2, False) == 28
        assert julian.month_length(2, True) == 29
        assert julian.month_length(4, False) == 30
        assert julian.month_length(12, True) == 31

    def test_month_length_bad_month(self):
        with pytest.raises(ValueError, match="month must be in 1..12"):
            julian.month_length(13, False)

    def test_is_valid_date(self):
        assert julian.is_valid_date((2, 29), True)
        assert not julian.is_valid_date((2, 29), False)
        assert not julian.is_valid_date((0, 1), False)
        assert not julian.is_valid_date((4, 31), False)

    def test_day_of_year(self):
        assert julian.day_of_year((1, 1), False) == 1
        assert julian.day_of_year((12, 31), True) == 366
        assert julian.day_of_year((4, 22), True) == 113


class TestAddDays:
    """Test walking inside one year."""

    def test_forward_across_months(self):
        assert julian.add_days((1, 30), 3, False) == ShortDate(2, 2)
        assert julian.add_days((2, 28), 1, True) == ShortDate(2, 29)
        assert julian.add_days((2, 28), 1, False) == ShortDate(3, 1)

    def test_backward_across_months(self):
        assert julian.add_days((3, 1), -1, True) == ShortDate(2, 29)
        assert julian.add_days((4, 22), -112, True) == ShortDate(1, 1)

    def test_zero(self):
        assert julian.add_days((6, 15), 0, False) == ShortDate(6, 15)

    def test_leaving_the_year(self):
        """Test that a walk past either end of the year yields None"""
        assert julian.add_days((12, 31), 1, False) is None
        assert julian.add_days((12, 25), 7, True) is None
        assert julian.add_days((1, 1), -1, False) is None

    def test_invalid_start(self):
        with pytest.raises(ValueError, match="day is out of range"):
            julian.add_days((2, 30), 1, True)

    def test_days_between(self):
        assert julian.days_between((1, 1), (12, 31), False) == 364
        assert julian.days_between((4, 22), (2, 12), True) == -70


class TestDayNumbers:
    """Test Julian day numbers, weekdays and conversions."""

    def test_jdn(self):
        assert julian.jdn(2000, 1, 1, GREGORIAN) == 2451545
        assert julian.jdn(1999, 12, 19, JULIAN) == 2451545

    def test_jdn_invalid_date(self):
        with pytest.raises(ValueError):
            julian.jdn(2023, 2, 29)
        with pytest.raises(ValueError):
            julian.jdn(1900, 2, 29, GREGORIAN)

    def test_jdn_bad_calendar(self):
        with pytest.raises(ValueError, match="invalid calendar format"):
            julian.jdn(2000, 1, 1, 0)

    def test_weekday(self):
        assert julian.weekday(2024, 4, 22) == SUNDAY
        # Julian February 29 2024 is Gregorian March 13, a Wednesday
        assert julian.weekday(2024, 2, 29) == 3
        assert julian.weekday(2024, 1, 7, GREGORIAN) == SUNDAY

    def test_julian_to_gregorian(self):
        assert julian.julian_to_gregorian(2024, 4, 22) == (2024, 5, 5)
        assert julian.julian_to_gregorian(2023, 12, 25) == (2024, 1, 7)
        assert julian.julian_to_gregorian(1900, 2, 29) == (1900, 3, 13)

    def test_gregorian_to_julian(self):
        assert julian.gregorian_to_julian(2024, 1, 7) == (2023, 12, 25)
        assert julian.gregorian_to_julian(2000, 1, 1) == (1999, 12, 19)

    def test_round_trip(self):
        for year, month, day in [(2024, 2, 29), (1582, 10, 15), (3, 1, 1),
                                 (2100, 3, 1), (40000, 12, 31)]:
            date = julian.gregorian_to_julian(year, month, day)
            assert julian.julian_to_gregorian(*date) == (year, month, day)

    def test_round_trip_huge_year(self):
        year = 10 ** 30
        date = julian.gregorian_to_julian(year, 6, 1)
        assert julian.julian_to_gregorian(*date) == (year, 6, 1)


class TestRevisedJulian:
    """Test the Revised Julian (Milankovic) calendar."""

    def test_agrees_with_gregorian_until_2800(self):
        assert julian.jdn(2024, 1, 1, MILANKOVIC) == 2460311
        assert julian.jdn(2024, 1, 1, GREGORIAN) == 2460311
        assert julian.jdn(1600, 3, 1, MILANKOVIC) == \
            julian.jdn(1600, 3, 1, GREGORIAN)
        assert julian.weekday(2024, 5, 5, MILANKOVIC) == SUNDAY

    def test_parts_from_gregorian_in_2800(self):
        assert julian.jdn(2800, 3, 1, MILANKOVIC) == \
            julian.jdn(2800, 2, 29, GREGORIAN)
        assert julian.jdn(2900, 3, 1, MILANKOVIC) == \
            julian.jdn(2900, 3, 1, GREGORIAN)
        with pytest.raises(ValueError, match="day is out of range"):
            julian.jdn(2800, 2, 29, MILANKOVIC)

    def test_conversions(self):
        assert julian.julian_to_milankovic(2024, 4, 22) == (2024, 5, 5)
        assert julian.milankovic_to_julian(2024, 5, 5) == (2024, 4, 22)
        assert julian.julian_to_milankovic(2023, 12, 19) == (2024, 1, 1)
        assert julian.julian_to_milankovic(2801, 4, 10) == (2801, 4, 30)
        assert julian.julian_to_gregorian(2801, 4, 10) == (2801, 4, 29)

    def test_huge_year(self):
        year = 10 ** 30 + 5
        date = julian.julian_to_milankovic(year, 3, 1)
        assert julian.jdn(*date, calendar=MILANKOVIC) == \
            julian.jdn(year, 3, 1)
        assert julian.milankovic_to_julian(*date) == (year, 3, 1)
