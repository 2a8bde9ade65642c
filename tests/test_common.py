# -*- coding: utf-8 -*-
"""
Tests for the shared value types and exceptions in paschalion._common.
"""
import pytest

from paschalion._common import (BigYear, ShortDate, YearMonthDay,
                                YearValueError, OptionsError,
                                InternalCalendarError, JULIAN, GREGORIAN,
                                MILANKOVIC, check_calendar)


class TestBigYearConstruction:
    """Test the accepted and rejected forms of a year."""

    def test_from_digit_string(self):
        assert int(BigYear("2024")) == 2024
        assert int(BigYear("0007")) == 7

    def test_from_int_and_bigyear(self):
        year = BigYear(2024)
        assert BigYear(year) == year
        assert int(BigYear(0)) == 0

    def test_huge_year(self):
        """Test that years beyond any fixed-width integer survive intact"""
        digits = "123456789012345678901234567890"
        assert str(BigYear(digits)) == digits

    @pytest.mark.parametrize("value", ["", "20 24", "-5", "+5", "2024a",
                                       "2024\n", "１２"])
    def test_bad_strings(self, value):
        with pytest.raises(YearValueError, match="decimal digits only"):
            BigYear(value)

    def test_negative_int(self):
        with pytest.raises(YearValueError, match="must not be negative"):
            BigYear(-1)

    @pytest.mark.parametrize("value", [2024.0, None, [2024], True])
    def test_bad_types(self, value):
        with pytest.raises(TypeError):
            BigYear(value)

    def test_checked_minimum(self):
        assert BigYear.checked("2") == 2
        with pytest.raises(YearValueError, match="at least 2"):
            BigYear.checked(1)
        with pytest.raises(YearValueError):
            BigYear.checked("0")

    def test_year_value_error_is_value_error(self):
        assert issubclass(YearValueError, ValueError)
        assert issubclass(OptionsError, ValueError)
        assert issubclass(InternalCalendarError, RuntimeError)


class TestBigYearArithmetic:
    """Test comparisons, arithmetic and hashing of BigYear."""

    def test_comparisons(self):
        assert BigYear(5) < BigYear(6)
        assert BigYear(5) <= 5
        assert BigYear(7) > 6
        assert BigYear(5) != BigYear(6)
        assert BigYear(5) == 5
        assert BigYear(5) != "5"

    def test_add_and_sub(self):
        year = BigYear("2024")
        assert year + 1 == BigYear(2025)
        assert 1 + year == 2025
        assert isinstance(year - 1, BigYear)
        assert year - BigYear(24) == 2000

    def test_sub_below_zero(self):
        with pytest.raises(YearValueError):
            BigYear(1) - 2

    def test_mod(self):
        assert BigYear("33808") % 19 == 7
        assert isinstance(BigYear(2024) % 4, int)

    def test_hash_matches_int(self):
        assert hash(BigYear(2024)) == hash(2024)
        assert len({BigYear(2024), BigYear("2024")}) == 1

    def test_repr_and_index(self):
        assert repr(BigYear(2024)) == "BigYear('2024')"
        assert [10, 20, 30][BigYear(1)] == 20


class TestDateTuples:
    """Test the date namedtuples and calendar checking."""

    def test_short_date(self):
        date = ShortDate(4, 22)
        assert date == (4, 22)
        assert date.month == 4 and date.day == 22

    def test_year_month_day_order(self):
        earlier = YearMonthDay(BigYear(2023), 12, 31)
        later = YearMonthDay(BigYear(2024), 1, 1)
        assert earlier < later
        assert later == (2024, 1, 1)

    def test_check_calendar(self):
        assert check_calendar(JULIAN) == JULIAN
        assert check_calendar(GREGORIAN) == GREGORIAN
        assert check_calendar(MILANKOVIC) == MILANKOVIC
        with pytest.raises(ValueError, match="invalid calendar format"):
            check_calendar(4)
