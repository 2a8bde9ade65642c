# -*- coding: utf-8 -*-
"""
Day arithmetic for the Julian, Gregorian and Revised Julian (Milankovic)
calendars.

Month/day walks (:func:`add_days`) stay inside one year and return ``None``
instead of spilling into the neighbouring year; loops in the year builder
use that as their stop signal. Julian day numbers and the conversions built
on them work for arbitrarily large years.
"""
from ._common import (BigYear, ShortDate, YearMonthDay, JULIAN, GREGORIAN,
                      MILANKOVIC, check_calendar)

__all__ = ["is_leap_year", "month_length", "is_valid_date", "day_of_year",
           "add_days", "days_between", "jdn", "weekday",
           "julian_to_gregorian", "gregorian_to_julian",
           "julian_to_milankovic", "milankovic_to_julian"]

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year, calendar=JULIAN):
    y = int(BigYear(year))
    calendar = check_calendar(calendar)
    if calendar == JULIAN or y % 100:
        return y % 4 == 0
    if calendar == GREGORIAN:
        return y % 400 == 0
    return y % 900 in (200, 600)


def month_length(month, leap):
    if not 1 <= month <= 12:
        raise ValueError("month must be in 1..12, got %r" % (month,))
    if month == 2 and leap:
        return 29
    return _MONTH_LENGTHS[month - 1]


def is_valid_date(date, leap):
    month, day = date
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= month_length(month, leap)


def _require_valid(date, leap):
    if not is_valid_date(date, leap):
        raise ValueError("day is out of range for month: %r" % (tuple(date),))


def day_of_year(date, leap):
    """Ordinal of ``date`` within its year, January 1 being 1."""
    _require_valid(date, leap)
    month, day = date
    return sum(month_length(m, leap) for m in range(1, month)) + day


def add_days(date, days, leap):
    """
    Move ``date`` by ``days`` (which may be negative) within one year.

    :param date:
        A ``(month, day)`` pair.

    :param days:
        Number of days to move; zero returns the date itself.

    :param leap:
        Whether the year has a February 29.

    :return:
        The resulting :class:`ShortDate`, or ``None`` when the move would
        cross December 31 or January 1.
    """
    _require_valid(date, leap)
    month, day = date
    day += days
    while day > month_length(month, leap):
        day -= month_length(month, leap)
        month += 1
        if month > 12:
            return None
    while day < 1:
        month -= 1
        if month < 1:
            return None
        day += month_length(month, leap)
    return ShortDate(month, day)


def days_between(first, second, leap):
    """Signed number of days from ``first`` to ``second`` in one year."""
    return day_of_year(second, leap) - day_of_year(first, leap)


def _revised_centuries(centuries):
    # Century years 1..centuries that are leap in the Revised Julian rule
    return 2 * (centuries // 9) + (centuries % 9 >= 2) + (centuries % 9 >= 6)


def _revised_march_first(year):
    """Days from the Revised Julian March 1 of year 0 to March 1 of
    ``year``."""
    return (365 * year + year // 4 - year // 100
            + _revised_centuries(year // 100))


# Julian day number of the Revised Julian March 1 of year 0
_REVISED_EPOCH = 1721120

# Days in a full 900 year cycle of the Revised Julian calendar
_REVISED_CYCLE = 900 * 365 + 225 - 9 + 2


def jdn(year, month, day, calendar=JULIAN):
    """
    Julian day number of a date in the given calendar.

    >>> jdn(2000, 1, 1, GREGORIAN)
    2451545
    """
    y = int(BigYear(year))
    _require_valid((month, day), is_leap_year(y, calendar))
    a = (14 - month) // 12
    b = y + 4800 - a
    c = month + 12 * a - 3
    result = day + (153 * c + 2) // 5
    if calendar == JULIAN:
        return result + 365 * b + b // 4 - 32083
    if calendar == GREGORIAN:
        return result + 365 * b + b // 4 - b // 100 + b // 400 - 32045
    return result - 1 + _revised_march_first(y - a) + _REVISED_EPOCH


def weekday(year, month, day, calendar=JULIAN):
    """Day of the week, 0 being Sunday and 6 Saturday."""
    return (jdn(year, month, day, calendar) + 1) % 7


def _julian_from_jdn(number):
    a = 32082 + number
    b = (4 * a + 3) // 1461
    c = a - (1461 * b) // 4
    x1 = (5 * c + 2) // 153
    d = c - (153 * x1 + 2) // 5 + 1
    m = x1 + 3 - 12 * (x1 // 10)
    y = b - 4800 + x1 // 10
    return YearMonthDay(BigYear(y), m, d)


def _gregorian_from_jdn(number):
    a = 32044 + number
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    x1 = (4 * c + 3) // 1461
    x2 = c - (1461 * x1) // 4
    x3 = (5 * x2 + 2) // 153
    d = x2 - (153 * x3 + 2) // 5 + 1
    m = x3 + 3 - 12 * (x3 // 10)
    y = 100 * b + x1 - 4800 + x3 // 10
    return YearMonthDay(BigYear(y), m, d)


def _revised_from_jdn(number):
    days = number - _REVISED_EPOCH
    # The estimate is off by at most one year either way
    year = days * 900 // _REVISED_CYCLE
    while _revised_march_first(year + 1) <= days:
        year += 1
    while _revised_march_first(year) > days:
        year -= 1
    days -= _revised_march_first(year)
    x = (5 * days + 2) // 153
    d = days - (153 * x + 2) // 5 + 1
    m = x + 3 - 12 * (x // 10)
    return YearMonthDay(BigYear(year + x // 10), m, d)


def julian_to_gregorian(year, month, day):
    return _gregorian_from_jdn(jdn(year, month, day, JULIAN))


def gregorian_to_julian(year, month, day):
    return _julian_from_jdn(jdn(year, month, day, GREGORIAN))


def julian_to_milankovic(year, month, day):
    """
    The Revised Julian date of a Julian date. From 1600 to 2800 it is the
    Gregorian date as well.

    >>> julian_to_milankovic(2024, 4, 22)
    YearMonthDay(year=BigYear('2024'), month=5, day=5)
    """
    return _revised_from_jdn(jdn(year, month, day, JULIAN))


def milankovic_to_julian(year, month, day):
    return _julian_from_jdn(jdn(year, month, day, MILANKOVIC))
