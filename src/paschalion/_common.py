# -*- coding: utf-8 -*-
"""
Value types and exceptions shared by every paschalion module.
"""
import functools
import re
from collections import namedtuple

__all__ = ["BigYear", "ShortDate", "YearMonthDay",
           "JULIAN", "GREGORIAN", "MILANKOVIC", "MIN_YEAR",
           "SUNDAY", "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY",
           "FRIDAY", "SATURDAY",
           "YearValueError", "OptionsError", "InternalCalendarError"]

JULIAN = 1
GREGORIAN = 2
# Revised Julian calendar of Milutin Milankovic
MILANKOVIC = 3

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

# The year before the requested one takes part in every build.
MIN_YEAR = 2

_DIGITS = re.compile(r'[0-9]+\Z')


class YearValueError(ValueError):
    """Raised for a year that is not a non-negative decimal number, or that
    is too small to build a calendar for."""


class OptionsError(ValueError):
    """Raised for a malformed set of lectionary indent options."""


class InternalCalendarError(RuntimeError):
    """
    Raised when the year builder breaks one of its own invariants: a date or
    marker it relies on is missing, a day would carry too many markers, or a
    bounded search ran out of steps.

    This is never an input problem. It means the placement rules do not cover
    the year being built.
    """


def check_calendar(calendar):
    if calendar not in (JULIAN, GREGORIAN, MILANKOVIC):
        raise ValueError("invalid calendar format: {!r}".format(calendar))
    return calendar


@functools.total_ordering
class BigYear(object):
    """
    An arbitrarily large, non-negative year number.

    :param value:
        A string of decimal digits, an ``int`` or another :class:`BigYear`.
        Signs, whitespace and any other characters are rejected with
        :class:`YearValueError`.

    >>> BigYear("2024") + 1
    BigYear('2025')
    >>> BigYear("33808") % 19
    7
    """
    __slots__ = ["_value"]

    def __init__(self, value):
        if isinstance(value, BigYear):
            value = value._value
        elif isinstance(value, bool):
            raise TypeError("year must be a digit string or an integer, "
                            "not bool")
        elif isinstance(value, str):
            if not _DIGITS.match(value):
                raise YearValueError(
                    "year must contain decimal digits only: {!r}".format(value))
            value = int(value)
        elif isinstance(value, int):
            if value < 0:
                raise YearValueError("year must not be negative: %d" % value)
        else:
            raise TypeError("year must be a digit string or an integer, "
                            "not %s" % type(value).__name__)
        self._value = value

    @classmethod
    def checked(cls, value):
        """Return ``value`` as a :class:`BigYear` a calendar can be built for."""
        year = cls(value)
        if year._value < MIN_YEAR:
            raise YearValueError(
                "year must be at least %d, got %d" % (MIN_YEAR, year._value))
        return year

    def __int__(self):
        return self._value

    __index__ = __int__

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self._value))

    def __hash__(self):
        return hash(self._value)

    def _coerce(self, other):
        if isinstance(other, BigYear):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __add__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self.__class__(self._value + value)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self.__class__(self._value - value)

    def __mod__(self, other):
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self._value % other


ShortDate = namedtuple("ShortDate", ["month", "day"])
ShortDate.__doc__ = """A day of some year the context already fixes."""

YearMonthDay = namedtuple("YearMonthDay", ["year", "month", "day"])
YearMonthDay.__doc__ = """
A full date. ``year`` is a :class:`BigYear`, so the natural tuple order
compares years numerically first, then month and day.
"""
