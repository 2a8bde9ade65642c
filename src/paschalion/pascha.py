# -*- coding: utf-8 -*-
"""
This module computes the date of Pascha (Orthodox Easter) for any year,
expressed in the Julian, the Gregorian or the Revised Julian calendar.
"""
from ._common import BigYear, ShortDate, YearMonthDay
from .julian import julian_to_gregorian, julian_to_milankovic

__all__ = ["pascha", "julian_pascha", "PASCHA_JULIAN", "PASCHA_GREGORIAN",
           "PASCHA_MILANKOVIC"]

PASCHA_JULIAN = 1
PASCHA_GREGORIAN = 2
PASCHA_MILANKOVIC = 3


def julian_pascha(year):
    """
    Month and day of Pascha in the Julian calendar, by Gauss's congruences.

    Let ``a = year % 19``, ``b = year % 4``, ``c = year % 7``,
    ``d = (19a + 15) % 30``, ``e = (2b + 4c + 6d + 6) % 7``. Pascha falls
    on March ``22 + d + e``, or on April ``d + e - 9`` when that exceeds 31.

    >>> julian_pascha(2024)
    ShortDate(month=4, day=22)
    """
    y = BigYear(year)
    a = y % 19
    b = y % 4
    c = y % 7
    d = (19 * a + 15) % 30
    e = (2 * b + 4 * c + 6 * d + 6) % 7
    if d + e > 9:
        return ShortDate(4, d + e - 9)
    return ShortDate(3, 22 + d + e)


def pascha(year, method=PASCHA_JULIAN):
    """
    Date of Pascha of the Julian ecclesiastical year ``year``.

    Three methods are available:

    1. The Julian calendar date, which is what the Church computes with
    2. The same day expressed in the Gregorian calendar. For very large
       years the Gregorian date can fall into a later Gregorian year, so
       compare the ``year`` field of the result.
    3. The same day in the Revised Julian calendar, which agrees with the
       Gregorian one until 2800

    These methods are represented by the constants:

    * ``PASCHA_JULIAN    = 1``
    * ``PASCHA_GREGORIAN = 2``
    * ``PASCHA_MILANKOVIC = 3``

    The default method is method 1.

    :return:
        A :class:`~paschalion._common.YearMonthDay`.
    """

    if method not in (PASCHA_JULIAN, PASCHA_GREGORIAN, PASCHA_MILANKOVIC):
        raise ValueError("invalid method")

    y = BigYear(year)
    month, day = julian_pascha(y)
    if method == PASCHA_JULIAN:
        return YearMonthDay(y, month, day)
    if method == PASCHA_GREGORIAN:
        return julian_to_gregorian(y, month, day)
    return julian_to_milankovic(y, month, day)
