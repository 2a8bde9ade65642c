# -*- coding: utf-8 -*-
import bisect
from collections import namedtuple

from .._common import ShortDate

__all__ = ["DayRecord", "YearState"]

DayRecord = namedtuple("DayRecord", ["weekday", "glas", "n50", "apostle",
                                     "gospel", "markers"])
DayRecord.__doc__ = """
Everything computed for one day.

``glas`` is ``-1`` from Lazarus Saturday through the Sunday of All Saints and
``n50`` is ``-1`` from the start of Great Lent to the eve of Pentecost.
``markers`` is a sorted tuple of at most eight distinct markers.
"""


class YearState(object):
    """
    The finished calendar of one Julian year.

    Built once by :func:`~paschalion.year.build_year` and shared read-only
    from then on. Days are looked up by ``(month, day)``; markers through a
    marker-sorted index.
    """
    __slots__ = ["_year", "_options", "_pascha", "_winter_indent",
                 "_spring_indent", "_days", "_dates", "_index"]

    def __init__(self, year, options, pascha, days, winter_indent,
                 spring_indent):
        self._year = year
        self._options = options
        self._pascha = pascha
        self._winter_indent = winter_indent
        self._spring_indent = spring_indent
        self._days = dict(days)
        self._dates = tuple(sorted(self._days))
        self._index = tuple(sorted((marker, date)
                                   for date, record in self._days.items()
                                   for marker in record.markers))

    year = property(lambda self: self._year)
    options = property(lambda self: self._options)
    pascha = property(lambda self: self._pascha)
    winter_indent = property(lambda self: self._winter_indent)
    spring_indent = property(lambda self: self._spring_indent)

    def day(self, month, day):
        """The :class:`DayRecord` of a date, ``None`` for a non-existent one."""
        return self._days.get(ShortDate(month, day))

    def days(self):
        """Iterate over ``(date, record)`` pairs in calendar order."""
        for date in self._dates:
            yield date, self._days[date]

    def markers(self):
        """Iterate over ``(marker, date)`` pairs, ordered by marker."""
        return iter(self._index)

    def dates_with(self, marker):
        """All dates carrying ``marker``, in calendar order."""
        i = bisect.bisect_left(self._index, (marker,))
        found = []
        while i < len(self._index) and self._index[i][0] == marker:
            found.append(self._index[i][1])
            i += 1
        return tuple(found)

    def first_date_with(self, marker):
        dates = self.dates_with(marker)
        return dates[0] if dates else None

    def __len__(self):
        return len(self._dates)

    def __contains__(self, date):
        return date in self._days

    def __eq__(self, other):
        if not isinstance(other, YearState):
            return NotImplemented
        return (self._year == other._year and
                self._options == other._options and
                self._winter_indent == other._winter_indent and
                self._spring_indent == other._spring_indent and
                self._days == other._days)

    __hash__ = None

    def __repr__(self):
        return "<%s year=%s pascha=%d-%d>" % (
            self.__class__.__name__, self._year, self._pascha.month,
            self._pascha.day)
