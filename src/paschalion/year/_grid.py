# -*- coding: utf-8 -*-
"""
The mutable working area of one year build.
"""
from .._common import ShortDate, InternalCalendarError, SUNDAY
from ..julian import add_days
from .. import markers as mk

__all__ = ["YearGrid", "weekday_map", "MAX_MARKERS"]

#: A day never carries more markers than this.
MAX_MARKERS = 8


def weekday_map(pascha, leap):
    """
    Weekday of every day of a year, found by walking out from Pascha (a
    Sunday) in steps of a week.
    """
    weekdays = {}
    for offset in range(7):
        date = add_days(pascha, offset, leap)
        while date is not None:
            weekdays[date] = (SUNDAY + offset) % 7
            date = add_days(date, 7, leap)
        date = add_days(pascha, offset - 7, leap)
        while date is not None:
            weekdays[date] = (SUNDAY + offset) % 7
            date = add_days(date, -7, leap)
    return weekdays


class YearGrid(object):
    """
    Days of one year with the markers placed on them so far.

    Placement rules write into a grid; the builder then freezes it into a
    :class:`~paschalion.year.YearState`. Any reference to a missing day or
    marker raises :class:`InternalCalendarError`.
    """

    def __init__(self, year, leap, pascha, weekdays=None):
        self.year = year
        self.leap = leap
        self.pascha = ShortDate(*pascha)
        if weekdays is None:
            weekdays = weekday_map(self.pascha, leap)
        self._weekdays = weekdays
        self._markers = {date: set() for date in weekdays}
        self._index = {}

    def __contains__(self, date):
        return date in self._markers

    def dates(self):
        return sorted(self._markers)

    def weekday(self, date):
        try:
            return self._weekdays[date]
        except KeyError:
            raise InternalCalendarError("no such day: %r" % (tuple(date),))

    def shift(self, date, days):
        """``date`` moved by ``days``, which must stay inside the year."""
        moved = add_days(date, days, self.leap)
        if moved is None:
            raise InternalCalendarError(
                "moving %r by %d days leaves the year" % (tuple(date), days))
        return moved

    def place(self, date, *markers):
        date = ShortDate(*date)
        day = self._markers.get(date)
        if day is None:
            raise InternalCalendarError("no such day: %r" % (tuple(date),))
        for marker in markers:
            if marker in day:
                continue
            if len(day) >= MAX_MARKERS:
                raise InternalCalendarError(
                    "%s would be marker %d on %d-%d" % (
                        mk.name(marker), MAX_MARKERS + 1, date.month,
                        date.day))
            day.add(marker)
            self._index.setdefault(marker, set()).add(date)

    def remove(self, date, marker):
        self._markers[date].discard(marker)
        dates = self._index.get(marker)
        if dates is not None:
            dates.discard(date)
            if not dates:
                del self._index[marker]

    def has(self, date, marker):
        return marker in self._markers.get(date, ())

    def markers_on(self, date):
        return tuple(sorted(self._markers.get(date, ())))

    def find(self, marker):
        """Earliest date carrying ``marker``, or ``None``."""
        dates = self._index.get(marker)
        if not dates:
            return None
        return min(dates)

    def date_of(self, marker):
        """Earliest date carrying ``marker``, which must have been placed."""
        date = self.find(marker)
        if date is None:
            raise InternalCalendarError(
                "%s has not been placed" % (mk.name(marker) or marker))
        return date
