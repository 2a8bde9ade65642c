# -*- coding: utf-8 -*-
"""
Bounded memo caches for built years and for day-number arithmetic.

All caches evict in insertion order (first in, first out) once full and are
safe to share between threads: concurrent requests for the same key wait
for a single computation and then all receive its result.
"""
import functools
import threading
from collections import OrderedDict
from warnings import warn

from ._common import (BigYear, YearMonthDay, JULIAN, GREGORIAN, MILANKOVIC,
                      check_calendar)
from . import julian
from .year import build_year, DEFAULT_OPTIONS

__all__ = ["FifoCache", "YearCache", "DateMath", "DEFAULT_CACHE_SIZE"]

DEFAULT_CACHE_SIZE = 3000


def _check_size(maxsize):
    if not isinstance(maxsize, int) or isinstance(maxsize, bool):
        raise TypeError("cache size must be an integer, not %s"
                        % type(maxsize).__name__)
    if maxsize < 1:
        warn("cache size %d is below 1, using 1 instead" % maxsize,
             RuntimeWarning, stacklevel=3)
        return 1
    return maxsize


class FifoCache(object):
    """
    A mapping of at most ``maxsize`` computed values.

    Values are produced by :meth:`get_or_compute`. A factory that raises
    leaves the cache as it was, so a failed computation is retried on the
    next request.
    """

    def __init__(self, maxsize=DEFAULT_CACHE_SIZE):
        self._maxsize = _check_size(maxsize)
        self._data = OrderedDict()
        self._lock = threading.Lock()
        self._pending = {}

    @property
    def maxsize(self):
        return self._maxsize

    def get_or_compute(self, key, factory):
        """
        Return the value cached under ``key``, calling ``factory()`` to
        compute and store it on a miss.
        """
        with self._lock:
            try:
                return self._data[key]
            except KeyError:
                pass
            key_lock = self._pending.get(key)
            if key_lock is None:
                key_lock = self._pending[key] = threading.Lock()

        with key_lock:
            try:
                with self._lock:
                    if key in self._data:
                        return self._data[key]
                value = factory()
                with self._lock:
                    self._store(key, value)
                return value
            finally:
                with self._lock:
                    if self._pending.get(key) is key_lock:
                        del self._pending[key]

    def _store(self, key, value):
        if key in self._data:
            return
        while len(self._data) >= self._maxsize:
            self._data.popitem(last=False)
        self._data[key] = value

    def resize(self, maxsize):
        """Change the capacity, dropping the oldest entries that no longer
        fit."""
        maxsize = _check_size(maxsize)
        with self._lock:
            self._maxsize = maxsize
            while len(self._data) > maxsize:
                self._data.popitem(last=False)

    def clear(self):
        with self._lock:
            self._data.clear()

    def __len__(self):
        with self._lock:
            return len(self._data)

    def __contains__(self, key):
        with self._lock:
            return key in self._data

    def __repr__(self):
        return "<%s %d/%d>" % (self.__class__.__name__, len(self),
                               self._maxsize)


class YearCache(FifoCache):
    """Built :class:`~paschalion.year.YearState` objects keyed by year and
    options."""

    def get(self, year, options=DEFAULT_OPTIONS):
        year = BigYear.checked(year)
        return self.get_or_compute((year, options),
                                   functools.partial(build_year, year,
                                                     options))


# Functions of paschalion.julian converting to and from the Julian calendar
_CONVERSIONS = {
    (JULIAN, GREGORIAN): "julian_to_gregorian",
    (GREGORIAN, JULIAN): "gregorian_to_julian",
    (JULIAN, MILANKOVIC): "julian_to_milankovic",
    (MILANKOVIC, JULIAN): "milankovic_to_julian",
}


class DateMath(object):
    """
    :mod:`paschalion.julian` day numbers and calendar conversions behind
    their own caches. One query can need several of these before it ever
    reaches a built year.
    """

    def __init__(self, maxsize=DEFAULT_CACHE_SIZE):
        self._jdn = FifoCache(maxsize)
        self._conversions = FifoCache(maxsize)

    def _caches(self):
        return self._jdn, self._conversions

    def jdn(self, year, month, day, calendar=JULIAN):
        year = BigYear(year)
        check_calendar(calendar)
        return self._jdn.get_or_compute(
            (year, month, day, calendar),
            functools.partial(julian.jdn, year, month, day, calendar))

    def convert(self, year, month, day, source, target):
        """
        Express a date of calendar ``source`` in calendar ``target``.

        Dates travel between the Gregorian and Revised Julian calendars by
        way of the Julian one.

        :raises ValueError:
            If the date does not exist in ``source`` or a calendar is
            unknown.
        """
        year = BigYear(year)
        check_calendar(source)
        check_calendar(target)
        if source == target:
            if not julian.is_valid_date((month, day),
                                        julian.is_leap_year(year, source)):
                raise ValueError("day is out of range for month: %r"
                                 % ((month, day),))
            return YearMonthDay(year, month, day)
        if JULIAN not in (source, target):
            date = self.convert(year, month, day, source, JULIAN)
            return self.convert(date.year, date.month, date.day, JULIAN,
                                target)
        convert = getattr(julian, _CONVERSIONS[source, target])
        return self._conversions.get_or_compute(
            (year, month, day, source, target),
            functools.partial(convert, year, month, day))

    def resize(self, maxsize):
        for cache in self._caches():
            cache.resize(maxsize)

    def clear(self):
        for cache in self._caches():
            cache.clear()
