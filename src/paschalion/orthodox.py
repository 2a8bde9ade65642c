# -*- coding: utf-8 -*-
"""
The query interface of paschalion.

:class:`OrthodoxCalendar` answers questions about single days (tone, week
after Pentecost, readings, feasts) and finds the days that carry given
markers, in either the Julian or the Gregorian calendar. Built years are
cached per calendar instance; :data:`default_calendar` is a ready instance
with the default lectionary options.
"""
import threading

from ._common import (BigYear, ShortDate, YearMonthDay, JULIAN, GREGORIAN,
                      MILANKOVIC, OptionsError, check_calendar)
from .julian import is_leap_year, is_valid_date
from .pascha import julian_pascha
from . import markers as mk
from . import readings
from .cache import YearCache, DateMath, DEFAULT_CACHE_SIZE
from .year import Options, DEFAULT_OPTIONS

__all__ = ["OrthodoxCalendar", "default_calendar"]


class OrthodoxCalendar(object):
    """
    Liturgical calendar queries over a cache of built years.

    :param cache_size:
        How many built years, and separately how many day-number
        conversions, to keep. Values below 1 are raised to 1 with a
        :class:`RuntimeWarning`.

    :param options:
        Initial lectionary :class:`~paschalion.year.Options`.

    Every ``year`` argument is a digit string or a non-negative ``int`` of
    any size and must be at least 2; anything else raises
    :class:`~paschalion._common.YearValueError`. ``calendar`` is either
    :data:`~paschalion._common.JULIAN` (the default),
    :data:`~paschalion._common.GREGORIAN` or
    :data:`~paschalion._common.MILANKOVIC` (Revised Julian) and says how
    the date arguments and returned dates are expressed. A month and day
    that do not exist give the not-found value of the query: ``-1``,
    ``None``, an empty tuple or :data:`~paschalion.readings.NO_READING`.

    Instances may be shared between threads.
    """

    def __init__(self, cache_size=DEFAULT_CACHE_SIZE, options=None):
        if options is None:
            options = DEFAULT_OPTIONS
        elif not isinstance(options, Options):
            raise OptionsError("options must be an Options instance, not %s"
                               % type(options).__name__)
        self._options = options
        self._lock = threading.Lock()
        self._years = YearCache(cache_size)
        self._math = DateMath(self._years.maxsize)

    def __repr__(self):
        return "%s(cache_size=%d, options=%r)" % (
            self.__class__.__name__, self._years.maxsize, self._options)

    # Configuration

    @property
    def options(self):
        """The :class:`~paschalion.year.Options` in effect."""
        return self._options

    @property
    def cache_size(self):
        return self._years.maxsize

    def _use(self, options):
        with self._lock:
            if options != self._options:
                self._options = options
                self._years.clear()

    def set_winter_weeks(self, shortfall, weeks):
        """
        Substitute weeks for a winter shortfall of ``shortfall`` (1..5)
        weeks. ``weeks`` must hold ``shortfall`` week numbers in 1..33.

        :return:
            ``True`` if the weeks were accepted, ``False`` otherwise.
        """
        try:
            options = self._options.replace(winter={shortfall: weeks})
        except OptionsError:
            return False
        self._use(options)
        return True

    def set_spring_weeks(self, weeks):
        """The two substitute weeks of a short autumn cycle; see
        :meth:`set_winter_weeks`."""
        try:
            options = self._options.replace(spring=weeks)
        except OptionsError:
            return False
        self._use(options)
        return True

    def set_apostle_spring_indent(self, flag):
        try:
            options = self._options.replace(apostle_spring_indent=flag)
        except OptionsError:
            return False
        self._use(options)
        return True

    def set_cache_size(self, size):
        self._years.resize(size)
        self._math.resize(self._years.maxsize)

    # Conversions

    def jdn(self, year, month, day, calendar=JULIAN):
        return self._math.jdn(year, month, day, calendar)

    def convert(self, year, month, day, source, target):
        """A date of calendar ``source`` as a
        :class:`~paschalion._common.YearMonthDay` of calendar ``target``."""
        return self._math.convert(year, month, day, source, target)

    def julian_to_gregorian(self, year, month, day):
        return self._math.convert(year, month, day, JULIAN, GREGORIAN)

    def gregorian_to_julian(self, year, month, day):
        return self._math.convert(year, month, day, GREGORIAN, JULIAN)

    def julian_to_milankovic(self, year, month, day):
        return self._math.convert(year, month, day, JULIAN, MILANKOVIC)

    def milankovic_to_julian(self, year, month, day):
        return self._math.convert(year, month, day, MILANKOVIC, JULIAN)

    # Internals

    def _state(self, year):
        return self._years.get(year, self._options)

    def _to_julian(self, year, month, day, calendar):
        """A date of ``calendar`` as a Julian :class:`YearMonthDay`, or
        ``None`` if the date does not exist."""
        if not is_valid_date((month, day), is_leap_year(year, calendar)):
            return None
        if calendar == JULIAN:
            return YearMonthDay(year, month, day)
        return self._math.convert(year, month, day, calendar, JULIAN)

    def _from_julian(self, date, calendar):
        if calendar == JULIAN:
            return date
        return self._math.convert(date.year, date.month, date.day, JULIAN,
                                  calendar)

    def _record(self, year, month, day, calendar):
        check_calendar(calendar)
        date = self._to_julian(BigYear.checked(year), month, day, calendar)
        if date is None:
            return None
        return self._state(BigYear.checked(date.year)).day(date.month,
                                                           date.day)

    def _year_bounds(self, year, calendar):
        year = BigYear.checked(year)
        first = self._to_julian(year, 1, 1, calendar)
        last = self._to_julian(year, 12, 31, calendar)
        return first._replace(year=BigYear.checked(first.year)), last

    def _search(self, first, last, markers, require_all):
        """
        Julian dates from ``first`` to ``last`` (inclusive) carrying any, or
        with ``require_all`` every one, of ``markers``; in calendar order.
        """
        markers = tuple(markers)
        if not markers or last < first:
            return []
        found = []
        year = first.year
        while year <= last.year:
            state = self._state(year)
            hits = [set(state.dates_with(marker)) for marker in markers]
            if require_all:
                dates = set.intersection(*hits)
            else:
                dates = set.union(*hits)
            for month, day in sorted(dates):
                date = YearMonthDay(year, month, day)
                if first <= date <= last:
                    found.append(date)
            year = year + 1
        return found

    def _search_year(self, year, calendar, markers, require_all):
        check_calendar(calendar)
        first, last = self._year_bounds(year, calendar)
        return [ShortDate(*self._from_julian(date, calendar)[1:])
                for date in self._search(first, last, markers, require_all)]

    def _search_period(self, first, last, calendar, markers, require_all):
        check_calendar(calendar)
        bounds = []
        for year, month, day in (first, last):
            date = self._to_julian(BigYear.checked(year), month, day,
                                   calendar)
            if date is None:
                return []
            bounds.append(date._replace(year=BigYear.checked(date.year)))
        return [self._from_julian(date, calendar)
                for date in self._search(bounds[0], bounds[1], markers,
                                         require_all)]

    # Year queries

    def pascha(self, year, calendar=JULIAN):
        """
        Date of Pascha in ``year`` of ``calendar``.

        :return:
            A :class:`~paschalion._common.ShortDate`. For a Gregorian or
            Revised Julian year in which no Julian Pascha falls, ``None``.
        """
        year = BigYear.checked(year)
        if check_calendar(calendar) == JULIAN:
            return julian_pascha(year)
        candidates = sorted({self._to_julian(year, 1, 1, calendar).year,
                             self._to_julian(year, 12, 31, calendar).year})
        for julian_year in candidates:
            month, day = julian_pascha(julian_year)
            date = self._math.convert(julian_year, month, day, JULIAN,
                                      calendar)
            if date.year == year:
                return ShortDate(date.month, date.day)
        return None

    def winter_indent(self, year):
        """Winter indent of Julian ``year``, in ``-5 .. 0``."""
        return self._state(year).winter_indent

    def spring_indent(self, year):
        """Autumn indent of Julian ``year``, in ``-2 .. 3``."""
        return self._state(year).spring_indent

    def apostle_fast_length(self, year):
        """Days of the Apostles' fast in Julian ``year``."""
        return len(self._state(year).dates_with(mk.POST_PETR))

    # Day queries

    def weekday(self, year, month, day, calendar=JULIAN):
        """Weekday of a date, 0 being Sunday; ``-1`` for a missing date."""
        record = self._record(year, month, day, calendar)
        return -1 if record is None else record.weekday

    def glas(self, year, month, day, calendar=JULIAN):
        """Tone of the week, 1..8; ``-1`` when none is sung."""
        record = self._record(year, month, day, calendar)
        return -1 if record is None else record.glas

    def n50(self, year, month, day, calendar=JULIAN):
        """Week after Pentecost; ``-1`` in Great Lent and the Paschal
        season."""
        record = self._record(year, month, day, calendar)
        return -1 if record is None else record.n50

    def apostle(self, year, month, day, calendar=JULIAN):
        record = self._record(year, month, day, calendar)
        return readings.NO_READING if record is None else record.apostle

    def gospel(self, year, month, day, calendar=JULIAN):
        record = self._record(year, month, day, calendar)
        return readings.NO_READING if record is None else record.gospel

    def resurrection_gospel(self, year, month, day, calendar=JULIAN):
        """Sunday Matins Gospel; :data:`~paschalion.readings.NO_READING` on
        weekdays."""
        record = self._record(year, month, day, calendar)
        if record is None:
            return readings.NO_READING
        return readings.resurrection_gospel(record.weekday, record.n50,
                                            record.markers)

    def properties(self, year, month, day, calendar=JULIAN):
        """Sorted tuple of the markers of a date."""
        record = self._record(year, month, day, calendar)
        return () if record is None else record.markers

    def is_date_of(self, year, month, day, marker, calendar=JULIAN):
        return marker in self.properties(year, month, day, calendar)

    # Marker lookups within one year

    def date_with(self, year, marker, calendar=JULIAN):
        """
        First day of ``year`` that carries ``marker``.

        :return:
            A :class:`~paschalion._common.ShortDate` or ``None``.
        """
        found = self._search_year(year, calendar, (marker,), False)
        return found[0] if found else None

    def dates_with(self, year, marker, calendar=JULIAN):
        """Every day of ``year`` that carries ``marker``, as a tuple."""
        return tuple(self._search_year(year, calendar, (marker,), False))

    def date_with_any_of(self, year, markers, calendar=JULIAN):
        found = self._search_year(year, calendar, markers, False)
        return found[0] if found else None

    def date_with_all_of(self, year, markers, calendar=JULIAN):
        """First day of ``year`` carrying every one of ``markers``; it may
        carry others as well."""
        found = self._search_year(year, calendar, markers, True)
        return found[0] if found else None

    def dates_with_any_of(self, year, markers, calendar=JULIAN):
        return tuple(self._search_year(year, calendar, markers, False))

    # Marker lookups over a period

    def date_in_period_with(self, first, last, marker, calendar=JULIAN):
        """
        First day from ``first`` to ``last`` (both included) that carries
        ``marker``.

        :param first:
            A ``(year, month, day)`` triple, such as a
            :class:`~paschalion._common.YearMonthDay`.

        :param last:
            The end of the period, in the same form.

        :return:
            A :class:`~paschalion._common.YearMonthDay` or ``None``.
        """
        found = self._search_period(first, last, calendar, (marker,), False)
        return found[0] if found else None

    def dates_in_period_with(self, first, last, marker, calendar=JULIAN):
        return tuple(self._search_period(first, last, calendar, (marker,),
                                         False))

    def date_in_period_with_any_of(self, first, last, markers,
                                   calendar=JULIAN):
        found = self._search_period(first, last, calendar, markers, False)
        return found[0] if found else None

    def dates_in_period_with_any_of(self, first, last, markers,
                                    calendar=JULIAN):
        """Every day from ``first`` to ``last`` carrying at least one of
        ``markers``, as a tuple."""
        return tuple(self._search_period(first, last, calendar, markers,
                                         False))

    def date_in_period_with_all_of(self, first, last, markers,
                                   calendar=JULIAN):
        found = self._search_period(first, last, calendar, markers, True)
        return found[0] if found else None


default_calendar = OrthodoxCalendar()
