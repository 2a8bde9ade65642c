# -*- coding: utf-8 -*-
"""
Construction of a :class:`~paschalion.year.YearState`.

A build runs in phases, each one reading only what earlier phases produced:

1. weekdays of the year and of the year before it;
2. marker placement (:data:`~paschalion.year._rules.RULES`);
3. the tone (glas) of every day;
4. the week after Pentecost (n50) of every day;
5. the winter and autumn lectionary indents;
6. Gospel and Apostle readings.
"""
from collections import namedtuple

from .._common import (BigYear, ShortDate, OptionsError, InternalCalendarError,
                       SUNDAY, MONDAY)
from ..julian import is_leap_year, add_days, days_between
from ..pascha import julian_pascha
from .. import markers as mk
from ..readings import (NO_READING, gospel_for_week, gospel_for_markers,
                        apostle_for_week, apostle_for_markers)
from ._grid import YearGrid, weekday_map
from ._options import Options, DEFAULT_OPTIONS
from ._rules import RULES, apply_rules
from ._state import DayRecord, YearState

__all__ = ["build_year"]

# Tones run 1 to 8; the Monday after All Saints starts in tone 8.
_TONES = 8

# Week numbers of the reading cycle at the Sunday after the Exaltation and at
# the Sunday of the Publican and the Pharisee.
_EXALTATION_WEEK = 17
_PUBLICAN_WEEK = 33

# Sunday readings of a winter shortfall, in the order they are read. Keyed by
# the number of Sundays in the shortfall.
_SHORTFALL_SUNDAYS = {
    1: (32,),
    2: (31, 32),
    3: (30, 31, 32),
    4: (30, 31, 17, 32),
}

_Previous = namedtuple("_Previous", ["leap", "pascha", "weekdays"])

_Cycle = namedtuple("_Cycle", ["winter", "spring", "previous_spring",
                               "new_cycle"])


def build_year(year, options=None):
    """
    Compute the complete liturgical calendar of a Julian year.

    :param year:
        The year as a digit string, an ``int`` or a
        :class:`~paschalion._common.BigYear`; at least 2.

    :param options:
        The lectionary :class:`Options`; defaults to :data:`DEFAULT_OPTIONS`.

    :raises YearValueError:
        For a malformed or too small year.

    :raises OptionsError:
        If ``options`` is not an :class:`Options` instance.

    :raises InternalCalendarError:
        If the placement rules leave a gap for this year.

    :return:
        A :class:`YearState`. The same arguments always produce equal states.
    """
    year = BigYear.checked(year)
    if options is None:
        options = DEFAULT_OPTIONS
    elif not isinstance(options, Options):
        raise OptionsError("options must be an Options instance, not %s"
                           % type(options).__name__)

    previous_year = year - 1
    previous_leap = is_leap_year(previous_year)
    previous_pascha = julian_pascha(previous_year)
    previous = _Previous(previous_leap, previous_pascha,
                         weekday_map(previous_pascha, previous_leap))

    grid = YearGrid(year, is_leap_year(year), julian_pascha(year))
    apply_rules(grid, RULES)

    glas = _assign_glas(grid, previous)
    n50 = _assign_n50(grid, previous)
    cycle = _reading_cycle(grid, n50, previous)
    apostle_indent = options.apostle_spring_indent
    gospels = _assign_readings(grid, n50, cycle, options.winter_weeks,
                               options.spring_weeks, gospel_for_week,
                               gospel_for_markers, cycle.spring,
                               cycle.previous_spring)
    # The Epistle never carries last year's autumn indent into January
    apostles = _assign_readings(grid, n50, cycle, options.winter_weeks,
                                options.spring_weeks, apostle_for_week,
                                apostle_for_markers,
                                cycle.spring if apostle_indent else 0, 0)

    days = {}
    for date in grid.dates():
        days[date] = DayRecord(grid.weekday(date), glas[date], n50[date],
                               apostles[date], gospels[date],
                               grid.markers_on(date))
    return YearState(year, options, grid.pascha, days, cycle.winter,
                     cycle.spring)


def _next_tone(tone):
    return tone % _TONES + 1


def _assign_glas(grid, previous):
    """
    Tones change every Sunday. They are not sung from Lazarus Saturday to
    the Sunday of All Saints; the Monday after it starts again in tone 8.
    January 1 continues the count from the previous year's All Saints.
    """
    glas = dict.fromkeys(grid.dates(), -1)

    tone = _TONES
    date = grid.shift(grid.date_of(mk.NED1_PO50), 1)
    while date is not None:
        if grid.weekday(date) == SUNDAY:
            tone = _next_tone(tone)
        glas[date] = tone
        date = add_days(date, 1, grid.leap)

    tone = _TONES
    date = add_days(previous.pascha, 57, previous.leap)
    while date is not None:
        if previous.weekdays[date] == SUNDAY:
            tone = _next_tone(tone)
        date = add_days(date, 1, previous.leap)

    lazarus = grid.date_of(mk.VEL_POST_D6N6)
    date = ShortDate(1, 1)
    while date < lazarus:
        if grid.weekday(date) == SUNDAY:
            tone = _next_tone(tone)
        glas[date] = tone
        date = grid.shift(date, 1)
    return glas


def _assign_n50(grid, previous):
    """
    Week after Pentecost: 0 on Pentecost itself, growing on every Monday,
    carried over from the previous year and held at -1 from the start of
    Great Lent to the eve of Pentecost.
    """
    week = 0
    date = add_days(previous.pascha, 49, previous.leap)
    while date is not None:
        date = add_days(date, 1, previous.leap)
        if date is not None and previous.weekdays[date] == MONDAY:
            week += 1

    lent = grid.date_of(mk.VEL_POST_D1N1)
    pentecost = grid.date_of(mk.NED8_POPASHE)
    n50 = {}
    for date in grid.dates():
        if grid.weekday(date) == MONDAY:
            week += 1
        if date < lent:
            n50[date] = week
        elif date < pentecost:
            n50[date] = -1
        elif date == pentecost:
            week = 0
            n50[date] = 0
        else:
            n50[date] = week
    return n50


def _weeks_between(first, second, leap):
    days = days_between(first, second, leap)
    if days < 0 or days % 7:
        raise InternalCalendarError("%r to %r is not a whole number of weeks"
                                    % (tuple(first), tuple(second)))
    return days // 7


def _reading_cycle(grid, n50, previous):
    """
    Winter indent: minus the number of weeks the readings fall short between
    Theophany and the Sunday of the Publican and the Pharisee. Autumn
    ("spring") indent: 17 minus the week number of the Sunday after the
    Exaltation, for this year and for the previous one.
    """
    publican = grid.date_of(mk.NED_MITAR_IFARIS)
    after_theophany = grid.date_of(mk.NED_POBOGOYAV)
    early = grid.weekday(ShortDate(1, 6)) in (SUNDAY, MONDAY)

    winter = 0
    if publican == after_theophany:
        if early:
            winter = -1
    else:
        if early:
            winter -= 1
        winter -= _weeks_between(after_theophany, publican, grid.leap)

    new_cycle = None
    if winter and early:
        new_cycle = ShortDate(1, 7)
    elif winter:
        new_cycle = grid.shift(after_theophany, 1)

    spring = _EXALTATION_WEEK - n50[grid.date_of(mk.NED_PO14SENT)]

    previous_pentecost = add_days(previous.pascha, 49, previous.leap)
    date = ShortDate(9, 15)
    for _ in range(7):
        if previous.weekdays[date] == SUNDAY:
            break
        date = add_days(date, 1, previous.leap)
    else:
        raise InternalCalendarError("no Sunday after the Exaltation")
    previous_spring = _EXALTATION_WEEK - _weeks_between(
        previous_pentecost, date, previous.leap)

    return _Cycle(winter, spring, previous_spring, new_cycle)


def _assign_readings(grid, n50, cycle, winter_weeks, spring_weeks, by_week,
                     by_markers, spring, previous_spring):
    """
    Liturgy readings of every day, for one of the two books.

    ``by_week`` and ``by_markers`` look readings up in the book's tables.
    ``spring`` is the autumn indent applied from Pentecost on and
    ``previous_spring`` the one applied before the new reading cycle; zero
    keeps the raw week after Pentecost.
    """
    shortfall = -cycle.winter
    weekday_weeks = list(winter_weeks(shortfall)) if shortfall else []
    sunday_weeks = list(_SHORTFALL_SUNDAYS.get(shortfall - 1, ()))
    first_spring, second_spring = spring_weeks

    publican = grid.date_of(mk.NED_MITAR_IFARIS)
    prodigal = grid.shift(publican, 7)
    meatfare = grid.shift(publican, 14)
    cheesefare = grid.shift(publican, 21)
    pentecost = grid.date_of(mk.NED8_POPASHE)
    exaltation = grid.date_of(mk.NED_PO14SENT)
    two_before = grid.shift(exaltation, -14)
    one_before = grid.shift(exaltation, -7)
    ordinary_end = cycle.new_cycle or publican

    readings = {}
    for date in grid.dates():
        weekday = grid.weekday(date)
        week = n50[date]
        reading = NO_READING
        if date < ordinary_end:
            reading = by_week(week + previous_spring, weekday)
        elif date < publican:
            # Weeks borrowed to fill the winter shortfall
            if weekday == SUNDAY:
                if sunday_weeks:
                    reading = by_week(sunday_weeks.pop(0), SUNDAY)
                if weekday_weeks:
                    weekday_weeks.pop(0)
            elif weekday_weeks:
                reading = by_week(weekday_weeks[0], weekday)
        elif date == publican:
            reading = by_week(_PUBLICAN_WEEK, weekday)
        elif date <= prodigal:
            reading = by_week(_PUBLICAN_WEEK + 1, weekday)
        elif date <= meatfare:
            reading = by_week(_PUBLICAN_WEEK + 2, weekday)
        elif date <= cheesefare:
            reading = by_week(_PUBLICAN_WEEK + 3, weekday)
        elif date < pentecost:
            reading = by_markers(grid.markers_on(date))
        elif date <= two_before:
            reading = by_week(week, weekday)
        elif date <= exaltation:
            if spring >= 0:
                reading = by_week(week, weekday)
            elif date <= one_before:
                reading = by_week(first_spring if spring == -2 else week,
                                  weekday)
            else:
                reading = by_week(second_spring, weekday)
        else:
            reading = by_week(week + spring, weekday)
        readings[date] = reading
    return readings
