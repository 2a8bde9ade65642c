# -*- coding: utf-8 -*-
"""
Lectionary lookups: the Apostle and Gospel read at the Liturgy on a given
day, and the resurrectional Gospel read at Sunday Matins.

Ordinary days are looked up by week after Pentecost and weekday; the span
from Great Lent to the Saturday before Pentecost is looked up by the day's
movable markers.
"""
from collections import namedtuple

from .._common import InternalCalendarError, SUNDAY
from .. import markers as mk
from ._tables import (GOSPEL_WEEKS, APOSTLE_WEEKS,
                      GOSPEL_MOVABLE, APOSTLE_MOVABLE)

__all__ = ["Reading", "NO_READING",
           "APOSTLE", "MATTHEW", "MARK", "LUKE", "JOHN",
           "gospel_for_week", "apostle_for_week",
           "gospel_for_markers", "apostle_for_markers",
           "resurrection_gospel", "RESURRECTION_GOSPELS", "WEEKS"]

APOSTLE, MATTHEW, MARK, LUKE, JOHN = range(1, 6)

#: Number of weeks in the week-indexed tables.
WEEKS = len(GOSPEL_WEEKS)

_BOOK_PREFIXES = (("Мф.", MATTHEW), ("Мк.", MARK), ("Лк.", LUKE),
                  ("Ин.", JOHN))


class Reading(namedtuple("Reading", ["book", "number", "comment"])):
    """
    One pericope: the book it comes from, its number ("зачало") and the
    full citation. A reading with ``number == 0`` stands for "nothing
    assigned" and is falsy.
    """
    __slots__ = ()

    @property
    def ident(self):
        """Book and number packed into one integer, ``number << 4 | book``."""
        if not self.number:
            return 0
        return self.number << 4 | self.book

    def __bool__(self):
        return self.number > 0


NO_READING = Reading(0, 0, "")


def _gospel(entry):
    if entry is None:
        return NO_READING
    number, comment = entry
    for prefix, book in _BOOK_PREFIXES:
        if comment.startswith(prefix):
            return Reading(book, number, comment)
    return Reading(0, number, comment)


def _apostle(entry):
    if entry is None:
        return NO_READING
    number, comment = entry
    return Reading(APOSTLE, number, comment)


_GOSPEL_WEEKS = tuple(tuple(_gospel(e) for e in week) for week in GOSPEL_WEEKS)
_APOSTLE_WEEKS = tuple(tuple(_apostle(e) for e in week)
                       for week in APOSTLE_WEEKS)
_GOSPEL_MOVABLE = {k: _gospel(v) for k, v in GOSPEL_MOVABLE.items()}
_APOSTLE_MOVABLE = {k: _apostle(v) for k, v in APOSTLE_MOVABLE.items()}


def _by_week(table, week, weekday):
    if not (0 <= week < len(table) and 0 <= weekday < 7):
        raise InternalCalendarError(
            "no lectionary entry for week %r, weekday %r" % (week, weekday))
    return table[week][weekday]


def _by_markers(table, markers):
    for marker in sorted(markers):
        reading = table.get(marker)
        if reading is not None:
            return reading
    return NO_READING


def gospel_for_week(week, weekday):
    """
    Gospel for ``weekday`` (0 is Sunday) of ``week`` after Pentecost.

    :raises InternalCalendarError:
        If ``week`` is outside ``0 .. 36``; the year builder never asks for
        such a week.
    """
    return _by_week(_GOSPEL_WEEKS, week, weekday)


def apostle_for_week(week, weekday):
    """Apostle counterpart of :func:`gospel_for_week`."""
    return _by_week(_APOSTLE_WEEKS, week, weekday)


def gospel_for_markers(markers):
    """Gospel for the first of ``markers`` with an entry in the Lenten and
    Paschal table, or :data:`NO_READING`."""
    return _by_markers(_GOSPEL_MOVABLE, markers)


def apostle_for_markers(markers):
    return _by_markers(_APOSTLE_MOVABLE, markers)


# The eleven resurrectional Matins Gospels.
RESURRECTION_GOSPELS = tuple(_gospel(e) for e in (
    (116, "Мф., 116 зач., XXVIII, 16–20."),
    (70, "Мк., 70 зач., XVI, 1–8."),
    (71, "Мк., 71 зач., XVI, 9–20."),
    (112, "Лк., 112 зач., XXIV, 1–12."),
    (113, "Лк., 113 зач., XXIV, 12–35."),
    (114, "Лк., 114 зач., XXIV, 36–53."),
    (63, "Ин., 63 зач., XX, 1–10."),
    (64, "Ин., 64 зач., XX, 11–18."),
    (65, "Ин., 65 зач., XX, 19–31."),
    (66, "Ин., 66 зач., XXI, 1–14."),
    (67, "Ин., 67 зач., XXI, 15–25."),
))

_PALM_SUNDAY, _THEOPHANY, _MEETING, _THEOTOKOS, _TRANSFIGURATION, \
    _EXALTATION, _NATIVITY = (_gospel(e) for e in (
        (83, "Мф., 83 зач., XXI, 1–11, 15–17."),
        (2, "Мк., 2 зач., I, 9–11."),
        (8, "Лк., 8 зач., II, 25–32."),
        (4, "Лк., 4 зач., I, 39–49, 56."),
        (45, "Лк., 45 зач., IX, 28–36."),
        (42, "Ин., 42 зач., XII, 28-36."),
        (2, "Мф., 2 зач., I, 18–25."),
    ))

# Sundays with their own Matins Gospel, by priority.
_PROPER_MATINS = (
    (mk.NED2_POPASHE, RESURRECTION_GOSPELS[0]),
    (mk.NED3_POPASHE, RESURRECTION_GOSPELS[2]),
    (mk.NED4_POPASHE, RESURRECTION_GOSPELS[3]),
    (mk.NED5_POPASHE, RESURRECTION_GOSPELS[6]),
    (mk.NED6_POPASHE, RESURRECTION_GOSPELS[7]),
    (mk.NED7_POPASHE, RESURRECTION_GOSPELS[9]),
    (mk.NED8_POPASHE, RESURRECTION_GOSPELS[8]),
    (mk.VEL_POST_D0N7, _PALM_SUNDAY),
    (mk.M1D6, _THEOPHANY),
    (mk.SRETENIE, _MEETING),
    (mk.M3D25, _THEOTOKOS),
    (mk.M8D6, _TRANSFIGURATION),
    (mk.M8D15, _THEOTOKOS),
    (mk.M9D8, _THEOTOKOS),
    (mk.M9D14, _EXALTATION),
    (mk.M11D21, _THEOTOKOS),
    (mk.M12D25, _NATIVITY),
)


def resurrection_gospel(weekday, n50, markers):
    """
    Matins Gospel of a Sunday.

    Sundays of the Paschal season and Sundays that coincide with a great
    feast have a proper Gospel. Every other Sunday takes the resurrectional
    Gospels in turn, the first Sunday after Pentecost starting the round of
    eleven.

    :param weekday:
        Weekday of the day; anything but Sunday yields :data:`NO_READING`.

    :param n50:
        The day's week after Pentecost, ``-1`` during Great Lent.

    :param markers:
        The day's markers.
    """
    if weekday != SUNDAY:
        return NO_READING
    present = set(markers)
    for marker, reading in _PROPER_MATINS:
        if marker in present:
            return reading
    if n50 < 1:
        return NO_READING
    return RESURRECTION_GOSPELS[(n50 - 1) % len(RESURRECTION_GOSPELS)]
