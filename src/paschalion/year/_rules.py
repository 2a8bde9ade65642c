# -*- coding: utf-8 -*-
"""
Marker placement rules.

:data:`RULES` is the complete, ordered list of placements performed for
every year. Later rules may depend on markers placed by earlier ones, so the
order matters. Each rule can also be applied on its own to a
:class:`~paschalion.year._grid.YearGrid`.

Dates in rules are either literal ``(month, day)`` pairs or :class:`At`
references, "the day carrying this marker, moved by so many days".
"""
from collections import namedtuple

from .._common import (ShortDate, InternalCalendarError,
                       SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY,
                       SATURDAY)
from .. import markers as mk

__all__ = ["RULES", "At", "Fixed", "Span", "FromPascha", "Derived",
           "NearestWeekday", "ByWeekday", "Transfer", "Special",
           "Marked", "Between", "Before",
           "FORWARD", "BACKWARD", "NEAREST"]

FORWARD = 1
BACKWARD = -1
NEAREST = 0

# Longest walk a weekday search may take.
_SEARCH_LIMIT = 14


class At(namedtuple("At", ["marker", "days"])):
    """The date carrying ``marker``, moved by ``days``."""
    __slots__ = ()

    def __new__(cls, marker, days=0):
        return super(At, cls).__new__(cls, marker, days)


def resolve(grid, ref):
    if isinstance(ref, At):
        date = grid.date_of(ref.marker)
        if ref.days:
            date = grid.shift(date, ref.days)
        return date
    return ShortDate(*ref)


def search_weekday(grid, start, weekday, step, skip=None):
    """First day carrying ``weekday`` walking from ``start`` (inclusive) by
    ``step`` days, passing over ``skip``."""
    date = start
    for _ in range(_SEARCH_LIMIT):
        if grid.weekday(date) == weekday and date != skip:
            return date
        date = grid.shift(date, step)
    raise InternalCalendarError("no weekday %d near %r" % (weekday,
                                                          tuple(start)))


class Rule(object):
    __slots__ = ()

    def apply(self, grid):
        raise NotImplementedError

    def __repr__(self):
        fields = ", ".join("%s=%r" % (k, getattr(self, k))
                           for k in self.__slots__)
        return "%s(%s)" % (self.__class__.__name__, fields)


class Fixed(Rule):
    """Place ``marker`` on fixed calendar dates."""
    __slots__ = ["marker", "dates"]

    def __init__(self, marker, *dates):
        self.marker = marker
        self.dates = tuple(ShortDate(*d) for d in dates)

    def apply(self, grid):
        for date in self.dates:
            grid.place(date, self.marker)


class Span(Rule):
    """Place ``marker`` on every day from ``start`` up to, not including,
    ``stop``."""
    __slots__ = ["marker", "start", "stop"]

    def __init__(self, marker, start, stop):
        self.marker = marker
        self.start = start
        self.stop = stop

    def apply(self, grid):
        date = resolve(grid, self.start)
        stop = resolve(grid, self.stop)
        while date < stop:
            grid.place(date, self.marker)
            date = grid.shift(date, 1)


class FromPascha(Rule):
    """Place ``markers`` ``offset`` days from Pascha."""
    __slots__ = ["offset", "markers"]

    def __init__(self, offset, *markers):
        self.offset = offset
        self.markers = markers

    def apply(self, grid):
        grid.place(grid.shift(grid.pascha, self.offset), *self.markers)


class Derived(Rule):
    """Place ``marker`` on each of the ``anchors`` (:class:`At` references)."""
    __slots__ = ["marker", "anchors"]

    def __init__(self, marker, *anchors):
        self.marker = marker
        self.anchors = tuple(a if isinstance(a, At) else At(a)
                             for a in anchors)

    def apply(self, grid):
        for anchor in self.anchors:
            grid.place(resolve(grid, anchor), self.marker)


class NearestWeekday(Rule):
    """
    Place ``marker`` on a ``weekday`` found from ``anchor``.

    ``FORWARD`` and ``BACKWARD`` take the first such weekday on or after, or
    on or before, the anchor. ``NEAREST`` keeps the anchor if it already is
    that weekday, looks back when the anchor is one to three days past it and
    forward otherwise. ``skip`` is a date the search must pass over.
    """
    __slots__ = ["marker", "anchor", "weekday", "direction", "skip"]

    def __init__(self, marker, anchor, weekday, direction, skip=None):
        self.marker = marker
        self.anchor = anchor
        self.weekday = weekday
        self.direction = direction
        self.skip = ShortDate(*skip) if skip else None

    def locate(self, grid):
        start = resolve(grid, self.anchor)
        step = self.direction
        if step == NEAREST:
            behind = (grid.weekday(start) - self.weekday) % 7
            step = BACKWARD if 1 <= behind <= 3 else FORWARD
        return search_weekday(grid, start, self.weekday, step, self.skip)

    def apply(self, grid):
        grid.place(self.locate(grid), self.marker)


class ByWeekday(Rule):
    """
    Placements chosen by the weekday of ``anchor``: ``table`` maps a weekday
    to a sequence of ``(marker, (month, day))`` pairs. Weekdays missing from
    the table place nothing.
    """
    __slots__ = ["anchor", "table"]

    def __init__(self, anchor, table):
        self.anchor = anchor
        self.table = table

    def apply(self, grid):
        weekday = grid.weekday(resolve(grid, self.anchor))
        for marker, date in self.table.get(weekday, ()):
            grid.place(date, marker)


class Marked(namedtuple("Marked", ["markers"])):
    """Holds on a date carrying any of ``markers``."""
    __slots__ = ()

    def __new__(cls, *markers):
        return super(Marked, cls).__new__(cls, markers)

    def holds(self, grid, date):
        return any(grid.has(date, m) for m in self.markers)


class Between(namedtuple("Between", ["first", "last"])):
    """Holds on a date between the days of two markers, both included."""
    __slots__ = ()

    def holds(self, grid, date):
        return grid.date_of(self.first) <= date <= grid.date_of(self.last)


class Before(namedtuple("Before", ["marker", "fixed"])):
    """Holds when ``fixed`` (or the date under test) precedes the day of
    ``marker``."""
    __slots__ = ()

    def __new__(cls, marker, fixed=None):
        return super(Before, cls).__new__(cls, marker, fixed)

    def holds(self, grid, date):
        if self.fixed is not None:
            date = ShortDate(*self.fixed)
        return date < grid.date_of(self.marker)


class Transfer(Rule):
    """
    Place ``marker`` on ``date`` unless moved: each of ``moves`` is a
    ``(condition, target)`` pair checked in order against the current date,
    and a condition that holds moves the feast to ``target``. With
    ``only_if`` set, nothing is placed unless that condition holds on the
    default date.
    """
    __slots__ = ["marker", "date", "moves", "only_if"]

    def __init__(self, marker, date, *moves, only_if=None):
        self.marker = marker
        self.date = date
        self.moves = moves
        self.only_if = only_if

    def locate(self, grid):
        date = resolve(grid, self.date)
        if self.only_if is not None and not self.only_if.holds(grid, date):
            return None
        for condition, target in self.moves:
            if condition.holds(grid, date):
                date = resolve(grid, target)
        return date

    def apply(self, grid):
        date = self.locate(grid)
        if date is not None:
            grid.place(date, self.marker)


class Special(Rule):
    """A named procedure too irregular for the other rule kinds."""
    __slots__ = ["procedure"]

    def __init__(self, procedure):
        self.procedure = procedure

    def apply(self, grid):
        self.procedure(grid)

    def __repr__(self):
        return "Special(%s)" % self.procedure.__name__


def _meeting_leave_taking(grid, feast):
    target = ShortDate(2, 9)
    prodigal = grid.date_of(mk.NED_OBLUDNOM)
    if prodigal <= feast <= grid.shift(prodigal, 2):
        target = grid.shift(prodigal, 5)
    if grid.shift(prodigal, 3) <= feast <= grid.shift(prodigal, 6):
        target = grid.date_of(mk.SIRNAYA2)
    if grid.date_of(mk.NED_MYASOPUST) <= feast <= grid.date_of(mk.SIRNAYA1):
        target = grid.date_of(mk.SIRNAYA4)
    if grid.date_of(mk.SIRNAYA2) <= feast <= grid.date_of(mk.SIRNAYA3):
        target = grid.date_of(mk.SIRNAYA6)
    if grid.date_of(mk.SIRNAYA4) <= feast <= grid.date_of(mk.SIRNAYA6):
        target = grid.date_of(mk.NED_SIROPUST)
    # Kept on Forgiveness Sunday, the feast has no leave-taking
    if grid.has(feast, mk.NED_SIROPUST):
        return None
    if grid.has(target, mk.SUB_MYASOPUST):
        target = grid.shift(target, -1)
    grid.place(target, mk.SRETENIE_OTDANIE)
    return target


def _meeting_afterfeast(grid, feast, leave_taking):
    date = grid.shift(feast, 1)
    if date == leave_taking:
        return
    days = iter(mk.MEETING_AFTERFEAST)
    for _ in range(_SEARCH_LIMIT):
        if grid.has(date, mk.SUB_MYASOPUST):
            date = grid.shift(date, 1)
            if date >= leave_taking:
                return
        marker = next(days, None)
        if marker is not None:
            grid.place(date, marker)
        date = grid.shift(date, 1)
        if date == leave_taking:
            return
    raise InternalCalendarError("afterfeast of the Meeting of the Lord "
                                "never reaches its leave-taking")


def meeting_of_the_lord(grid):
    """
    The Meeting of the Lord (February 2) with its forefeast, afterfeast and
    leave-taking.

    The feast never enters Great Lent; it moves to Forgiveness Sunday
    instead. When it falls on the Meat-fare Saturday of the Dead, that
    Saturday moves a week earlier.
    """
    lent = grid.date_of(mk.VEL_POST_D1N1)
    saturday = grid.date_of(mk.SUB_MYASOPUST)
    feast = ShortDate(2, 2)
    if feast >= lent:
        feast = grid.shift(lent, -1)
    grid.place(feast, mk.SRETENIE)
    if feast == saturday:
        grid.remove(saturday, mk.SUB_MYASOPUST)
        saturday = search_weekday(grid, grid.shift(saturday, -1), SATURDAY,
                                  BACKWARD)
        grid.place(saturday, mk.SUB_MYASOPUST)
    if feast != (2, 1):
        eve = ShortDate(2, 1)
        if eve == saturday:
            eve = grid.shift(eve, -1)
        grid.place(eve, mk.SRETENIE_PREDPR)
    leave_taking = _meeting_leave_taking(grid, feast)
    if leave_taking is not None:
        _meeting_afterfeast(grid, feast, leave_taking)


_ORDERED = (
    # Fixed feasts, the Christmastide fast-free days, the Nativity and
    # Dormition fasts
    tuple(Fixed(marker, (month, day))
          for marker, month, day in mk.FIXED_DATES),
    Fixed(mk.FULL7_SVYATKI, (1, 1), (1, 2), (1, 3), (1, 4),
          (12, 25), (12, 26), (12, 27), (12, 28), (12, 29), (12, 30),
          (12, 31)),
    Span(mk.POST_ROJD, (11, 15), (12, 25)),
    Span(mk.POST_USP, (8, 1), (8, 15)),

    # Pascha to All Saints
    tuple(FromPascha(offset, marker)
          for offset, marker in enumerate(mk.PASCHA_TO_ALL_SAINTS)),
    tuple(FromPascha(offset, mk.FULL7_PASHA) for offset in range(7)),
    tuple(FromPascha(offset, mk.FULL7_TROICA) for offset in range(49, 56)),
    Span(mk.POST_PETR, At(mk.NED1_PO50, 1), (6, 29)),
    Derived(mk.VARLAAM_HUT, At(mk.NED1_PO50, 5)),
    Derived(mk.NED2_PO50, At(mk.NED1_PO50, 7)),
    Derived(mk.NED3_PO50, At(mk.NED1_PO50, 14)),
    Derived(mk.NED4_PO50, At(mk.NED1_PO50, 21)),

    # Sundays and Saturdays around fixed feasts
    NearestWeekday(mk.SOBOR_VALAAM, (8, 7), SUNDAY, FORWARD),
    NearestWeekday(mk.PETR_FEVRON_MUROM, (9, 6), SUNDAY, BACKWARD),
    NearestWeekday(mk.SUB_PERED14SENT, (9, 13), SATURDAY, BACKWARD),
    NearestWeekday(mk.NED_PERED14SENT, (9, 13), SUNDAY, BACKWARD),
    NearestWeekday(mk.SUB_PO14SENT, (9, 15), SATURDAY, FORWARD),
    NearestWeekday(mk.NED_PO14SENT, (9, 15), SUNDAY, FORWARD),
    NearestWeekday(mk.SOBOR_OTCEV7SOBORA, (10, 11), SUNDAY, NEAREST),
    NearestWeekday(mk.SUB_DMITRY, (10, 25), SATURDAY, BACKWARD,
                   skip=(10, 22)),
    NearestWeekday(mk.SOBOR_BESSREBREN, (11, 1), SUNDAY, NEAREST),
    NearestWeekday(mk.NED_PRAOTEC, (12, 17), SUNDAY, BACKWARD),
    NearestWeekday(mk.SUB_PEREDROJD, (12, 24), SATURDAY, BACKWARD),
    NearestWeekday(mk.NED_PEREDROJD, (12, 24), SUNDAY, BACKWARD),
    ByWeekday((12, 25), {
        SUNDAY: ((mk.SUB_POROJDESTVE, (12, 31)),
                 (mk.NED_POROJDESTVE, (12, 26))),
        MONDAY: ((mk.SUB_POROJDESTVE, (12, 30)),
                 (mk.NED_POROJDESTVE, (12, 31))),
        TUESDAY: ((mk.SUB_POROJDESTVE, (12, 29)),
                  (mk.NED_POROJDESTVE, (12, 30))),
        WEDNESDAY: ((mk.SUB_POROJDESTVE, (12, 28)),
                    (mk.NED_POROJDESTVE, (12, 29))),
        THURSDAY: ((mk.SUB_POROJDESTVE, (12, 27)),
                   (mk.NED_POROJDESTVE, (12, 28))),
        FRIDAY: ((mk.SUB_POROJDESTVE, (12, 26)),
                 (mk.NED_POROJDESTVE, (12, 27))),
        SATURDAY: ((mk.SUB_POROJDESTVE, (12, 31)),
                   (mk.NED_POROJDESTVE, (12, 26))),
    }),

    # Triodion and Great Lent
    FromPascha(mk.pascha_offset(mk.NED_MITAR_IFARIS),
               mk.NED_MITAR_IFARIS, mk.FULL7_MITAR),
    tuple(FromPascha(offset, mk.FULL7_MITAR) for offset in range(-69, -63)),
    FromPascha(mk.pascha_offset(mk.NED_OBLUDNOM), mk.NED_OBLUDNOM),
    FromPascha(mk.pascha_offset(mk.SUB_MYASOPUST), mk.SUB_MYASOPUST),
    FromPascha(mk.pascha_offset(mk.NED_MYASOPUST), mk.NED_MYASOPUST),
    tuple(FromPascha(mk.pascha_offset(marker), marker, mk.FULL7_SIRN)
          for marker in mk.CHEESEFARE_WEEK),
    tuple(FromPascha(mk.pascha_offset(marker), marker, mk.POST_VEL)
          for marker in mk.GREAT_LENT),

    # Theophany. January 1 falls on the weekday of the previous December 25.
    ByWeekday((1, 1), {
        SUNDAY: ((mk.NED_PEREDBOGOYAV, (1, 1)),),
        MONDAY: ((mk.NED_PEREDBOGOYAV, (1, 1)),),
        TUESDAY: ((mk.SUB_PEREDBOGOYAV, (1, 5)),
                  (mk.NED_PEREDBOGOYAV, (1, 1))),
        WEDNESDAY: ((mk.SUB_PEREDBOGOYAV, (1, 4)),
                    (mk.NED_PEREDBOGOYAV, (1, 5))),
        THURSDAY: ((mk.SUB_PEREDBOGOYAV, (1, 3)),
                   (mk.NED_PEREDBOGOYAV, (1, 4))),
        FRIDAY: ((mk.SUB_PEREDBOGOYAV, (1, 2)),
                 (mk.NED_PEREDBOGOYAV, (1, 3))),
        SATURDAY: ((mk.SUB_PEREDBOGOYAV, (1, 1)),
                   (mk.NED_PEREDBOGOYAV, (1, 2))),
    }),
    ByWeekday((12, 25), {
        SUNDAY: ((mk.SUB_PEREDBOGOYAV, (12, 31)),),
        MONDAY: ((mk.SUB_PEREDBOGOYAV, (12, 30)),),
    }),
    NearestWeekday(mk.SUB_POBOGOYAV, (1, 7), SATURDAY, FORWARD),
    NearestWeekday(mk.NED_POBOGOYAV, (1, 7), SUNDAY, FORWARD),
    NearestWeekday(mk.SOBOR_NOVOM_RUS, (1, 25), SUNDAY, NEAREST),
    Transfer(mk.SOBOR_3SV, (1, 30),
             (Marked(mk.SUB_MYASOPUST, mk.SIRNAYA3, mk.SIRNAYA5), (1, 29))),

    # Meeting of the Lord through St George
    Special(meeting_of_the_lord),
    Transfer(mk.OBRET_GL_IOANNA12, (2, 24),
             (Marked(mk.SUB_MYASOPUST, mk.SIRNAYA3, mk.SIRNAYA5,
                     mk.VEL_POST_D1N1), (2, 23)),
             (Between(mk.VEL_POST_D2N1, mk.VEL_POST_D5N1),
              At(mk.VEL_POST_D6N1))),
    Transfer(mk.MUCHENIK_40, (3, 9),
             (Marked(mk.VEL_POST_D3N4), (3, 8)),
             (Marked(mk.VEL_POST_D4N5), (3, 7)),
             (Marked(mk.VEL_POST_D6N5), (3, 10)),
             (Between(mk.VEL_POST_D1N1, mk.VEL_POST_D5N1),
              At(mk.VEL_POST_D6N1))),
    Transfer(mk.BLAG_PREDPRAZD, (3, 24),
             (Marked(mk.VEL_POST_D6N6), (3, 22)),
             (Marked(mk.VEL_POST_D4N5), (3, 23)),
             (Marked(mk.VEL_POST_D2N5), (3, 23)),
             only_if=Before(mk.VEL_POST_D1N7, (3, 25))),
    Transfer(mk.BLAG_OTDANIE, (3, 26), only_if=Before(mk.VEL_POST_D6N6)),
    Transfer(mk.GEORGIA_POB, (4, 23),
             (Between(mk.VEL_POST_D1N7, mk.PASHA), At(mk.SVETLAYA1))),
    Transfer(mk.OBRET_GL_IOANNA3, (5, 25),
             (Marked(mk.S7POPASHE_6, mk.NED1_PO50), (5, 23)),
             (Marked(mk.S1PO50_1), (5, 26)),
             (Marked(mk.NED8_POPASHE), (5, 22))),

    # Summer synaxes
    NearestWeekday(mk.SOBOR_TVERSK, (6, 30), SUNDAY, FORWARD),
    NearestWeekday(mk.SOBOR_OTCEV_1_6SOB, (7, 16), SUNDAY, NEAREST),
    NearestWeekday(mk.SOBOR_KEMERO, (8, 17), SUNDAY, BACKWARD),

    # Commemorations kept on movable days
    Derived(mk.PAHOMII_KENSK, mk.SUB_POBOGOYAV),
    Derived(mk.SHIO_MG, mk.SIRNAYA4),
    Derived(mk.FEODOR_TIR, mk.VEL_POST_D6N1),
    Derived(mk.GRIGOR_PALAM, mk.VEL_POST_D0N3),
    Derived(mk.IOANN_LESTV, mk.VEL_POST_D0N5),
    Derived(mk.MARI_EGIPT, mk.VEL_POST_D0N6),
    Derived(mk.PREP_DAV_GAR, mk.SVETLAYA2),
    Derived(mk.HRISTODUL, mk.SVETLAYA2),
    Derived(mk.IOSIF_ARIMAF, mk.NED3_POPASHE),
    Derived(mk.TAMAR_GRUZ, mk.NED3_POPASHE),
    Derived(mk.PM_AVRAAM_BOLG, mk.NED4_POPASHE),
    Derived(mk.TAVIF, mk.NED4_POPASHE),
    Derived(mk.MUCH_FEREIDAN, mk.S6POPASHE_4),
    Derived(mk.DODO_GAR, mk.S7POPASHE_3),
    Derived(mk.DAVID_GAR, mk.S7POPASHE_4),
    Derived(mk.PREP_OTEC_AFON, mk.NED2_PO50),
    NearestWeekday(mk.PREP_SOKOLOVSK, (6, 30), SUNDAY, FORWARD),
    NearestWeekday(mk.ARSEN_TVERSK, (6, 30), SUNDAY, FORWARD),
    NearestWeekday(mk.MUCH_LIPSIISK, (6, 28), SUNDAY, FORWARD),

    # Feast ranks
    Derived(mk.DVANA10_PER_PRAZD, mk.PASHA, mk.VEL_POST_D0N7,
            mk.S6POPASHE_4, mk.NED8_POPASHE),
    Derived(mk.DVANA10_NEP_PRAZD, mk.M1D6, mk.SRETENIE, mk.M3D25, mk.M8D6,
            mk.M8D15, mk.M9D8, mk.M9D14, mk.M11D21, mk.M12D25),
    Derived(mk.VEL_PRAZD, mk.M1D1, mk.M6D24, mk.M6D29, mk.M8D29, mk.M10D1),
)


def _flatten(rules):
    for rule in rules:
        if isinstance(rule, tuple):
            for r in _flatten(rule):
                yield r
        else:
            yield rule


RULES = tuple(_flatten(_ORDERED))


def apply_rules(grid, rules=RULES):
    for rule in rules:
        rule.apply(grid)
    return grid
