# -*- coding: utf-8 -*-
from .._common import OptionsError

__all__ = ["Options", "DEFAULT_WEEKS", "DEFAULT_OPTIONS"]

#: Substitute weeks for a winter shortfall of one to five weeks, followed by
#: the two weeks read when the autumn cycle runs short.
DEFAULT_WEEKS = (33,
                 32, 33,
                 31, 32, 33,
                 30, 31, 32, 33,
                 30, 31, 17, 32, 33,
                 10, 11)

_WINTER_GROUPS = {
    1: slice(0, 1),
    2: slice(1, 3),
    3: slice(3, 6),
    4: slice(6, 10),
    5: slice(10, 15),
}
_SPRING_GROUP = slice(15, 17)


def _check_weeks(weeks, size):
    try:
        weeks = tuple(weeks)
    except TypeError:
        raise OptionsError("indent weeks must be a sequence of integers")
    if len(weeks) != size:
        raise OptionsError("expected %d indent weeks, got %d"
                           % (size, len(weeks)))
    for week in weeks:
        if (not isinstance(week, int) or isinstance(week, bool) or
                not 1 <= week <= 33):
            raise OptionsError("indent week must be an integer in 1..33, "
                               "got %r" % (week,))
    return weeks


class Options(object):
    """
    Lectionary indent configuration.

    When fewer weeks than the reading cycle needs fit between Theophany and
    the Sunday of the Publican and the Pharisee, the missing weekday readings
    are borrowed from other weeks. ``weeks`` lists those substitutes for a
    shortfall of 1, 2, 3, 4 and 5 weeks (1 + 2 + 3 + 4 + 5 values), followed
    by the 2 weeks used when the autumn cycle falls short before the Sunday
    after the Exaltation. All values are week numbers in ``1 .. 33``.

    :param weeks:
        Seventeen week numbers, see :data:`DEFAULT_WEEKS`.

    :param apostle_spring_indent:
        Whether the Apostle readings follow the autumn indent too. By default
        only the Gospel does.

    :raises OptionsError:
        On a wrong number of weeks or a week outside ``1 .. 33``.

    Instances are immutable and hashable; they are part of the key under
    which built years are cached.
    """
    __slots__ = ["_weeks", "_apostle_spring_indent"]

    def __init__(self, weeks=DEFAULT_WEEKS, apostle_spring_indent=False):
        if not isinstance(apostle_spring_indent, bool):
            raise OptionsError("apostle_spring_indent must be a bool")
        self._weeks = _check_weeks(weeks, len(DEFAULT_WEEKS))
        self._apostle_spring_indent = apostle_spring_indent

    @property
    def weeks(self):
        return self._weeks

    @property
    def apostle_spring_indent(self):
        return self._apostle_spring_indent

    @property
    def spring_weeks(self):
        return self._weeks[_SPRING_GROUP]

    def winter_weeks(self, shortfall):
        """Substitute weeks for a winter shortfall of ``shortfall`` weeks."""
        try:
            return self._weeks[_WINTER_GROUPS[shortfall]]
        except (KeyError, TypeError):
            raise OptionsError("winter shortfall must be in 1..5, got %r"
                               % (shortfall,))

    def replace(self, winter=None, spring=None, apostle_spring_indent=None):
        """
        Return a copy with some values changed.

        :param winter:
            A mapping of shortfall (1..5) to its new substitute weeks.

        :param spring:
            The two autumn substitute weeks.

        :param apostle_spring_indent:
            New value of the Apostle flag.
        """
        weeks = list(self._weeks)
        for shortfall, values in (winter or {}).items():
            group = _WINTER_GROUPS.get(shortfall)
            if group is None:
                raise OptionsError("winter shortfall must be in 1..5, got %r"
                                   % (shortfall,))
            weeks[group] = _check_weeks(values, shortfall)
        if spring is not None:
            weeks[_SPRING_GROUP] = _check_weeks(spring, 2)
        if apostle_spring_indent is None:
            apostle_spring_indent = self._apostle_spring_indent
        return self.__class__(weeks, apostle_spring_indent)

    def _key(self):
        return self._weeks, self._apostle_spring_indent

    def __eq__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "%s(weeks=%r, apostle_spring_indent=%r)" % (
            self.__class__.__name__, self._weeks, self._apostle_spring_indent)


DEFAULT_OPTIONS = Options()
