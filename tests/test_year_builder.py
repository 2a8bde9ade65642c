# -*- coding: utf-8 -*-
"""
Tests for building complete years: tones, weeks after Pentecost, indents
and lectionary readings.
"""
import unittest
from unittest import mock

import pytest

from paschalion._common import (YearValueError, OptionsError,
                                InternalCalendarError, SUNDAY, MONDAY)
from paschalion import julian
from paschalion import markers as mk
from paschalion.readings import (NO_READING, gospel_for_week,
                                 apostle_for_week)
from paschalion.year import (build_year, Options, DEFAULT_OPTIONS,
                             DEFAULT_WEEKS, YearState)
from paschalion.year._rules import RULES


@pytest.fixture(scope="module")
def y2024():
    return build_year(2024)


@pytest.fixture(scope="module")
def y2023():
    return build_year(2023)


class TestOptions:

    def test_defaults(self):
        assert DEFAULT_OPTIONS.weeks == DEFAULT_WEEKS
        assert DEFAULT_OPTIONS.winter_weeks(2) == (32, 33)
        assert DEFAULT_OPTIONS.winter_weeks(5) == (30, 31, 17, 32, 33)
        assert DEFAULT_OPTIONS.spring_weeks == (10, 11)
        assert DEFAULT_OPTIONS.apostle_spring_indent is False

    def test_replace(self):
        options = DEFAULT_OPTIONS.replace(winter={2: (30, 31)},
                                          spring=(9, 10))
        assert options.winter_weeks(2) == (30, 31)
        assert options.winter_weeks(3) == (31, 32, 33)
        assert options.spring_weeks == (9, 10)
        assert DEFAULT_OPTIONS.winter_weeks(2) == (32, 33)

    def test_equality_and_hash(self):
        assert Options() == DEFAULT_OPTIONS
        assert hash(Options()) == hash(DEFAULT_OPTIONS)
        assert Options(apostle_spring_indent=True) != DEFAULT_OPTIONS

    @pytest.mark.parametrize("weeks", [DEFAULT_WEEKS[:-1],
                                       DEFAULT_WEEKS[:-1] + (34,),
                                       DEFAULT_WEEKS[:-1] + (0,),
                                       DEFAULT_WEEKS[:-1] + ("11",),
                                       None])
    def test_bad_weeks(self, weeks):
        with pytest.raises(OptionsError):
            Options(weeks)

    def test_bad_shortfall(self):
        with pytest.raises(OptionsError, match="winter shortfall"):
            DEFAULT_OPTIONS.winter_weeks(6)
        with pytest.raises(OptionsError, match="winter shortfall"):
            DEFAULT_OPTIONS.replace(winter={0: ()})

    def test_bad_flag(self):
        with pytest.raises(OptionsError):
            Options(apostle_spring_indent=1)


class TestBuildYearInputs:

    def test_year_forms(self, y2024):
        assert build_year("2024") == y2024
        assert build_year(2024, Options()) == y2024

    def test_too_small(self):
        with pytest.raises(YearValueError):
            build_year(1)

    def test_bad_options(self):
        with pytest.raises(OptionsError, match="Options instance"):
            build_year(2024, DEFAULT_WEEKS)

    def test_huge_year(self):
        state = build_year("123456789012345678901234567890")
        assert len(state) in (365, 366)
        assert state.day(*state.pascha).weekday == SUNDAY


class TestYearState:

    def test_basics(self, y2024):
        assert isinstance(y2024, YearState)
        assert y2024.year == 2024
        assert y2024.pascha == (4, 22)
        assert len(y2024) == 366
        assert (2, 29) in y2024
        assert y2024.day(2, 30) is None
        assert "pascha=4-22" in repr(y2024)

    def test_days_in_order(self, y2024):
        dates = [date for date, _ in y2024.days()]
        assert dates == sorted(dates)
        assert dates[0] == (1, 1)

    def test_marker_index(self, y2024):
        assert y2024.dates_with(mk.PASHA) == ((4, 22),)
        assert y2024.first_date_with(mk.FULL7_PASHA) == (4, 22)
        assert len(y2024.dates_with(mk.FULL7_PASHA)) == 7
        assert y2024.dates_with(999999) == ()
        assert y2024.first_date_with(999999) is None
        pairs = list(y2024.markers())
        assert pairs == sorted(pairs)

    def test_not_hashable(self, y2024):
        with pytest.raises(TypeError):
            hash(y2024)


class TestDayRecords:
    """Invariants that hold for every day of a year."""

    @pytest.mark.parametrize("year", [2000, 2021, 2023, 2024, 1958, 1915])
    def test_invariants(self, year):
        state = build_year(year)
        for (month, day), record in state.days():
            assert record.weekday == julian.weekday(year, month, day)
            assert len(record.markers) <= 8
            assert list(record.markers) == sorted(set(record.markers))
        assert state.day(*state.pascha).weekday == SUNDAY
        assert mk.PASHA in state.day(*state.pascha).markers
        assert -5 <= state.winter_indent <= 0
        assert -2 <= state.spring_indent <= 3

    def test_january_seventh(self, y2024):
        markers = y2024.day(1, 7).markers
        assert mk.M1D7 in markers
        assert all(mk.pascha_offset(m) is None for m in markers)

    def test_full_paschal_cycle(self):
        """Pascha and weekdays repeat every 532 years, so this covers every
        arrangement of the movable feasts"""
        for year in range(2, 534):
            state = build_year(year)
            assert state.day(*state.pascha).weekday == SUNDAY


class TestGlas:

    def test_paschal_season(self, y2024):
        # Lazarus Saturday April 14 through All Saints June 17
        assert y2024.day(4, 13).glas != -1
        assert y2024.day(4, 14).glas == -1
        assert y2024.day(4, 22).glas == -1
        assert y2024.day(6, 17).glas == -1
        assert y2024.day(6, 18).glas == 8
        assert y2024.day(6, 24).glas == 1
        assert y2024.day(7, 1).glas == 2

    def test_tones_change_on_sunday(self, y2024):
        assert y2024.day(7, 6).glas == y2024.day(7, 2).glas
        assert y2024.day(7, 8).glas == y2024.day(7, 6).glas % 8 + 1

    @pytest.mark.parametrize("year", [2001, 2021, 2024, 2025])
    def test_new_year_continues_old_year(self, year):
        old = build_year(year - 1).day(12, 31).glas
        new = build_year(year).day(1, 1)
        expected = old % 8 + 1 if new.weekday == SUNDAY else old
        assert new.glas == expected


class TestN50:

    def test_around_pentecost(self, y2024):
        # Great Lent starts March 5, Pentecost is June 10
        assert y2024.day(3, 4).n50 != -1
        assert y2024.day(3, 5).n50 == -1
        assert y2024.day(6, 9).n50 == -1
        assert y2024.day(6, 10).n50 == 0
        assert y2024.day(6, 11).n50 == 1
        assert y2024.day(6, 17).n50 == 1
        assert y2024.day(6, 18).n50 == 2

    @pytest.mark.parametrize("year", [2001, 2023, 2024])
    def test_new_year_continues_old_year(self, year):
        old = build_year(year - 1).day(12, 31).n50
        new = build_year(year).day(1, 1)
        assert new.n50 == old + (1 if new.weekday == MONDAY else 0)


class TestIndents:

    def test_year_2000(self):
        # Sunday after Theophany January 10, Publican February 7; Pentecost
        # June 5 and the Sunday after the Exaltation September 18
        state = build_year(2000)
        assert state.winter_indent == -4
        assert state.spring_indent == 2

    def test_other_years(self, y2023, y2024):
        assert y2023.winter_indent == -2
        assert y2024.winter_indent == -5
        assert y2024.spring_indent == 3


class TestReadings:

    def test_pascha_and_pentecost(self, y2024):
        assert y2024.day(4, 22).gospel.number == 1
        assert y2024.day(4, 22).apostle.number == 1
        assert y2024.day(6, 10).gospel == gospel_for_week(0, SUNDAY)
        assert y2024.day(6, 11).gospel == gospel_for_week(1, MONDAY)

    def test_publican_week(self, y2024):
        assert y2024.day(2, 12).gospel == gospel_for_week(33, SUNDAY)
        assert y2024.day(2, 13).gospel == gospel_for_week(34, MONDAY)

    def test_two_week_shortfall_defaults(self, y2023):
        """January 10 to 22 2023 borrow weeks 32 and 33"""
        assert y2023.day(1, 10).gospel == gospel_for_week(32, MONDAY)
        assert y2023.day(1, 15).gospel == gospel_for_week(32, 6)
        assert y2023.day(1, 16).gospel == gospel_for_week(32, SUNDAY)
        assert y2023.day(1, 17).gospel == gospel_for_week(33, MONDAY)
        assert y2023.day(1, 22).gospel == gospel_for_week(33, 6)

    def test_two_week_shortfall_configured(self):
        state = build_year(2023, DEFAULT_OPTIONS.replace(winter={2: (30, 31)}))
        assert state.day(1, 10).gospel == gospel_for_week(30, MONDAY)
        assert state.day(1, 16).gospel == gospel_for_week(32, SUNDAY)
        assert state.day(1, 17).gospel == gospel_for_week(31, MONDAY)

    def test_apostle_follows_flag(self, y2024):
        """The Apostle after the Exaltation only takes the autumn indent
        when asked to"""
        indented = build_year(2024, Options(apostle_spring_indent=True))
        date = (10, 1)
        record = y2024.day(*date)
        assert record.apostle == apostle_for_week(record.n50, record.weekday)
        assert indented.day(*date).apostle == apostle_for_week(
            record.n50 + 3, record.weekday)
        assert indented.day(*date).gospel == record.gospel

    def test_january_apostle_ignores_previous_autumn(self):
        """Before the new reading cycle the Apostle follows the raw week
        even with the autumn indent switched on"""
        plain = build_year(2)
        indented = build_year(2, Options(apostle_spring_indent=True))
        record = indented.day(1, 1)
        assert record.apostle == apostle_for_week(record.n50, record.weekday)
        assert record.apostle == apostle_for_week(33, SUNDAY)
        assert record.apostle.number == 296
        assert record.gospel == plain.day(1, 1).gospel
        for date in ((1, 1), (1, 2), (1, 3)):
            assert indented.day(*date).apostle == plain.day(*date).apostle

    def test_lent_uses_markers(self, y2024):
        # Great Lent weekdays without a Liturgy have no Gospel
        assert y2024.day(3, 6).gospel is NO_READING

    def test_determinism(self, y2024):
        assert build_year(2024) == y2024
        assert build_year(2024) != build_year(2024, Options(
            apostle_spring_indent=True))


class TestBuildFailures(unittest.TestCase):
    """Missing placements surface as InternalCalendarError"""

    def test_missing_rule(self):
        rules = tuple(rule for rule in RULES
                      if getattr(rule, 'marker', None) != mk.NED_POBOGOYAV)
        with mock.patch('paschalion.year._builder.RULES', rules):
            with self.assertRaises(InternalCalendarError):
                build_year(2024)

    def test_failure_leaves_next_build_intact(self):
        with mock.patch('paschalion.year._builder.apply_rules',
                        side_effect=InternalCalendarError("boom")):
            with self.assertRaises(InternalCalendarError):
                build_year(2024)
        self.assertEqual(build_year(2024).pascha, (4, 22))
