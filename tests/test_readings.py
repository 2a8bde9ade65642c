# -*- coding: utf-8 -*-
import pytest

from paschalion._common import InternalCalendarError, SUNDAY, MONDAY
from paschalion import markers as mk
from paschalion.readings import (Reading, NO_READING, APOSTLE, MATTHEW,
                                 MARK, LUKE, JOHN, WEEKS,
                                 RESURRECTION_GOSPELS, gospel_for_week,
                                 apostle_for_week, gospel_for_markers,
                                 apostle_for_markers, resurrection_gospel)


class TestReading:

    def test_no_reading_is_falsy(self):
        assert not NO_READING
        assert NO_READING.ident == 0

    def test_ident_packs_book_and_number(self):
        reading = Reading(LUKE, 89, "")
        assert reading
        assert reading.ident == 89 << 4 | LUKE
        assert reading.ident & 0xF == LUKE


class TestWeekTables:

    def test_week_count(self):
        assert WEEKS == 37

    def test_pentecost_and_following_week(self):
        assert gospel_for_week(0, SUNDAY) == Reading(
            JOHN, 27, "Ин., 27 зач., VII, 37–52; VIII, 12.")
        assert gospel_for_week(0, MONDAY) is NO_READING
        assert gospel_for_week(1, MONDAY) == Reading(
            MATTHEW, 75, "Мф., 75 зач., XVIII, 10–20.")

    def test_publican_sunday(self):
        assert gospel_for_week(33, SUNDAY) == Reading(
            LUKE, 89, "Лк., 89 зач., XVIII, 10–14.")

    def test_winter_substitute_weeks_differ(self):
        assert gospel_for_week(32, MONDAY).book == MARK
        assert gospel_for_week(32, MONDAY).number == 48
        assert gospel_for_week(30, MONDAY).number == 33

    def test_apostle_books(self):
        reading = apostle_for_week(32, SUNDAY)
        assert reading.book == APOSTLE
        assert reading.number == 285

    @pytest.mark.parametrize("week,weekday", [(-1, 0), (37, 0), (0, 7)])
    def test_out_of_range(self, week, weekday):
        with pytest.raises(InternalCalendarError, match="no lectionary entry"):
            gospel_for_week(week, weekday)
        with pytest.raises(InternalCalendarError):
            apostle_for_week(week, weekday)


class TestMovableTables:

    def test_pascha(self):
        assert gospel_for_markers((mk.PASHA, mk.FULL7_PASHA)) == Reading(
            JOHN, 1, "Ин., 1 зач., I, 1–17.")
        assert apostle_for_markers([mk.PASHA]) == Reading(
            APOSTLE, 1, "Деян., 1 зач., I, 1–8.")

    def test_first_marker_with_an_entry_wins(self):
        assert gospel_for_markers((mk.SVETLAYA1, mk.PASHA)) == \
            gospel_for_markers((mk.PASHA,))

    def test_nothing_found(self):
        assert gospel_for_markers(()) is NO_READING
        assert apostle_for_markers((mk.M12D25,)) is NO_READING


class TestResurrectionGospel:

    def test_weekday_has_none(self):
        assert resurrection_gospel(MONDAY, 5, ()) is NO_READING

    def test_round_of_eleven(self):
        assert len(RESURRECTION_GOSPELS) == 11
        assert resurrection_gospel(SUNDAY, 1, ()) == RESURRECTION_GOSPELS[0]
        assert resurrection_gospel(SUNDAY, 11, ()) == RESURRECTION_GOSPELS[10]
        assert resurrection_gospel(SUNDAY, 12, ()) == RESURRECTION_GOSPELS[0]

    def test_proper_sundays(self):
        assert resurrection_gospel(SUNDAY, -1, (mk.NED2_POPASHE,)) == \
            RESURRECTION_GOSPELS[0]
        assert resurrection_gospel(SUNDAY, 13, (mk.M12D25,)).book == MATTHEW
        assert resurrection_gospel(SUNDAY, 0, (mk.NED8_POPASHE,)) == \
            RESURRECTION_GOSPELS[8]

    def test_lent_without_proper_gospel(self):
        assert resurrection_gospel(SUNDAY, -1, (mk.PASHA,)) is NO_READING
