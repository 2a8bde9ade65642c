# -*- coding: utf-8 -*-
from paschalion import markers as mk


class TestMarkerTables:
    """Test the derived marker tables."""

    def test_all_is_sorted_and_unique(self):
        assert list(mk.ALL) == sorted(set(mk.ALL))
        assert mk.PASHA in mk.ALL
        assert mk.VEL_PRAZD in mk.ALL

    def test_names(self):
        assert mk.name(mk.PASHA) == 'PASHA'
        assert mk.name(mk.M12D25) == 'M12D25'
        assert mk.name(999999) is None

    def test_fixed_dates(self):
        fixed = {marker: (month, day) for marker, month, day in mk.FIXED_DATES}
        assert fixed[mk.M1D7] == (1, 7)
        assert fixed[mk.M3D25] == (3, 25)
        assert fixed[mk.M12D31] == (12, 31)
        assert len(fixed) == 75

    def test_groups(self):
        assert len(mk.PASCHA_TO_ALL_SAINTS) == 57
        assert mk.PASCHA_TO_ALL_SAINTS[49] == mk.NED8_POPASHE
        assert len(mk.BRIGHT_WEEK) == 7
        assert len(mk.PENTECOST_WEEK) == 7
        assert len(mk.CHEESEFARE_WEEK) == 7
        assert len(mk.GREAT_LENT) == 48
        assert len(mk.MEETING_AFTERFEAST) == 6


class TestPaschaOffset:
    """Test distances of movable days from Pascha."""

    def test_paschal_season(self):
        assert mk.pascha_offset(mk.PASHA) == 0
        assert mk.pascha_offset(mk.NED2_POPASHE) == 7
        assert mk.pascha_offset(mk.NED8_POPASHE) == 49
        assert mk.pascha_offset(mk.NED1_PO50) == 56

    def test_sundays_after_all_saints(self):
        assert mk.pascha_offset(mk.NED2_PO50) == 63
        assert mk.pascha_offset(mk.NED4_PO50) == 77

    def test_triodion(self):
        assert mk.pascha_offset(mk.NED_MITAR_IFARIS) == -70
        assert mk.pascha_offset(mk.NED_OBLUDNOM) == -63
        assert mk.pascha_offset(mk.SUB_MYASOPUST) == -57
        assert mk.pascha_offset(mk.NED_SIROPUST) == -49
        assert mk.pascha_offset(mk.VEL_POST_D1N1) == -48
        assert mk.pascha_offset(mk.VEL_POST_D6N6) == -8
        assert mk.pascha_offset(mk.VEL_POST_D6N7) == -1

    def test_not_pascha_relative(self):
        for marker in (mk.VARLAAM_HUT, mk.NED_PO14SENT, mk.M1D7,
                       mk.SRETENIE, mk.POST_PETR):
            assert mk.pascha_offset(marker) is None
