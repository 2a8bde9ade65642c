# -*- coding: utf-8 -*-
"""
Marker constants tagging the days of a liturgical year.

A marker is a plain integer. The numbering falls into blocks:

* ``1 .. 134``: days counted from Pascha, from the Sunday of the Publican
  and the Pharisee to the Sunday after Pentecost, plus the Sundays and
  Saturdays anchored to fixed feasts (around the Exaltation of the Cross,
  the Nativity and so on).
* ``1001 .. 1075``: feasts with a fixed calendar date, named ``M<month>D<day>``.
* ``2001 .. 2044``: commemorations that move with the weekday or get
  transferred when they collide with movable days.
* ``3001 .. 3003``: feast ranks (twelve great feasts, movable or fixed, and
  other great feasts).
* ``4001 .. 4009``: fasts and fast-free weeks.

Days of Great Lent are named ``VEL_POST_D<weekday>N<week>``, the weekday being
0 for Sunday.
"""
import sys

# Movable days around Pascha
PASHA                = 1
SVETLAYA1            = 2
SVETLAYA2            = 3
SVETLAYA3            = 4
SVETLAYA4            = 5
SVETLAYA5            = 6
SVETLAYA6            = 7
NED2_POPASHE         = 8
S2POPASHE_1          = 9
S2POPASHE_2          = 10
S2POPASHE_3          = 11
S2POPASHE_4          = 12
S2POPASHE_5          = 13
S2POPASHE_6          = 14
NED3_POPASHE         = 15
S3POPASHE_1          = 16
S3POPASHE_2          = 17
S3POPASHE_3          = 18
S3POPASHE_4          = 19
S3POPASHE_5          = 20
S3POPASHE_6          = 21
NED4_POPASHE         = 22
S4POPASHE_1          = 23
S4POPASHE_2          = 24
S4POPASHE_3          = 25
S4POPASHE_4          = 26
S4POPASHE_5          = 27
S4POPASHE_6          = 28
NED5_POPASHE         = 29
S5POPASHE_1          = 30
S5POPASHE_2          = 31
S5POPASHE_3          = 32
S5POPASHE_4          = 33
S5POPASHE_5          = 34
S5POPASHE_6          = 35
NED6_POPASHE         = 36
S6POPASHE_1          = 37
S6POPASHE_2          = 38
S6POPASHE_3          = 39
S6POPASHE_4          = 40
S6POPASHE_5          = 41
S6POPASHE_6          = 42
NED7_POPASHE         = 43
S7POPASHE_1          = 44
S7POPASHE_2          = 45
S7POPASHE_3          = 46
S7POPASHE_4          = 47
S7POPASHE_5          = 48
S7POPASHE_6          = 49
NED8_POPASHE         = 50
S1PO50_1             = 51
S1PO50_2             = 52
S1PO50_3             = 53
S1PO50_4             = 54
S1PO50_5             = 55
S1PO50_6             = 56
NED1_PO50            = 57

# Sundays and Saturdays anchored to fixed feasts
VARLAAM_HUT          = 58
NED2_PO50            = 59
NED3_PO50            = 60
NED4_PO50            = 61
SOBOR_VALAAM         = 62
PETR_FEVRON_MUROM    = 63
SUB_PERED14SENT      = 64
NED_PERED14SENT      = 65
SUB_PO14SENT         = 66
NED_PO14SENT         = 67
SOBOR_OTCEV7SOBORA   = 68
SUB_DMITRY           = 69
SOBOR_BESSREBREN     = 70
NED_PRAOTEC          = 71
SUB_PEREDROJD        = 72
NED_PEREDROJD        = 73
SUB_POROJDESTVE      = 74
NED_POROJDESTVE      = 75

# Triodion: pre-Lent weeks
NED_MITAR_IFARIS     = 76
NED_OBLUDNOM         = 77
SUB_MYASOPUST        = 78
NED_MYASOPUST        = 79
SIRNAYA1             = 80
SIRNAYA2             = 81
SIRNAYA3             = 82
SIRNAYA4             = 83
SIRNAYA5             = 84
SIRNAYA6             = 85
NED_SIROPUST         = 86

# Great Lent and Holy Week
VEL_POST_D1N1        = 87
VEL_POST_D2N1        = 88
VEL_POST_D3N1        = 89
VEL_POST_D4N1        = 90
VEL_POST_D5N1        = 91
VEL_POST_D6N1        = 92
VEL_POST_D0N2        = 93
VEL_POST_D1N2        = 94
VEL_POST_D2N2        = 95
VEL_POST_D3N2        = 96
VEL_POST_D4N2        = 97
VEL_POST_D5N2        = 98
VEL_POST_D6N2        = 99
VEL_POST_D0N3        = 100
VEL_POST_D1N3        = 101
VEL_POST_D2N3        = 102
VEL_POST_D3N3        = 103
VEL_POST_D4N3        = 104
VEL_POST_D5N3        = 105
VEL_POST_D6N3        = 106
VEL_POST_D0N4        = 107
VEL_POST_D1N4        = 108
VEL_POST_D2N4        = 109
VEL_POST_D3N4        = 110
VEL_POST_D4N4        = 111
VEL_POST_D5N4        = 112
VEL_POST_D6N4        = 113
VEL_POST_D0N5        = 114
VEL_POST_D1N5        = 115
VEL_POST_D2N5        = 116
VEL_POST_D3N5        = 117
VEL_POST_D4N5        = 118
VEL_POST_D5N5        = 119
VEL_POST_D6N5        = 120
VEL_POST_D0N6        = 121
VEL_POST_D1N6        = 122
VEL_POST_D2N6        = 123
VEL_POST_D3N6        = 124
VEL_POST_D4N6        = 125
VEL_POST_D5N6        = 126
VEL_POST_D6N6        = 127
VEL_POST_D0N7        = 128
VEL_POST_D1N7        = 129
VEL_POST_D2N7        = 130
VEL_POST_D3N7        = 131
VEL_POST_D4N7        = 132
VEL_POST_D5N7        = 133
VEL_POST_D6N7        = 134

# Fixed-date feasts
M1D1                 = 1001
M1D2                 = 1002
M1D3                 = 1003
M1D4                 = 1004
M1D5                 = 1005
M1D6                 = 1006
M1D7                 = 1007
M1D8                 = 1008
M1D9                 = 1009
M1D10                = 1010
M1D11                = 1011
M1D12                = 1012
M1D13                = 1013
M1D14                = 1014
M3D25                = 1015
M5D11                = 1016
M6D24                = 1017
M6D25                = 1018
M6D29                = 1019
M6D30                = 1020
M7D15                = 1021
M8D5                 = 1022
M8D6                 = 1023
M8D7                 = 1024
M8D8                 = 1025
M8D9                 = 1026
M8D10                = 1027
M8D11                = 1028
M8D12                = 1029
M8D13                = 1030
M8D14                = 1031
M8D15                = 1032
M8D16                = 1033
M8D17                = 1034
M8D18                = 1035
M8D19                = 1036
M8D20                = 1037
M8D21                = 1038
M8D22                = 1039
M8D23                = 1040
M9D7                 = 1041
M9D8                 = 1042
M9D9                 = 1043
M9D10                = 1044
M9D11                = 1045
M9D12                = 1046
M9D13                = 1047
M9D14                = 1048
M9D15                = 1049
M9D16                = 1050
M9D17                = 1051
M9D18                = 1052
M9D19                = 1053
M9D20                = 1054
M9D21                = 1055
M8D29                = 1056
M10D1                = 1057
M11D20               = 1058
M11D21               = 1059
M11D22               = 1060
M11D23               = 1061
M11D24               = 1062
M11D25               = 1063
M12D20               = 1064
M12D21               = 1065
M12D22               = 1066
M12D23               = 1067
M12D24               = 1068
M12D25               = 1069
M12D26               = 1070
M12D27               = 1071
M12D28               = 1072
M12D29               = 1073
M12D30               = 1074
M12D31               = 1075

# Weekday-anchored and transferable commemorations
SUB_PEREDBOGOYAV     = 2001
NED_PEREDBOGOYAV     = 2003
SUB_POBOGOYAV        = 2004
NED_POBOGOYAV        = 2005
SOBOR_NOVOM_RUS      = 2006
SOBOR_3SV            = 2007
SRETENIE_PREDPR      = 2008
SRETENIE             = 2009
SRETENIE_POPRAZD1    = 2010
SRETENIE_POPRAZD2    = 2011
SRETENIE_POPRAZD3    = 2012
SRETENIE_POPRAZD4    = 2013
SRETENIE_POPRAZD5    = 2014
SRETENIE_POPRAZD6    = 2015
SRETENIE_OTDANIE     = 2016
OBRET_GL_IOANNA12    = 2017
MUCHENIK_40          = 2018
BLAG_PREDPRAZD       = 2019
BLAG_OTDANIE         = 2020
GEORGIA_POB          = 2021
OBRET_GL_IOANNA3     = 2022
SOBOR_TVERSK         = 2023
SOBOR_OTCEV_1_6SOB   = 2024
SOBOR_KEMERO         = 2025
PAHOMII_KENSK        = 2026
SHIO_MG              = 2027
FEODOR_TIR           = 2028
GRIGOR_PALAM         = 2029
IOANN_LESTV          = 2030
MARI_EGIPT           = 2031
PREP_DAV_GAR         = 2032
HRISTODUL            = 2033
IOSIF_ARIMAF         = 2034
TAMAR_GRUZ           = 2035
PM_AVRAAM_BOLG       = 2036
TAVIF                = 2037
MUCH_FEREIDAN        = 2038
DODO_GAR             = 2039
DAVID_GAR            = 2040
PREP_OTEC_AFON       = 2041
PREP_SOKOLOVSK       = 2042
ARSEN_TVERSK         = 2043
MUCH_LIPSIISK        = 2044

# Feast ranks
DVANA10_PER_PRAZD    = 3001
DVANA10_NEP_PRAZD    = 3002
VEL_PRAZD            = 3003

# Fasts and fast-free weeks
POST_VEL             = 4001
POST_PETR            = 4002
POST_USP             = 4003
POST_ROJD            = 4004
FULL7_SVYATKI        = 4005
FULL7_MITAR          = 4006
FULL7_SIRN           = 4007
FULL7_PASHA          = 4008
FULL7_TROICA         = 4009


def _collect():
    module = sys.modules[__name__]
    return {value: key for key, value in vars(module).items()
            if key.isupper() and isinstance(value, int)}


_NAMES = _collect()

#: Every marker, ascending.
ALL = tuple(sorted(_NAMES))

#: ``(marker, month, day)`` for every fixed-date feast, by marker.
FIXED_DATES = tuple(
    (marker, int(label[1:label.index("D")]), int(label[label.index("D") + 1:]))
    for marker, label in sorted(_NAMES.items())
    if M1D1 <= marker <= M12D31
)

#: Pascha and the 56 days that follow it, in order.
PASCHA_TO_ALL_SAINTS = tuple(range(PASHA, NED1_PO50 + 1))

BRIGHT_WEEK = tuple(range(PASHA, SVETLAYA6 + 1))
PENTECOST_WEEK = tuple(range(NED8_POPASHE, S1PO50_6 + 1))
CHEESEFARE_WEEK = tuple(range(SIRNAYA1, NED_SIROPUST + 1))
GREAT_LENT = tuple(range(VEL_POST_D1N1, VEL_POST_D6N7 + 1))
MEETING_AFTERFEAST = tuple(range(SRETENIE_POPRAZD1, SRETENIE_POPRAZD6 + 1))


def name(marker):
    """
    Name of the constant for ``marker``, or ``None`` if there is none.

    >>> name(PASHA)
    'PASHA'
    """
    return _NAMES.get(marker)


def pascha_offset(marker):
    """
    Days from Pascha to the day ``marker`` tags, for markers that are a fixed
    distance from Pascha every year; ``None`` for all other markers.
    """
    if PASHA <= marker <= NED1_PO50:
        return marker - PASHA
    if NED2_PO50 <= marker <= NED4_PO50:
        return 63 + 7 * (marker - NED2_PO50)
    if marker == NED_MITAR_IFARIS:
        return -70
    if marker == NED_OBLUDNOM:
        return -63
    if SUB_MYASOPUST <= marker <= VEL_POST_D6N7:
        return marker - VEL_POST_D6N7 - 1
    return None
