# -*- coding: utf-8 -*-
"""
The year builder: every day of a Julian year with its weekday, tone, week
after Pentecost, readings and markers.
"""
from ._options import Options, DEFAULT_OPTIONS, DEFAULT_WEEKS
from ._state import DayRecord, YearState
from ._builder import build_year

__all__ = ["Options", "DEFAULT_OPTIONS", "DEFAULT_WEEKS", "DayRecord",
           "YearState", "build_year"]
