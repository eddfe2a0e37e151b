"""Contains classes and conversion functions for different definitions of time.

The functions and class API are extremely straightforward to retain flexibility:
:mod:`.calendar`, :mod:`.sidereal` and :mod:`.dynamical` work on plain numbers, while
:class:`.JulianDay` bundles them as methods on an immutable value.
"""

from __future__ import annotations

# Local Imports
# forward-facing API import
from .calendar import (  # noqa: F401
    CalendarDateTime,
    datetimeToJulianDay,
    isLeapYear,
    julianDayToCalendar,
    julianDayToDatetime,
)
from .stardate import B1950_0, J2000_0, MODIFIED_JULIAN_DAY_ZERO, Hour, JulianDay  # noqa: F401
