"""Defines the :class:`.JulianDay` & :class:`.Hour` value types.

Both of these are always going to be `float` objects, so they're easy targets for
confusion with each other and with plain day counts. Subclassing `float` keeps them usable
anywhere a number is expected, while calling `type` on the variable reveals what kind of
time value it was initialized to.

.. code-block:: python

    julian_day = JulianDay(2451545.0)
    print(julian_day)                                # J2000.0
    print(julian_day.modified)                       # JD 51544.50
    print(julian_day.toCalendarDateTime())           # CalendarDateTime(year=2000, ...)
    print(julian_day.meanLocalSiderealTime(75.0))    # 75 degrees WEST

Instances are immutable. Every derived quantity is recomputed on request, nothing is cached
on the instance.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ...common.utilities import checkFinite
from .. import constants as const
from . import dynamical, sidereal
from .calendar import calendarToJulianDay, julianDayToCalendar

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Local Imports
    from .calendar import CalendarDateTime
    from .timescales import TimeScaleProvider


class Hour(float):
    """Class representing an angle or a time of day in hours.

    Sidereal times are produced in the range [0, 24).
    """

    @property
    def value(self) -> float:
        """``float``: plain number of hours."""
        return float(self)

    @property
    def degrees(self) -> float:
        """``float``: this angle in degrees."""
        return float(self) * const.HOURS2DEG

    @property
    def radians(self) -> float:
        """``float``: this angle in radians."""
        return float(self) / const.RAD2HOURS

    def toHMS(self) -> tuple[int, int, float]:
        """Split into whole hours, whole minutes and seconds of a non-negative angle."""
        total_seconds = abs(float(self)) * 3600.0
        hours, remainder = divmod(total_seconds, 3600.0)
        minutes, seconds = divmod(remainder, 60.0)
        return int(hours), int(minutes), seconds

    def __repr__(self):
        """Return a string representation of this :class:`.Hour`."""
        return f"Hour({float(self)})"


class JulianDay(float):
    """Class representing a Julian Day in floating point form.

    A Julian Day is a continuous count of days and fractions since 4713 BCE January 1, 12:00
    (proleptic Julian calendar). This class allows better introspection and conversion to
    other time formats.
    """

    def __new__(cls, value=0.0):
        """Create a Julian Day, rejecting non-finite values.

        Raises:
            :class:`.DomainError`: `value` is NaN or infinite
        """
        return super().__new__(cls, checkFinite(value, "Julian Day"))

    @classmethod
    def getJulianDay(cls, year, month, day, hour=0, minute=0, second=0.0) -> JulianDay:
        """From a datetime in UTC [ymdhms], return the :class:`.JulianDay`.

        See Also:
            :func:`.calendarToJulianDay`

        Raises:
            :class:`.InvalidDate`: fields don't name an existing date & time
        """
        return cls(calendarToJulianDay(year, month, day, hour, minute, second))

    @property
    def value(self) -> float:
        """``float``: plain day count."""
        return float(self)

    @property
    def modified(self) -> JulianDay:
        """:class:`.JulianDay`: the Modified Julian Day, this value minus 2400000.5."""
        return JulianDay(float(self) - const.MODIFIED_JULIAN_DAY_ZERO)

    @property
    def julian_centuries(self) -> float:
        """``float``: Julian centuries elapsed since J2000.0."""
        return (float(self) - const.J2000_0) / const.JULIAN_CENTURY

    def toCalendarDateTime(self) -> CalendarDateTime:
        """Return the UTC proleptic Gregorian date & time of this Julian Day."""
        return julianDayToCalendar(self)

    # Sidereal times

    def meanGreenwichSiderealTime(self) -> Hour:
        """Mean sidereal time for the Greenwich meridian.

        That is, the Greenwich hour angle of the mean vernal point (the intersection of the
        ecliptic of the date with the mean equator of the date).
        """
        return Hour(sidereal.meanGreenwichSiderealTime(self))

    def apparentGreenwichSiderealTime(self, correction: Callable[[float], float] | None = None) -> Hour:
        """Apparent sidereal time for the Greenwich meridian.

        That is, the Greenwich hour angle of the true vernal equinox, obtained by adding a
        correction that depends on the nutation in longitude and the true obliquity of the
        ecliptic.
        """
        return Hour(sidereal.apparentGreenwichSiderealTime(self, correction=correction))

    def meanLocalSiderealTime(self, longitude: float) -> Hour:
        """Mean sidereal time for a given longitude on Earth.

        Args:
            longitude (``float``): geographic longitude in degrees, positive WESTWARD. This is the
                contrary of the IAU convention, but consistent with the longitude orientation
                of all other planets (Meeus, AA p. 93).
        """
        return Hour(sidereal.meanLocalSiderealTime(self, longitude))

    def apparentLocalSiderealTime(
        self,
        longitude: float,
        correction: Callable[[float], float] | None = None,
    ) -> Hour:
        """Apparent sidereal time for a given longitude on Earth, positive WESTWARD."""
        return Hour(sidereal.apparentLocalSiderealTime(self, longitude, correction=correction))

    # Dynamical times

    def deltaT(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """ΔT = TT - UT1 at this instant, in days."""
        return JulianDay(dynamical.deltaT(self, provider=provider))

    def cumulativeLeapSeconds(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """TAI - UTC at this instant, in days."""
        return JulianDay(dynamical.cumulativeLeapSeconds(self, provider=provider))

    def TTtoUTC(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """Read this value as TT and return the corresponding UTC Julian Day."""
        return JulianDay(dynamical.TTtoUTC(self, provider=provider))

    def UTCtoTT(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """Read this value as UTC and return the corresponding TT Julian Day."""
        return JulianDay(dynamical.UTCtoTT(self, provider=provider))

    def TTtoTAI(self) -> JulianDay:
        """Read this value as TT and return the corresponding TAI Julian Day."""
        return JulianDay(dynamical.TTtoTAI(self))

    def TAItoTT(self) -> JulianDay:
        """Read this value as TAI and return the corresponding TT Julian Day."""
        return JulianDay(dynamical.TAItoTT(self))

    def TTtoUT1(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """Read this value as TT and return the corresponding UT1 Julian Day."""
        return JulianDay(dynamical.TTtoUT1(self, provider=provider))

    def UT1toTT(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """Read this value as UT1 and return the corresponding TT Julian Day."""
        return JulianDay(dynamical.UT1toTT(self, provider=provider))

    def UT1minusUTC(self, provider: TimeScaleProvider | None = None) -> JulianDay:
        """UT1 - UTC at this instant (read as TT), in days."""
        return JulianDay(dynamical.UT1minusUTC(self, provider=provider))

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDay`."""
        return f"JulianDay({float(self)})"

    def __str__(self):
        """Return the canonical description: the standard epoch name or ``JD <value>``.

        The epoch names are only used on an exact match with :data:`.J2000_0` / :data:`.B1950_0`.
        """
        if float(self) == const.J2000_0:
            return "J2000.0"
        if float(self) == const.B1950_0:
            return "B1950.0"
        return f"JD {float(self):.2f}"


J2000_0: JulianDay = JulianDay(const.J2000_0)
""":class:`.JulianDay`: standard epoch J2000.0."""

B1950_0: JulianDay = JulianDay(const.B1950_0)
""":class:`.JulianDay`: Besselian standard epoch B1950.0."""

MODIFIED_JULIAN_DAY_ZERO: JulianDay = JulianDay(const.MODIFIED_JULIAN_DAY_ZERO)
""":class:`.JulianDay`: zero point of the Modified Julian Day count."""
