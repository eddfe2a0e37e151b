from __future__ import annotations

# Standard Library Imports
import math

# Third Party Imports
import pytest

# astrochron Imports
from astrochron.common.exceptions import DomainError
from astrochron.physics.time import stardate
from astrochron.physics.time.calendar import CalendarDateTime
from astrochron.physics.time.stardate import Hour, JulianDay

# Local Imports
from ... import TEST_START_JD


def testEpochs():
    """Test the standard epoch constants."""
    assert stardate.J2000_0 == 2451545.0
    assert stardate.B1950_0 == 2433282.4235
    assert stardate.MODIFIED_JULIAN_DAY_ZERO == 2400000.5
    assert isinstance(stardate.J2000_0, JulianDay)
    assert stardate.J2000_0.modified == 51544.5
    assert stardate.MODIFIED_JULIAN_DAY_ZERO.modified == 0.0


def testModified():
    """Test the Modified Julian Day is a :class:`.JulianDay` offset by 2400000.5."""
    modified = TEST_START_JD.modified
    assert isinstance(modified, JulianDay)
    assert modified == 58453.5
    assert modified.value == 58453.5
    assert type(modified.value) is float


def testStringFormats():
    """Test the canonical description of a Julian Day."""
    assert str(JulianDay(2451545.0)) == "J2000.0"
    assert str(JulianDay(2433282.4235)) == "B1950.0"
    assert str(JulianDay(2451545.25)) == "JD 2451545.25"
    assert str(JulianDay(2451545.000001)) == "JD 2451545.00"
    assert repr(JulianDay(2451545.25)) == "JulianDay(2451545.25)"
    assert f"{JulianDay(2451545.0):.1f}" == "2451545.0"


def testNonFinite():
    """Test that NaN & infinite values are rejected on construction."""
    for bad in (math.nan, math.inf, -math.inf):
        with pytest.raises(DomainError):
            JulianDay(bad)
    with pytest.raises(DomainError):
        JulianDay(JulianDay(2451545.0) + math.inf)


def testArithmetic():
    """Test that a :class:`.JulianDay` behaves as a plain number and is immutable."""
    julian_day = JulianDay(2451545.0)
    later = julian_day + 1.5
    assert later == 2451546.5
    assert julian_day == 2451545.0
    assert JulianDay(later) > julian_day
    with pytest.raises(AttributeError):
        julian_day.value = 0.0


def testCalendarRoundTrip():
    """Test converting between :class:`.JulianDay` and :class:`.CalendarDateTime`."""
    calendar = TEST_START_JD.toCalendarDateTime()
    assert calendar == CalendarDateTime(2018, 12, 1, 12, 0, 0.0)
    julian_day = calendar.toJulianDay()
    assert isinstance(julian_day, JulianDay)
    assert julian_day == TEST_START_JD


def testJulianCenturies():
    """Test the elapsed Julian centuries since J2000.0."""
    assert JulianDay(2451545.0).julian_centuries == 0.0
    assert JulianDay(2451545.0 + 36525.0).julian_centuries == 1.0
    # Meeus, Example 12.a
    assert JulianDay(2446895.5).julian_centuries == pytest.approx(-0.127296372348, abs=1e-12)


def testHour():
    """Test the :class:`.Hour` conversions."""
    hour = Hour(13.5)
    assert hour.value == 13.5
    assert hour.degrees == 202.5
    assert hour.radians == pytest.approx(202.5 * math.pi / 180.0)
    assert repr(hour) == "Hour(13.5)"

    hours, minutes, seconds = Hour(13.0 + 10.0 / 60.0 + 46.3668 / 3600.0).toHMS()
    assert (hours, minutes) == (13, 10)
    assert seconds == pytest.approx(46.3668, abs=1e-6)
