from __future__ import annotations

# Third Party Imports
import pytest
from numpy import linspace

# astrochron Imports
from astrochron.common.exceptions import DomainError
from astrochron.physics.maths import wrapHours24
from astrochron.physics.time.sidereal import (
    apparentGreenwichSiderealTime,
    apparentLocalSiderealTime,
    meanGreenwichSiderealTime,
    meanLocalSiderealTime,
)
from astrochron.physics.time.stardate import Hour, JulianDay

# Local Imports
from ... import MEEUS_EXAMPLE_JD, TEST_START_JD

SIDEREAL_DAY_EXCESS: float = 0.0657098244
"""``float``: hours gained by sidereal time over one mean solar day."""


def hms(hours: int, minutes: int, seconds: float) -> float:
    """Return the decimal hours of an hours, minutes & seconds triplet."""
    return hours + minutes / 60.0 + seconds / 3600.0


def testMeanSiderealMeeusExamples():
    """Mean sidereal time at Greenwich (Meeus, Examples 12.a & 12.b)."""
    assert meanGreenwichSiderealTime(MEEUS_EXAMPLE_JD) == pytest.approx(hms(13, 10, 46.3668), abs=1e-6)
    assert meanGreenwichSiderealTime(2446896.30625) == pytest.approx(hms(8, 34, 57.0896), abs=1e-6)


def testApparentSiderealMeeusExample():
    """Apparent sidereal time at Greenwich (Meeus, Example 12.a, continued in chapter 22)."""
    julian_day = JulianDay(2446895.5)
    assert apparentGreenwichSiderealTime(julian_day) == pytest.approx(hms(13, 10, 46.1351), abs=1e-5)
    # The correction can be supplied by the caller
    assert apparentGreenwichSiderealTime(julian_day, correction=lambda _: 0.0) == pytest.approx(
        meanGreenwichSiderealTime(julian_day),
    )
    assert apparentGreenwichSiderealTime(julian_day, correction=lambda _: 15.0) == pytest.approx(
        meanGreenwichSiderealTime(julian_day) + 1.0 / 3600.0,
    )


def testRange():
    """Every sidereal time is in [0, 24) hours."""
    for julian_day in linspace(2415020.0, 2488070.0, 211):
        for value in (
            meanGreenwichSiderealTime(julian_day),
            apparentGreenwichSiderealTime(julian_day),
            meanLocalSiderealTime(julian_day, 170.0),
            apparentLocalSiderealTime(julian_day, -170.0),
        ):
            assert 0.0 <= value < 24.0


def testSiderealRate():
    """Sidereal time advances about 24.0657 hours per mean solar day."""
    for julian_day in (2415020.0, TEST_START_JD, 2469807.5):
        advance = wrapHours24(meanGreenwichSiderealTime(julian_day + 1.0) - meanGreenwichSiderealTime(julian_day))
        assert advance == pytest.approx(SIDEREAL_DAY_EXCESS, abs=1e-6)


def testLongitudeWestPositive():
    """Local sidereal time treats longitude as positive WEST of Greenwich."""
    gmst = meanGreenwichSiderealTime(TEST_START_JD)
    # 75 degrees west is 5 hours behind Greenwich
    assert meanLocalSiderealTime(TEST_START_JD, 75.0) == pytest.approx(wrapHours24(gmst - 5.0))
    assert meanLocalSiderealTime(TEST_START_JD, -75.0) == pytest.approx(wrapHours24(gmst + 5.0))
    difference = meanLocalSiderealTime(TEST_START_JD, -75.0) - meanLocalSiderealTime(TEST_START_JD, 75.0)
    assert wrapHours24(difference) == pytest.approx(10.0)
    assert meanLocalSiderealTime(TEST_START_JD, 0.0) == pytest.approx(gmst)

    gast = apparentGreenwichSiderealTime(TEST_START_JD)
    assert apparentLocalSiderealTime(TEST_START_JD, 90.0) == pytest.approx(wrapHours24(gast - 6.0))


def testNonFinite():
    """Test that non-finite inputs are rejected."""
    with pytest.raises(DomainError):
        meanGreenwichSiderealTime(float("nan"))
    with pytest.raises(DomainError):
        meanLocalSiderealTime(2451545.0, float("inf"))


def testJulianDayMethods():
    """Test the sidereal methods of :class:`.JulianDay` return :class:`.Hour` values."""
    julian_day = JulianDay(2446896.30625)
    gmst = julian_day.meanGreenwichSiderealTime()
    assert isinstance(gmst, Hour)
    assert gmst == pytest.approx(hms(8, 34, 57.0896), abs=1e-6)

    gast = julian_day.apparentGreenwichSiderealTime()
    assert isinstance(gast, Hour)
    assert gast == pytest.approx(hms(8, 34, 56.853), abs=1e-5)

    hours, minutes, _ = gast.toHMS()
    assert (hours, minutes) == (8, 34)

    assert isinstance(julian_day.meanLocalSiderealTime(77.0656), Hour)
    assert isinstance(julian_day.apparentLocalSiderealTime(77.0656), Hour)
    assert julian_day.meanLocalSiderealTime(77.0656) == pytest.approx(
        wrapHours24(gmst - 77.0656 / 15.0),
    )
