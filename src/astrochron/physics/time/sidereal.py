"""Sidereal time for the Greenwich meridian and for a geographic longitude.

All functions return hours in the range [0, 24).

References:
    :cite:t:`meeus_1998_algorithms`, Chapter 12
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ...common.utilities import checkFinite
from .. import constants as const
from ..maths import wrapHours24
from ..nutation import apparentSiderealCorrection

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable


def meanGreenwichSiderealTime(julian_day) -> float:
    """Determine the mean sidereal time at Greenwich associated with the given `julian_day`.

    References:
        :cite:t:`meeus_1998_algorithms`, Eqn 12.4

    Args:
        julian_day (:class:`.JulianDay`): Julian Day (UT) to convert to GMST

    Returns:
        ``float``: Greenwich mean sidereal time in hours
    """
    elapsed_days = checkFinite(julian_day, "julian_day") - const.J2000_0
    ttt = elapsed_days / const.JULIAN_CENTURY
    gmst = (
        280.46061837
        + 360.98564736629 * elapsed_days
        + 0.000387933 * ttt**2
        - ttt**3 / 38710000.0
    )
    # Convert from degrees to hours
    return wrapHours24(gmst * const.DEG2HOURS)


def apparentGreenwichSiderealTime(
    julian_day,
    correction: Callable[[float], float] | None = None,
) -> float:
    """Determine the apparent sidereal time at Greenwich.

    Args:
        julian_day (:class:`.JulianDay`): Julian Day to convert to GAST
        correction (``callable``, optional): function of the Julian Day returning the
            equation of the equinoxes in arcseconds. Defaults to
            :func:`.apparentSiderealCorrection`.

    Returns:
        ``float``: Greenwich apparent sidereal time in hours
    """
    if correction is None:
        correction = apparentSiderealCorrection
    gmst = meanGreenwichSiderealTime(julian_day)
    return wrapHours24(gmst + correction(float(julian_day)) * const.ARCSEC2HOURS)


def _longitudeToHours(longitude: float) -> float:
    """Convert a longitude in degrees to hours, passing through radians."""
    return checkFinite(longitude, "longitude") * const.DEG2RAD * const.RAD2HOURS


def meanLocalSiderealTime(julian_day, longitude: float) -> float:
    """Determine the mean sidereal time for a given longitude on Earth.

    Note:
        `longitude` is measured positively WESTWARD from Greenwich. This is the contrary of the
        IAU convention, but it is consistent with the longitude orientation of all other planets
        (see :cite:t:`meeus_1998_algorithms`, p. 93). Passing an eastern longitude therefore
        requires a negative value.

    Args:
        julian_day (:class:`.JulianDay`): Julian Day
        longitude (``float``): geographic longitude, degrees, positive west

    Returns:
        ``float``: local mean sidereal time in hours
    """
    return wrapHours24(meanGreenwichSiderealTime(julian_day) - _longitudeToHours(longitude))


def apparentLocalSiderealTime(
    julian_day,
    longitude: float,
    correction: Callable[[float], float] | None = None,
) -> float:
    """Determine the apparent sidereal time for a given longitude on Earth, positive WESTWARD.

    See Also:
        :func:`.meanLocalSiderealTime` for the longitude sign convention.
    """
    gast = apparentGreenwichSiderealTime(julian_day, correction=correction)
    return wrapHours24(gast - _longitudeToHours(longitude))
