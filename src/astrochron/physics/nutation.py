"""Calculate Earth nutation parameters.

This module stores the coefficients of the nutation series and evaluates nutation in
longitude & obliquity, the obliquity of the ecliptic, and the equation of the equinoxes
used to turn mean sidereal time into apparent sidereal time.

References:
    :cite:t:`meeus_1998_algorithms`, Chapter 22
"""

from __future__ import annotations

# Standard Library Imports
from functools import lru_cache
from importlib import resources
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array, cos, deg2rad, dot, polyval, sin

# Local Imports
from ..common.utilities import checkFinite, loadDatFile
from . import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray


NUTATION_MODULE: str = "astrochron.physics.data.nutation"
"""``str``: defines nutation data module location."""


NUTATION_1980_63: str = "nut63.dat"
"""``str``: defines nutation data file for the 63-term 1980 nutation model."""


_MEAN_ELONGATION_MOON = array([1.0 / 189474.0, -0.0019142, 445267.111480, 297.85036])
_MEAN_ANOMALY_SUN = array([-1.0 / 300000.0, -0.0001603, 35999.050340, 357.52772])
_MEAN_ANOMALY_MOON = array([1.0 / 56250.0, 0.0086972, 477198.867398, 134.96298])
_ARGUMENT_LATITUDE_MOON = array([1.0 / 327270.0, -0.0036825, 483202.017538, 93.27191])
_ASCENDING_NODE_MOON = array([1.0 / 450000.0, 0.0020708, -1934.136261, 125.04452])

# Laskar's mean obliquity, arcseconds, in powers of U = T / 100 (highest power first)
_LASKAR_OBLIQUITY = array(
    [2.45, 5.79, 27.87, 7.12, -39.05, -249.67, -51.38, 1999.25, -1.55, -4680.93, 84381.448],
)


@lru_cache(maxsize=5)
def getNutationSeries() -> tuple[ndarray, ndarray]:
    """Return the 63-term IAU 1980 Nutation Theory coefficients.

    Note:
        This function is cached so repeated calls shouldn't need to re-read the file.

    References:
        :cite:t:`meeus_1998_algorithms`, Table 22.A

    Returns:
        ``tuple``: (real coefficients in arcseconds, integer argument multipliers)
    """
    res = resources.files(NUTATION_MODULE).joinpath(NUTATION_1980_63)
    with resources.as_file(res) as file_resource:
        nut_data = array(loadDatFile(file_resource))

    integers = nut_data[::, :5].astype(int)
    reals = nut_data[::, 5:9] * 0.0001

    return reals, integers


def _julianCenturies(julian_day) -> float:
    return (checkFinite(julian_day, "julian_day") - const.J2000_0) / const.JULIAN_CENTURY


def _fundamentalArguments(ttt: float) -> ndarray:
    """Return D, M, M', F, Omega in radians for `ttt` Julian centuries since J2000.0."""
    return deg2rad(
        array(
            [
                polyval(_MEAN_ELONGATION_MOON, ttt),
                polyval(_MEAN_ANOMALY_SUN, ttt),
                polyval(_MEAN_ANOMALY_MOON, ttt),
                polyval(_ARGUMENT_LATITUDE_MOON, ttt),
                polyval(_ASCENDING_NODE_MOON, ttt),
            ],
        ),
    )


def _nutation(ttt: float) -> tuple[float, float]:
    reals, integers = getNutationSeries()
    arguments = dot(integers, _fundamentalArguments(ttt))
    delta_psi = dot(reals[::, 0] + reals[::, 1] * ttt, sin(arguments))
    delta_eps = dot(reals[::, 2] + reals[::, 3] * ttt, cos(arguments))
    return float(delta_psi), float(delta_eps)


def nutationInLongitude(julian_day) -> float:
    """Nutation in longitude, :math:`\\Delta\\psi`, in arcseconds."""
    return _nutation(_julianCenturies(julian_day))[0]


def nutationInObliquity(julian_day) -> float:
    """Nutation in obliquity, :math:`\\Delta\\epsilon`, in arcseconds."""
    return _nutation(_julianCenturies(julian_day))[1]


def meanObliquityOfEcliptic(julian_day) -> float:
    """Mean obliquity of the ecliptic in degrees.

    References:
        :cite:t:`meeus_1998_algorithms`, Eqn 22.3 (Laskar)

    Args:
        julian_day (``float``): Julian Day (dynamical time)

    Returns:
        ``float``: mean obliquity, degrees
    """
    return float(polyval(_LASKAR_OBLIQUITY, _julianCenturies(julian_day) / 100.0)) * const.ARCSEC2DEG


def trueObliquityOfEcliptic(julian_day) -> float:
    """True obliquity of the ecliptic (mean obliquity plus nutation in obliquity) in degrees."""
    return meanObliquityOfEcliptic(julian_day) + nutationInObliquity(julian_day) * const.ARCSEC2DEG


def apparentSiderealCorrection(julian_day) -> float:
    """Equation of the equinoxes, :math:`\\Delta\\psi \\cos\\epsilon`, in arcseconds.

    This is the amount by which apparent sidereal time exceeds mean sidereal time, with
    :math:`\\epsilon` the true obliquity of the ecliptic.

    References:
        :cite:t:`meeus_1998_algorithms`, Chapter 12

    Args:
        julian_day (``float``): Julian Day

    Returns:
        ``float``: correction, arcseconds
    """
    ttt = _julianCenturies(julian_day)
    delta_psi, delta_eps = _nutation(ttt)
    true_eps = float(polyval(_LASKAR_OBLIQUITY, ttt / 100.0)) + delta_eps
    return delta_psi * float(cos(true_eps * const.ARCSEC2RAD))
