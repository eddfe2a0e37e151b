"""Global math, physics & time constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`meeus_1998_algorithms`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
DAYS2SEC = 24.0 * 3600
SEC2DAYS = 1.0 / DAYS2SEC
DEG2RAD = pi / 180.0
RAD2HOURS = 12.0 / pi
DEG2HOURS = 1.0 / 15.0
HOURS2DEG = 15.0
ARCSEC2DEG = 1.0 / 3600.0
ARCSEC2RAD = ARCSEC2DEG * DEG2RAD
ARCSEC2HOURS = ARCSEC2DEG * DEG2HOURS  # 1 / 54000

# Time constants
JULIAN_CENTURY = 36525.0  # days
JULIAN_YEAR = 365.25  # days
HOURS_PER_DAY = 24.0

J2000_0: float = 2451545.0
"""``float``: Julian Day of the standard epoch J2000.0, 2000 Jan 1.5 TT."""

B1950_0: float = 2433282.4235
"""``float``: Julian Day of the Besselian standard epoch B1950.0."""

MODIFIED_JULIAN_DAY_ZERO: float = 2400000.5
"""``float``: Julian Day of the Modified Julian Day zero point, 1858 Nov 17.0."""

TT_MINUS_TAI: float = 32.184
"""``float``: fixed offset TT - TAI, in seconds."""
