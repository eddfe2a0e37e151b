"""General mathematics functions that provided extended capability to `numpy`.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Third Party Imports
from numpy import fmod

# Local Imports
from . import constants as const


def wrapAngle(angle: float, period: float) -> float:
    r"""Force `angle` into range of :math:`[0, period)`."""
    # Fmod takes sign of dividend (first arg)
    if (angle := float(fmod(angle, period))) < 0:
        angle += period
    # A tiny negative remainder can round up to exactly `period`
    if angle >= period:
        angle -= period
    return angle


def wrapHours24(hours: float) -> float:
    r"""Force angle in hours into range of :math:`[0, 24)`."""
    return wrapAngle(hours, const.HOURS_PER_DAY)
