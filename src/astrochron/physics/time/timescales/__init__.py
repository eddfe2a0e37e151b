"""Time-scale data package: ΔT models and leap-second (TAI - UTC) tables."""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Local Imports
from ... import constants as const

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .deltat import DeltaTModel
    from .loaders import LeapSecondLoader


@dataclass(frozen=True)
class LeapSecondEntry:
    """Data class to define one row of the TAI - UTC table."""

    julian_day: float
    """float: UTC Julian Day from which this row applies."""

    tai_minus_utc: float
    """float: TAI - UTC at :attr:`.mjd_reference` (seconds)."""

    mjd_reference: float
    """float: Modified Julian Day the drift is measured from."""

    drift_rate: float
    """float: Drift of TAI - UTC (seconds per day); zero from 1972 on."""


class TimeScaleProvider:
    """Supplies ΔT and cumulative leap seconds for a Julian Day, both as day fractions.

    The provider owns no data of its own; it composes a :class:`.DeltaTModel` with a
    :class:`.LeapSecondLoader`, either of which can be swapped for another source.
    """

    def __init__(self, deltat_model: DeltaTModel, leap_second_loader: LeapSecondLoader):
        """Initialize the provider.

        Args:
            deltat_model (:class:`.DeltaTModel`): source of ΔT = TT - UT1
            leap_second_loader (:class:`.LeapSecondLoader`): source of TAI - UTC
        """
        self.deltat_model = deltat_model
        self.leap_second_loader = leap_second_loader

    def deltaT(self, julian_day) -> float:
        """Return ΔT = TT - UT1 at `julian_day`, in days."""
        return self.deltat_model.deltaT(julian_day) * const.SEC2DAYS

    def cumulativeLeapSeconds(self, julian_day) -> float:
        """Return TAI - UTC at `julian_day`, in days."""
        return self.leap_second_loader.taiMinusUTC(julian_day) * const.SEC2DAYS


# Local Imports
# forward-facing API import
from .getter import getTimeScaleProvider  # noqa: E402, F401
